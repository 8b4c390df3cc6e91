"""
Directory layout — the host Strapi project's own folders.

Supplied by the host once per run and never mutated.  Everything the
generator must not touch is named here.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict


class AppDirectories(BaseModel):
    """Application folders; every one of them lives under ``root``."""

    model_config = ConfigDict(frozen=True)

    root: Path
    src: Path
    api: Path
    components: Path
    extensions: Path
    policies: Path
    middlewares: Path
    config: Path


class DistDirectories(BaseModel):
    model_config = ConfigDict(frozen=True)

    root: Path


class StaticDirectories(BaseModel):
    model_config = ConfigDict(frozen=True)

    public: Path


class DirectoryLayout(BaseModel):
    """Absolute paths of a Strapi project, grouped the way Strapi reports them."""

    model_config = ConfigDict(frozen=True)

    app: AppDirectories
    dist: DistDirectories
    static: StaticDirectories

    @classmethod
    def from_root(cls, root: Path | str) -> DirectoryLayout:
        """Build the conventional layout for a project rooted at *root*."""
        root_path = Path(os.path.normpath(os.path.abspath(root)))
        src = root_path / "src"
        return cls(
            app=AppDirectories(
                root=root_path,
                src=src,
                api=src / "api",
                components=src / "components",
                extensions=src / "extensions",
                policies=src / "policies",
                middlewares=src / "middlewares",
                config=root_path / "config",
            ),
            dist=DistDirectories(root=root_path / "dist"),
            static=StaticDirectories(public=root_path / "public"),
        )
