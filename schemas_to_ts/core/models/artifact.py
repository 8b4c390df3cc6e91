"""
Generated artifact model — one file emitted by the schema compiler.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, field_validator

# First line of every generator-owned file.  Stale cleanup deletes a
# file only when its first line matches this exactly.
HEADER_COMMENT = "// Interface automatically generated by schemas-to-ts"

TS_EXTENSION = ".ts"


class GeneratedArtifact(BaseModel):
    """A file produced by the compiler.

    Attributes:
        path:    Absolute target path.
        content: Full file content, starting with ``HEADER_COMMENT``.
    """

    path: Path
    content: str

    @field_validator("path")
    @classmethod
    def _normalize_path(cls, value: Path) -> Path:
        if not value.is_absolute():
            raise ValueError("artifact path must be absolute")
        return Path(os.path.normpath(str(value)))

    def has_header(self) -> bool:
        """Whether the content is tagged as generator-owned."""
        return is_header_line(self.content.split("\n", 1)[0])


def is_header_line(line: str) -> bool:
    """Compare *line* to the marker, ignoring CR/LF differences."""
    return _strip_line_breaks(line) == _strip_line_breaks(HEADER_COMMENT)


def _strip_line_breaks(text: str) -> str:
    return text.replace("\r", "").replace("\n", "")
