"""
Tests for domain models — layout construction, destination tree, artifacts.
"""

from pathlib import Path

import pytest
from pydantic import ValidationError

from schemas_to_ts.core.models import (
    HEADER_COMMENT,
    DestinationTree,
    DirectoryLayout,
    GeneratedArtifact,
    PluginConfig,
    is_header_line,
)


class TestDirectoryLayout:
    def test_from_root(self):
        layout = DirectoryLayout.from_root("/proj/")
        assert layout.app.root == Path("/proj")
        assert layout.app.src == Path("/proj/src")
        assert layout.app.api == Path("/proj/src/api")
        assert layout.app.components == Path("/proj/src/components")
        assert layout.app.extensions == Path("/proj/src/extensions")
        assert layout.app.policies == Path("/proj/src/policies")
        assert layout.app.middlewares == Path("/proj/src/middlewares")
        assert layout.app.config == Path("/proj/config")
        assert layout.dist.root == Path("/proj/dist")
        assert layout.static.public == Path("/proj/public")

    def test_every_app_path_under_root(self):
        layout = DirectoryLayout.from_root("/proj")
        for path in layout.app.model_dump().values():
            assert path == layout.app.root or layout.app.root in path.parents

    def test_immutable(self):
        layout = DirectoryLayout.from_root("/proj")
        with pytest.raises(ValidationError):
            layout.app.root = Path("/other")


class TestDestinationTree:
    def test_roots_order_skips_unset(self):
        tree = DestinationTree(commons=Path("/c"), extensions=Path("/e"))
        assert list(tree.roots()) == [Path("/c"), Path("/e")]

    def test_roots_all(self):
        tree = DestinationTree(
            commons=Path("/c"), apis=Path("/a"), components=Path("/k"), extensions=Path("/e"),
            use_for_apis_and_components=True,
        )
        assert list(tree.roots()) == [Path("/c"), Path("/a"), Path("/k"), Path("/e")]

    def test_to_dict(self):
        d = DestinationTree(commons=Path("/c")).to_dict()
        assert d == {
            "commons": "/c",
            "apis": None,
            "components": None,
            "extensions": None,
            "use_for_apis_and_components": False,
        }


class TestGeneratedArtifact:
    def test_path_normalized(self):
        artifact = GeneratedArtifact(path="/proj/a/../b/X.ts", content="")
        assert artifact.path == Path("/proj/b/X.ts")

    def test_relative_path_rejected(self):
        with pytest.raises(ValidationError, match="artifact path must be absolute"):
            GeneratedArtifact(path="generated/common/Media.ts", content=HEADER_COMMENT)

    def test_has_header(self):
        assert GeneratedArtifact(path="/x.ts", content=f"{HEADER_COMMENT}\nrest").has_header()
        assert not GeneratedArtifact(path="/x.ts", content="// other\n").has_header()

    def test_header_line_ignores_line_breaks(self):
        assert is_header_line(HEADER_COMMENT + "\r\n")
        assert is_header_line(HEADER_COMMENT + "\n")
        assert not is_header_line(" " + HEADER_COMMENT)


class TestPluginConfig:
    def test_defaults(self):
        config = PluginConfig()
        assert config.destination_folder is None
        assert config.common_interfaces_folder_name == "schemas-to-ts"
        assert config.has_destination_folder() is False

    def test_blank_destination_not_configured(self):
        assert PluginConfig(destination_folder="  ").has_destination_folder() is False

    def test_extra_keys_ignored(self):
        config = PluginConfig.model_validate({"destinationFolder": "out", "usePrettierIfAvailable": True})
        assert config.destination_folder == "out"
        assert config.has_destination_folder() is True
