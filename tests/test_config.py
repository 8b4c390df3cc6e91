"""
Tests for configuration loading — schemas-to-ts.yml and artifact manifests.
"""

import json
import textwrap
from pathlib import Path

import pytest

from schemas_to_ts.core.config.loader import find_config_file, load_plugin_config
from schemas_to_ts.core.config.manifest import load_artifact_manifest
from schemas_to_ts.core.errors import ConfigurationError
from schemas_to_ts.core.models import HEADER_COMMENT, DirectoryLayout, PluginConfig
from schemas_to_ts.core.use_cases.config_check import check_config


@pytest.fixture
def config_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        destinationFolder: types/generated
        commonInterfacesFolderName: shared
        logLevel: debug
        acceptedNamespaces:
          - api
          - plugin
        alwaysAddEnumSuffix: true
    """)
    path = tmp_path / "schemas-to-ts.yml"
    path.write_text(content)
    return path


class TestLoadPluginConfig:
    """Tests for load_plugin_config()."""

    def test_camel_case_keys(self, config_yml: Path):
        config = load_plugin_config(config_yml)
        assert config.destination_folder == "types/generated"
        assert config.common_interfaces_folder_name == "shared"
        assert config.log_level == "debug"

    def test_wrapped_format(self, tmp_path: Path):
        path = tmp_path / "schemas-to-ts.yml"
        path.write_text("schemas-to-ts:\n  destination_folder: out\n")
        assert load_plugin_config(path).destination_folder == "out"

    def test_empty_file_gives_defaults(self, tmp_path: Path):
        path = tmp_path / "schemas-to-ts.yml"
        path.write_text("")
        config = load_plugin_config(path)
        assert config == PluginConfig()
        assert config.common_interfaces_folder_name == "schemas-to-ts"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_plugin_config(tmp_path / "nonexistent.yml")

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "schemas-to-ts.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_plugin_config(path)

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "schemas-to-ts.yml"
        path.write_text("- a\n- b\n")
        with pytest.raises(ConfigurationError, match="Expected a YAML mapping"):
            load_plugin_config(path)

    def test_wrong_type_raises(self, tmp_path: Path):
        path = tmp_path / "schemas-to-ts.yml"
        path.write_text("destinationFolder: [1, 2]\n")
        with pytest.raises(ConfigurationError, match="Invalid plugin configuration"):
            load_plugin_config(path)

    def test_no_file_anywhere_gives_defaults(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert load_plugin_config() == PluginConfig()


class TestFindConfigFile:
    def test_finds_in_parent(self, config_yml: Path):
        nested = config_yml.parent / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_file(nested) == config_yml.resolve()

    def test_not_found(self, tmp_path: Path):
        assert find_config_file(tmp_path) is None


class TestLoadArtifactManifest:
    def test_yaml_manifest(self, tmp_path: Path):
        manifest = tmp_path / "artifacts.yml"
        manifest.write_text(textwrap.dedent(f"""\
            artifacts:
              - path: types/Article.ts
                content: |
                  {HEADER_COMMENT}
                  export interface Article {{}}
              - path: {tmp_path}/abs/Media.ts
                content: "{HEADER_COMMENT}\\n"
        """))
        artifacts = load_artifact_manifest(manifest, tmp_path / "proj")
        assert artifacts[0].path == tmp_path / "proj" / "types" / "Article.ts"
        assert artifacts[0].has_header()
        assert artifacts[1].path == tmp_path / "abs" / "Media.ts"

    def test_json_list_manifest(self, tmp_path: Path):
        manifest = tmp_path / "artifacts.json"
        manifest.write_text(json.dumps([{"path": "a.ts", "content": "x"}]))
        artifacts = load_artifact_manifest(manifest, tmp_path)
        assert artifacts[0].path == tmp_path / "a.ts"
        assert artifacts[0].has_header() is False

    def test_missing_content_raises(self, tmp_path: Path):
        manifest = tmp_path / "artifacts.yml"
        manifest.write_text("artifacts:\n  - path: a.ts\n")
        with pytest.raises(ConfigurationError, match="Invalid artifact #0"):
            load_artifact_manifest(manifest, tmp_path)

    def test_missing_manifest_raises(self, tmp_path: Path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_artifact_manifest(tmp_path / "none.yml", tmp_path)


class TestCheckConfig:
    def test_valid(self, layout: DirectoryLayout, strapi_root: Path):
        path = strapi_root / "schemas-to-ts.yml"
        path.write_text("destinationFolder: generated\n")
        result = check_config(layout, path)
        assert result.valid is True
        assert result.destination == strapi_root / "generated"
        assert not (strapi_root / "generated").exists()

    def test_reserved_destination(self, layout: DirectoryLayout, strapi_root: Path):
        path = strapi_root / "schemas-to-ts.yml"
        path.write_text("destinationFolder: src/api/types\n")
        result = check_config(layout, path)
        assert result.valid is False
        assert "inside the Strapi api" in result.errors[0]

    def test_auto_detected_file(self, layout: DirectoryLayout, strapi_root: Path):
        (strapi_root / "schemas-to-ts.yml").write_text("destinationFolder: generated\n")
        result = check_config(layout)
        assert result.config_path == (strapi_root / "schemas-to-ts.yml").resolve()
        assert result.valid is True

    def test_default_folders_warns(self, layout: DirectoryLayout, strapi_root: Path):
        path = strapi_root / "schemas-to-ts.yml"
        path.write_text("commonInterfacesFolderName: shared\n")
        result = check_config(layout, path)
        assert result.valid is True
        assert any("No destinationFolder" in w for w in result.warnings)
