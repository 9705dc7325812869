#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for configuration file discovery and loading."""

import argparse
import json
from pathlib import Path

import pytest

from md2jira.cli.config import find_config_in_parents, load_config_file, load_config_with_priority


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigFile:
    """Tests for reading each supported format."""

    def test_toml(self, tmp_path: Path) -> None:
        """Test TOML files."""
        path = tmp_path / ".md2jira.toml"
        path.write_text('footnotes = true\nfootnote-start = 1\nfootnote_reference_format = "^{index}^"\n')
        assert load_config_file(path) == {
            "footnotes": True,
            "footnote-start": 1,
            "footnote_reference_format": "^{index}^",
        }

    def test_yaml(self, tmp_path: Path) -> None:
        """Test YAML files."""
        path = tmp_path / "settings.yaml"
        path.write_text("tables: true\nmax_nesting_level: 4\n")
        assert load_config_file(path) == {"tables": True, "max_nesting_level": 4}

    def test_empty_yaml(self, tmp_path: Path) -> None:
        """Test an empty YAML file is an empty configuration."""
        path = tmp_path / ".md2jira.yml"
        path.write_text("")
        assert load_config_file(path) == {}

    def test_yaml_not_a_mapping(self, tmp_path: Path) -> None:
        """Test a YAML list is rejected."""
        path = tmp_path / "settings.yaml"
        path.write_text("- one\n- two\n")
        with pytest.raises(argparse.ArgumentTypeError, match="mapping"):
            load_config_file(path)

    def test_json(self, tmp_path: Path) -> None:
        """Test JSON files."""
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"parse_footnotes": True}))
        assert load_config_file(path) == {"parse_footnotes": True}

    def test_invalid_json(self, tmp_path: Path) -> None:
        """Test malformed JSON."""
        path = tmp_path / "settings.json"
        path.write_text("{not json")
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid JSON"):
            load_config_file(path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Test malformed TOML."""
        path = tmp_path / "settings.toml"
        path.write_text("footnotes = = true")
        with pytest.raises(argparse.ArgumentTypeError, match="Invalid TOML"):
            load_config_file(path)

    def test_pyproject_section(self, tmp_path: Path) -> None:
        """Test the [tool.md2jira] table of pyproject.toml."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.md2jira]\ntables = true\n')
        assert load_config_file(path) == {"tables": True}

    def test_pyproject_without_section(self, tmp_path: Path) -> None:
        """Test a pyproject.toml with no md2jira table."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n')
        assert load_config_file(path) == {}

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test a path that does not exist."""
        with pytest.raises(argparse.ArgumentTypeError, match="does not exist"):
            load_config_file(tmp_path / "nope.toml")

    def test_directory(self, tmp_path: Path) -> None:
        """Test a directory is not a config file."""
        with pytest.raises(argparse.ArgumentTypeError, match="not a file"):
            load_config_file(tmp_path)

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        """Test unknown extensions are rejected."""
        path = tmp_path / "settings.ini"
        path.write_text("[md2jira]\n")
        with pytest.raises(argparse.ArgumentTypeError, match="Unsupported"):
            load_config_file(path)


@pytest.mark.unit
@pytest.mark.cli
class TestConfigDiscovery:
    """Tests for finding a config file."""

    def test_found_in_start_dir(self, tmp_path: Path) -> None:
        """Test a config file in the start directory."""
        path = tmp_path / ".md2jira.json"
        path.write_text("{}")
        assert find_config_in_parents(tmp_path) == path.resolve()

    def test_found_in_parent(self, tmp_path: Path) -> None:
        """Test the search walks up the tree."""
        path = tmp_path / ".md2jira.toml"
        path.write_text("tables = true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config_in_parents(nested) == path.resolve()

    def test_nearest_wins(self, tmp_path: Path) -> None:
        """Test a closer file shadows one further up."""
        (tmp_path / ".md2jira.toml").write_text("tables = true\n")
        nested = tmp_path / "sub"
        nested.mkdir()
        closer = nested / ".md2jira.yaml"
        closer.write_text("tables: false\n")
        assert find_config_in_parents(nested) == closer.resolve()

    def test_dedicated_file_before_pyproject(self, tmp_path: Path) -> None:
        """Test .md2jira.* files take precedence over pyproject.toml in one directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.md2jira]\ntables = true\n")
        dedicated = tmp_path / ".md2jira.toml"
        dedicated.write_text("tables = false\n")
        assert find_config_in_parents(tmp_path) == dedicated.resolve()

    def test_pyproject_without_section_skipped(self, tmp_path: Path) -> None:
        """Test a pyproject.toml without our table is passed over."""
        (tmp_path / ".md2jira.toml").write_text("tables = true\n")
        nested = tmp_path / "project"
        nested.mkdir()
        (nested / "pyproject.toml").write_text('[project]\nname = "x"\n')
        assert find_config_in_parents(nested) == (tmp_path / ".md2jira.toml").resolve()


@pytest.mark.unit
@pytest.mark.cli
class TestLoadConfigWithPriority:
    """Tests for choosing between explicit, environment and discovered files."""

    def test_explicit_path_wins(self, tmp_path: Path) -> None:
        """Test --config beats the environment variable."""
        explicit = tmp_path / "explicit.json"
        explicit.write_text('{"tables": true}')
        env_path = tmp_path / "env.json"
        env_path.write_text('{"footnotes": true}')
        assert load_config_with_priority(str(explicit), str(env_path), start_dir=tmp_path) == {"tables": True}

    def test_env_path_beats_discovery(self, tmp_path: Path) -> None:
        """Test MD2JIRA_CONFIG beats a discovered file."""
        (tmp_path / ".md2jira.json").write_text('{"tables": true}')
        env_path = tmp_path / "env.json"
        env_path.write_text('{"footnotes": true}')
        assert load_config_with_priority(None, str(env_path), start_dir=tmp_path) == {"footnotes": True}

    def test_discovered(self, tmp_path: Path) -> None:
        """Test falling back to discovery."""
        (tmp_path / ".md2jira.json").write_text('{"tables": true}')
        assert load_config_with_priority(start_dir=tmp_path) == {"tables": True}

    def test_explicit_missing_raises(self, tmp_path: Path) -> None:
        """Test a named file that does not exist is an error."""
        with pytest.raises(argparse.ArgumentTypeError):
            load_config_with_priority(str(tmp_path / "missing.toml"))
