#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for report options and configuration loading."""

import json

import pytest
import yaml

from spdxdiff.exceptions import ValidationError
from spdxdiff.options import ReportOptions, load_config_file, load_options_file, options_from_mapping


@pytest.mark.unit
class TestReportOptions:
    """Tests for the ReportOptions dataclass."""

    def test_defaults(self):
        """Test default option values."""
        options = ReportOptions()
        assert options.max_workers is None
        assert options.max_cell_chars == 32000
        assert options.sheet_name == "Document"
        assert options.parallel_fields is False

    def test_frozen(self):
        """Test that options cannot be mutated."""
        options = ReportOptions()
        with pytest.raises(AttributeError):
            options.max_workers = 4  # type: ignore[misc]

    def test_create_updated(self):
        """Test that create_updated returns a modified copy."""
        options = ReportOptions()
        updated = options.create_updated(max_workers=4)
        assert updated.max_workers == 4
        assert options.max_workers is None

    @pytest.mark.parametrize(
        "kwargs",
        [{"max_workers": 0}, {"max_workers": -1}, {"max_cell_chars": 0}, {"sheet_name": ""}],
    )
    def test_invalid_values(self, kwargs):
        """Test range validation."""
        with pytest.raises(ValueError):
            ReportOptions(**kwargs)


@pytest.mark.unit
class TestOptionsFromMapping:
    """Tests for options_from_mapping."""

    def test_hyphenated_keys(self):
        """Test that hyphenated keys map onto fields."""
        options = options_from_mapping({"max-workers": 2, "parallel_fields": True})
        assert options.max_workers == 2
        assert options.parallel_fields is True

    def test_base_preserved(self):
        """Test that unspecified fields come from the base options."""
        base = ReportOptions(sheet_name="Compare")
        assert options_from_mapping({"max_cell_chars": 100}, base=base).sheet_name == "Compare"

    def test_unknown_key(self):
        """Test that unknown keys are rejected."""
        with pytest.raises(ValidationError) as exc_info:
            options_from_mapping({"colour": "red"})
        assert exc_info.value.parameter_name == "colour"

    def test_invalid_value(self):
        """Test that invalid values become ValidationError."""
        with pytest.raises(ValidationError) as exc_info:
            options_from_mapping({"max_workers": -3})
        assert isinstance(exc_info.value.original_error, ValueError)


@pytest.mark.unit
class TestLoadConfigFile:
    """Tests for loading configuration files."""

    def test_json(self, tmp_path):
        """Test loading JSON."""
        path = tmp_path / "spdxdiff.json"
        path.write_text(json.dumps({"max_workers": 3}), encoding="utf-8")
        assert load_options_file(path).max_workers == 3

    def test_yaml(self, tmp_path):
        """Test loading YAML."""
        path = tmp_path / "spdxdiff.yaml"
        path.write_text(yaml.safe_dump({"sheet-name": "Docs", "parallel-fields": True}), encoding="utf-8")
        options = load_options_file(path)
        assert options.sheet_name == "Docs"
        assert options.parallel_fields is True

    def test_empty_yaml(self, tmp_path):
        """Test that an empty YAML file yields an empty mapping."""
        path = tmp_path / "empty.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_toml(self, tmp_path):
        """Test loading TOML."""
        path = tmp_path / "spdxdiff.toml"
        path.write_text("max_cell_chars = 1000\n", encoding="utf-8")
        assert load_options_file(path).max_cell_chars == 1000

    def test_pyproject_section(self, tmp_path):
        """Test reading the [tool.spdxdiff] table."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n\n[tool.spdxdiff]\nmax-workers = 5\n', encoding="utf-8")
        assert load_options_file(path).max_workers == 5

    def test_pyproject_without_section(self, tmp_path):
        """Test that a pyproject without the table gives default options."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "x"\n', encoding="utf-8")
        assert load_options_file(path) == ReportOptions()

    def test_missing_file(self, tmp_path):
        """Test that a missing file is reported."""
        with pytest.raises(ValidationError, match="does not exist"):
            load_config_file(tmp_path / "nope.json")

    def test_unsupported_extension(self, tmp_path):
        """Test that unknown formats are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(ValidationError, match="Unsupported config file format"):
            load_config_file(path)

    def test_malformed_json(self, tmp_path):
        """Test that parse errors are wrapped."""
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValidationError) as exc_info:
            load_config_file(path)
        assert exc_info.value.original_error is not None

    def test_non_mapping(self, tmp_path):
        """Test that a top-level list is rejected."""
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValidationError, match="must be a mapping"):
            load_config_file(path)
