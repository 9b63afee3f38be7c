from __future__ import annotations

from pathlib import Path

import pytest

from orgcheck.config import DEFAULT_CONFIG, AnalyzerConfig, config_from_dict, load_analyzer_config


def test_defaults():
    config = load_analyzer_config()

    assert config is DEFAULT_CONFIG
    assert config.min_salary_ratio == 1.20
    assert config.max_salary_ratio == 1.50
    assert config.max_reporting_line_length == 4


def test_toml_tool_section(tmp_path):
    path = tmp_path / "pyproject.toml"
    path.write_text("[tool.orgcheck]\nmin_salary_ratio = 1.1\nmax_reporting_line_length = 6\n")

    config = load_analyzer_config(path)

    assert config == AnalyzerConfig(min_salary_ratio=1.1, max_salary_ratio=1.5, max_reporting_line_length=6)


def test_toml_top_level(tmp_path):
    path = tmp_path / "orgcheck.toml"
    path.write_text("max_salary_ratio = 2.0\n")

    assert load_analyzer_config(path).max_salary_ratio == 2.0


@pytest.mark.parametrize("body", [
    "orgcheck:\n  max_reporting_line_length: 3\n",
    "max_reporting_line_length: 3\n",
])
def test_yaml(tmp_path, body):
    path = tmp_path / "orgcheck.yaml"
    path.write_text(body)

    assert load_analyzer_config(path).max_reporting_line_length == 3


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "orgcheck.yml"
    path.write_text("")

    assert load_analyzer_config(path) == DEFAULT_CONFIG


def test_project_pyproject_matches_defaults():
    pyproject = Path(__file__).parent.parent / "pyproject.toml"

    assert load_analyzer_config(pyproject) == DEFAULT_CONFIG


def test_unknown_key():
    with pytest.raises(ValueError, match="Unknown config keys"):
        config_from_dict({"max_depth": 3})


def test_unsupported_format(tmp_path):
    path = tmp_path / "orgcheck.ini"
    path.write_text("")

    with pytest.raises(ValueError, match="Unsupported config format"):
        load_analyzer_config(path)


def test_missing_config_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_analyzer_config(tmp_path / "missing.toml")


@pytest.mark.parametrize("kwargs", [
    {"min_salary_ratio": 0},
    {"max_salary_ratio": -1},
    {"min_salary_ratio": 2.0, "max_salary_ratio": 1.5},
    {"max_reporting_line_length": -1},
])
def test_invalid_values(kwargs):
    with pytest.raises(ValueError):
        AnalyzerConfig(**kwargs)


@pytest.mark.parametrize("body", [
    "max_salary_ratio: [1.5\n",
    "orgcheck:\n  - 1\n  - 2\n",
    "- max_salary_ratio\n- 1.5\n",
    "just a string\n",
])
def test_malformed_yaml_is_a_value_error(tmp_path, body):
    path = tmp_path / "orgcheck.yaml"
    path.write_text(body)

    with pytest.raises(ValueError, match="Invalid config file"):
        load_analyzer_config(path)


def test_null_yaml_section_gives_defaults(tmp_path):
    path = tmp_path / "orgcheck.yaml"
    path.write_text("orgcheck:\n")

    assert load_analyzer_config(path) == DEFAULT_CONFIG


def test_malformed_toml_is_a_value_error(tmp_path):
    path = tmp_path / "orgcheck.toml"
    path.write_text("max_salary_ratio = \n")

    with pytest.raises(ValueError):
        load_analyzer_config(path)


@pytest.mark.parametrize("values", [
    {"max_reporting_line_length": 2.7},
    {"max_reporting_line_length": True},
    {"max_reporting_line_length": "4"},
    {"min_salary_ratio": "1.2"},
    {"max_salary_ratio": {"a": 1}},
    {"min_salary_ratio": False},
])
def test_wrongly_typed_values(values):
    with pytest.raises(ValueError, match="must be"):
        config_from_dict(values)


def test_integer_ratios_are_accepted():
    config = config_from_dict({"min_salary_ratio": 1, "max_salary_ratio": 2})

    assert config.min_salary_ratio == 1.0
    assert config.max_salary_ratio == 2.0
