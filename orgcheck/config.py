"""Analyzer configuration: salary band multipliers and reporting-line limit."""

import tomllib
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

type ConfigDict = dict[str, float | int]


@dataclass(frozen=True)
class AnalyzerConfig:
    min_salary_ratio: float = 1.20
    max_salary_ratio: float = 1.50
    max_reporting_line_length: int = 4

    def __post_init__(self) -> None:
        if self.min_salary_ratio <= 0 or self.max_salary_ratio <= 0:
            raise ValueError("Salary ratios must be positive")
        if self.min_salary_ratio > self.max_salary_ratio:
            raise ValueError(
                f"min_salary_ratio ({self.min_salary_ratio}) exceeds "
                f"max_salary_ratio ({self.max_salary_ratio})"
            )
        if self.max_reporting_line_length < 0:
            raise ValueError("max_reporting_line_length cannot be negative")


DEFAULT_CONFIG = AnalyzerConfig()

_KNOWN_KEYS = {f.name for f in fields(AnalyzerConfig)}


def _read_config_file(path: Path) -> ConfigDict:
    match path.suffix:
        case ".toml":
            with open(path, "rb") as f:
                data = tomllib.load(f)
            if "tool" in data:
                data = data["tool"].get("orgcheck", {})
        case ".yaml" | ".yml":
            with open(path) as f:
                try:
                    data = yaml.safe_load(f)
                except yaml.YAMLError as exc:
                    raise ValueError(f"Invalid config file {path}: {exc}") from exc
            if isinstance(data, dict) and "orgcheck" in data:
                data = data["orgcheck"]
            if data is None:
                data = {}
        case ext:
            raise ValueError(f"Unsupported config format: {ext}")

    if not isinstance(data, dict):
        raise ValueError(f"Invalid config file {path}: expected a mapping of settings")
    return data


def _ratio(values: ConfigDict, key: str) -> float:
    value = values.get(key, getattr(DEFAULT_CONFIG, key))
    match value:
        case int() | float() if not isinstance(value, bool):
            return float(value)
        case _:
            raise ValueError(f"{key} must be a number, got {value!r}")


def _length(values: ConfigDict, key: str) -> int:
    value = values.get(key, getattr(DEFAULT_CONFIG, key))
    match value:
        case int() if not isinstance(value, bool):
            return value
        case _:
            raise ValueError(f"{key} must be an integer, got {value!r}")


def config_from_dict(values: ConfigDict) -> AnalyzerConfig:
    unknown = set(values) - _KNOWN_KEYS
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    return AnalyzerConfig(
        min_salary_ratio=_ratio(values, "min_salary_ratio"),
        max_salary_ratio=_ratio(values, "max_salary_ratio"),
        max_reporting_line_length=_length(values, "max_reporting_line_length"),
    )


def load_analyzer_config(path: str | Path | None = None) -> AnalyzerConfig:
    """Load analyzer settings from a TOML or YAML file.

    TOML files may keep the settings under ``[tool.orgcheck]`` (so a
    ``pyproject.toml`` works as-is) or at the top level. YAML files may
    nest them under an ``orgcheck:`` key. Without a path the defaults
    are returned.
    """
    if path is None:
        return DEFAULT_CONFIG

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    return config_from_dict(_read_config_file(path))
