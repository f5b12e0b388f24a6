"""Run configuration for project-summary."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from project_summary.exceptions import ConfigError
from project_summary.github.client import DEFAULT_API_URL

DEFAULT_TITLE = "Project summary"

# Keys accepted in a YAML config file, mapped to ReportConfig fields.
CONFIG_KEYS = {
    "project-url": "project_url",
    "project_url": "project_url",
    "title": "title",
    "outputPath": "output_path",
    "output_path": "output_path",
    "token": "token",
    "interestingLabels": "interesting_labels",
    "interesting_labels": "interesting_labels",
    "uninterestingLabels": "uninteresting_labels",
    "uninteresting_labels": "uninteresting_labels",
    "api_url": "api_url",
}


def split_labels(value: str | list[str] | tuple[str, ...] | None) -> tuple[str, ...]:
    """Split a comma-separated label list.

    Entries are stripped and empty entries dropped, so "" yields ().
    """
    if not value:
        return ()
    if isinstance(value, str):
        parts = value.split(",")
    elif isinstance(value, list | tuple):
        parts = [str(part) for part in value if part is not None]
    else:
        raise ConfigError(f"Labels must be a comma-separated string or a list, got {value!r}")
    return tuple(part.strip() for part in parts if part.strip())


@dataclass
class ReportConfig:
    """Inputs for a single report run."""

    project_url: str
    output_path: Path
    token: str = ""
    title: str = DEFAULT_TITLE
    interesting_labels: tuple[str, ...] = field(default_factory=tuple)
    uninteresting_labels: tuple[str, ...] = field(default_factory=tuple)
    api_url: str = DEFAULT_API_URL

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ReportConfig:
        """Create config from a dictionary of raw input values.

        Args:
            data: Values keyed by ReportConfig field name. Label values may be
                comma-separated strings or lists.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If required fields are missing or a value has the wrong type.
        """
        missing = [key for key in ("project_url", "output_path") if not data.get(key)]
        if missing:
            raise ConfigError(f"Missing required fields: {', '.join(missing)}")

        return cls(
            project_url=_scalar(data, "project_url"),
            output_path=Path(_scalar(data, "output_path")),
            token=_scalar(data, "token"),
            title=_scalar(data, "title") or DEFAULT_TITLE,
            interesting_labels=split_labels(data.get("interesting_labels")),
            uninteresting_labels=split_labels(data.get("uninteresting_labels")),
            api_url=_scalar(data, "api_url") or DEFAULT_API_URL,
        )


def _scalar(data: dict[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if isinstance(value, dict | list | tuple):
        raise ConfigError(f"'{key}' must be a single value, got {value!r}")
    return str(value)


def load_config_file(config_path: Path) -> dict[str, Any]:
    """Read raw values from a YAML config file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Values keyed by ReportConfig field name.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file must contain a mapping: {config_path}")

    unknown = sorted(key for key in data if key not in CONFIG_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config keys in {config_path}: {', '.join(unknown)}")

    return {CONFIG_KEYS[key]: value for key, value in data.items()}
