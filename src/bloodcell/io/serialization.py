"""YAML serialization for AnalysisConfig."""

from __future__ import annotations

from pathlib import Path

import yaml

from bloodcell.core.config import AnalysisConfig
from bloodcell.core.exceptions import ConfigError


def save_config(config: AnalysisConfig, path: Path) -> None:
    """Write a config to a YAML file.

    Args:
        config: Configuration to serialize.
        path: File path to write.
    """
    with open(path, "w") as f:
        yaml.safe_dump(config.to_dict(), f, default_flow_style=False, sort_keys=False)


def load_config(path: Path) -> AnalysisConfig:
    """Read a config from a YAML file.

    Missing sections and keys fall back to defaults; an empty file gives
    the default config.

    Raises:
        ConfigError: If the file is missing or unreadable, is not valid
            YAML, or holds invalid values.
    """
    path = Path(path)
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config {path}: {e}") from e

    if data is None:
        return AnalysisConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"Config root must be a mapping, got {type(data).__name__}")
    return AnalysisConfig.from_dict(data)
