"""Service configuration loader.

The file is YAML with up to three top-level sections (``server``,
``logging``, ``instructions``); omitted sections take their defaults.
"""
from pathlib import Path

import yaml
from pydantic import ValidationError

from .schemas import ServiceConfig


def load_config(config_path: str | Path) -> ServiceConfig:
    """
    Read a service config file and validate it into a ServiceConfig.

    Every failure other than a missing file is reported as ValueError
    naming the file, so callers only need one except clause for bad input.

    Args:
        config_path: Path to the YAML file

    Returns:
        Validated ServiceConfig instance

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the file is empty, is not valid YAML, is not a
            mapping of sections, or fails validation
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            sections = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Configuration file is not valid YAML: {config_path}: {e}") from e

    if sections is None:
        raise ValueError(f"Empty configuration file: {config_path}")
    if not isinstance(sections, dict):
        raise ValueError(
            f"Configuration file must map section names to settings: {config_path}"
        )

    try:
        return ServiceConfig.from_dict(sections)
    except ValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        raise ValueError(
            f"Invalid configuration in {config_path}: {location}: {first['msg']}"
        ) from e
