"""
Configuration loader — reads codehike-editor.yml into EditorConfig.

The file is optional. Without it every setting takes its default,
so a fresh Next.js + Code Hike project works with zero configuration.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from codehike_editor.core.models.config import EditorConfig

logger = logging.getLogger(__name__)

# Default config filename
EDITOR_CONFIG_FILE = "codehike-editor.yml"


class ConfigError(Exception):
    """Raised when the editor configuration is invalid."""


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for codehike-editor.yml starting from ``start_dir``, walking up.

    Returns:
        Path to the config file, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / EDITOR_CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break
        current = parent

    return None


def load_config(path: Path | None = None) -> EditorConfig:
    """Load and validate the editor configuration.

    Args:
        path: Explicit config path. None means "use defaults"; callers
            that want the upward search call find_config_file() first.

    Raises:
        ConfigError: If an explicit file is missing or invalid.
    """
    if path is None:
        logger.debug("No %s, using defaults", EDITOR_CONFIG_FILE)
        return EditorConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    logger.debug("Loading editor config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return EditorConfig()

    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        config = EditorConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid editor configuration: {e}") from e

    logger.info("Loaded editor config from %s", path)
    return config


def project_root(config_path: Path) -> Path:
    """Get the project root directory from a config file path."""
    return config_path.parent.resolve()
