"""
Configuration loader — reads exgen.yml into a GeneratorConfig.

It reads YAML, validates against the Pydantic schema, and resolves
relative paths against the directory holding the config file.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from exgen.core.errors import ConfigError
from exgen.core.models.config import GeneratorConfig

logger = logging.getLogger(__name__)

# Default config filename
CONFIG_FILE = "exgen.yml"

_PATH_KEYS = ("template_path", "default_template", "output_dir")


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Search for exgen.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to exgen.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / CONFIG_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_config(path: Path | None = None, *, required: bool = False) -> GeneratorConfig:
    """Load and validate generator configuration.

    Args:
        path: Explicit path to exgen.yml. If None, searches upward.
        required: Raise when no config file can be found instead of
            falling back to defaults.

    Returns:
        Validated GeneratorConfig.

    Raises:
        ConfigError: If the file is missing (explicit path or ``required``)
            or invalid.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            if required:
                raise ConfigError(f"No {CONFIG_FILE} found. Specify one with --config.")
            logger.debug("No %s found, using defaults", CONFIG_FILE)
            return GeneratorConfig()

    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}", path=path)

    logger.debug("Loading config from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}", path=path) from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}", path=path) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(
            f"Expected a YAML mapping in {path}, got {type(data).__name__}", path=path
        )

    # The YAML may wrap everything under an "exgen" key or be flat
    data = data.get("exgen", data) if "exgen" in data else data
    if not isinstance(data, dict):
        raise ConfigError(f"Expected 'exgen' to be a mapping in {path}", path=path)

    # An unset output_dir stays relative to the working directory
    base = path.parent.resolve()
    for key in _PATH_KEYS:
        value = data.get(key)
        if value is not None and not Path(str(value)).is_absolute():
            data[key] = base / str(value)

    try:
        config = GeneratorConfig.model_validate(data)
    except Exception as e:
        raise ConfigError(f"Invalid configuration in {path}: {e}", path=path) from e

    logger.info("Loaded config from %s (prefix=%s)", path, config.prefix)
    return config
