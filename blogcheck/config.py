"""Configuration for a blog content root.

Settings resolve with the following precedence (highest to lowest):
1. Environment variable (BLOGCHECK_<KEY>)
2. Config file (``.blogcheck.yaml`` in the content root)
3. Built-in default

A content root without a config file validates with the defaults, which
match the standard site layout (blog-posts.json, promotions.json, public/).

Usage:
    from blogcheck.config import load_settings

    settings = load_settings(content_root)
    settings.max_image_bytes  # 1048576 unless overridden
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from blogcheck.errors import ConfigParseError, ConfigValueError

logger = logging.getLogger(__name__)

# Config file name (inside the content root)
CONFIG_FILENAME = ".blogcheck.yaml"

ENV_PREFIX = "BLOGCHECK_"

BYTES_PER_MB = 1024 * 1024


@dataclass(frozen=True)
class Settings:
    """Resolved validator settings.

    Attributes:
        posts_file: Blog posts document, relative to the content root.
        promotions_file: Promotions document, relative to the content root.
        public_dir: Static asset directory, relative to the content root.
        required_assets: File names expected inside public_dir.
        max_image_mb: Advisory size ceiling for post images.
        title_max_length: Advisory maximum title length.
        excerpt_max_length: Advisory maximum excerpt length.
        content_min_length: Advisory minimum trimmed content length.
    """

    posts_file: str = "blog-posts.json"
    promotions_file: str = "promotions.json"
    public_dir: str = "public"
    required_assets: tuple[str, ...] = ("logo.png", "trans_logo.png", "favicon.ico")
    max_image_mb: float = 1.0
    title_max_length: int = 100
    excerpt_max_length: int = 250
    content_min_length: int = 50

    @property
    def max_image_bytes(self) -> float:
        return self.max_image_mb * BYTES_PER_MB


def get_config_path(root: Path) -> Path:
    """Get the path to the config file for a content root."""
    return root / CONFIG_FILENAME


def load_config(root: Path) -> dict[str, Any]:
    """Load raw configuration from ``.blogcheck.yaml``.

    Args:
        root: Content root directory.

    Returns:
        Config dictionary. Returns empty dict if the file doesn't exist or is empty.

    Raises:
        ConfigParseError: If the file is not valid YAML or not a mapping.
    """
    config_file = get_config_path(root)

    if not config_file.exists():
        return {}

    try:
        content = config_file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigParseError(str(config_file), str(e)) from e

    if not content.strip():
        return {}

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigParseError(str(config_file), str(e)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError(str(config_file), "top level must be a mapping")
    return data


def _get_env_var_name(key: str) -> str:
    """Convert a setting key to environment variable name.

    Args:
        key: Setting key (e.g., "public_dir")

    Returns:
        Environment variable name (e.g., "BLOGCHECK_PUBLIC_DIR")
    """
    return f"{ENV_PREFIX}{key.upper()}"


def _coerce(key: str, value: Any, default: Any) -> Any:
    """Convert a raw config or environment value to the type of its default."""
    if isinstance(default, tuple):
        if isinstance(value, str):
            return tuple(part.strip() for part in value.split(",") if part.strip())
        if isinstance(value, list) and all(isinstance(v, str) for v in value):
            return tuple(value)
        raise ConfigValueError(key, value, "a list of file names")

    if isinstance(value, bool):
        raise ConfigValueError(key, value, type(default).__name__)

    if isinstance(default, int):
        try:
            return int(value)
        except (TypeError, ValueError) as e:
            raise ConfigValueError(key, value, "int") from e

    if isinstance(default, float):
        try:
            return float(value)
        except (TypeError, ValueError) as e:
            raise ConfigValueError(key, value, "float") from e

    if not isinstance(value, str):
        raise ConfigValueError(key, value, "str")
    return value


def load_settings(root: Path) -> Settings:
    """Resolve every setting for a content root.

    Args:
        root: Content root directory.

    Returns:
        Settings with environment and file overrides applied.

    Raises:
        ConfigParseError: If the config file cannot be parsed.
        ConfigValueError: If a value has the wrong type.
    """
    config = load_config(root)
    defaults = Settings()
    resolved: dict[str, Any] = {}

    for f in fields(Settings):
        default = getattr(defaults, f.name)
        env_value = os.environ.get(_get_env_var_name(f.name))
        if env_value is not None:
            resolved[f.name] = _coerce(f.name, env_value, default)
            logger.debug("Setting %s from environment: %r", f.name, resolved[f.name])
        elif f.name in config:
            resolved[f.name] = _coerce(f.name, config[f.name], default)
            logger.debug("Setting %s from %s: %r", f.name, CONFIG_FILENAME, resolved[f.name])

    unknown = sorted(set(config) - {f.name for f in fields(Settings)})
    if unknown:
        logger.debug("Ignoring unknown config keys: %s", ", ".join(unknown))

    return Settings(**resolved)
