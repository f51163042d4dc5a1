"""Config loading and normalization for Skillpress builds."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from skillpress.config.model import SkillpressConfig
from skillpress.constants.config import (
    CONFIG_ALLOWED_KEYS,
    CONFIG_FILENAME,
    CONFIG_LIST_KEYS,
    CONFIG_STRING_KEYS,
)
from skillpress.exceptions import ConfigError

logger = logging.getLogger(__name__)


def load_config(root: Path, config_path: Path | None = None) -> SkillpressConfig:
    """Load and validate workspace config from ``skillpress.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return SkillpressConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in CONFIG_ALLOWED_KEYS)
    if unknown:
        raise ConfigError(f"Unknown config key(s) in {path}: {', '.join(unknown)}")

    values: dict[str, Any] = {}
    for key in CONFIG_STRING_KEYS:
        if key in raw:
            values[key] = _coerce_filename(raw[key], key)
    for key in CONFIG_LIST_KEYS:
        if key in raw:
            values[key] = _coerce_string_list(raw[key], key)

    if "content_dirs" in values and not values["content_dirs"]:
        raise ConfigError("content_dirs must list at least one directory name")
    if "fragment_suffixes" in values and not values["fragment_suffixes"]:
        raise ConfigError("fragment_suffixes must list at least one suffix")

    logger.debug("Loaded config from %s", path)
    return SkillpressConfig(**values)


def _coerce_filename(value: object, key: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(f"{key} must be a non-empty string")
    cleaned = value.strip()
    if "/" in cleaned or "\\" in cleaned:
        raise ConfigError(f"{key} must be a bare file name, got {cleaned!r}")
    return cleaned


def _coerce_string_list(value: object, key: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, list):
        raise ConfigError(f"{key} must be a list of strings")
    items: list[str] = []
    for item in value:
        if not isinstance(item, str) or not item.strip():
            raise ConfigError(f"{key} entries must be non-empty strings")
        items.append(item.strip())
    return tuple(items)
