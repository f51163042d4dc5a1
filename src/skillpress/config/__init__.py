"""Workspace configuration and per-skill metadata handling."""

from .loader import load_config
from .metadata import load_skill_config, parse_config
from .model import SkillpressConfig

__all__ = [
    "SkillpressConfig",
    "load_config",
    "load_skill_config",
    "parse_config",
]
