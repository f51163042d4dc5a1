"""Core data models for Skillpress."""

from .entities import (
    BuildResult,
    Fragment,
    SkillBuild,
    SkillConfig,
    SkillListing,
    SkillSource,
)

__all__ = [
    "BuildResult",
    "Fragment",
    "SkillBuild",
    "SkillConfig",
    "SkillListing",
    "SkillSource",
]
