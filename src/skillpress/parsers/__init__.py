"""Parsers for skill descriptor documents."""

from .skill_markdown import SkillDescriptor, extract_title, parse_skill_descriptor

__all__ = ["SkillDescriptor", "extract_title", "parse_skill_descriptor"]
