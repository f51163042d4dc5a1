"""Workspace discovery, skill loading and build orchestration."""

from .orchestrator import build_skill, build_workspace, describe_workspace

__all__ = ["build_skill", "build_workspace", "describe_workspace"]
