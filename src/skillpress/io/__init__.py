"""Shared file I/O helpers."""

from .files import read_text_file
from .json_io import load_json_file, write_text_atomic

__all__ = ["load_json_file", "read_text_file", "write_text_atomic"]
