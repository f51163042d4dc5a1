"""Document assembly for skill fragments."""

from .assembler import assemble, render_note, strip_leading_heading

__all__ = ["assemble", "render_note", "strip_leading_heading"]
