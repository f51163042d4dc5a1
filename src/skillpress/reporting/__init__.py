"""Terminal reporting for builds and listings."""

from .stdout import BuildReporter, render_listing

__all__ = ["BuildReporter", "render_listing"]
