"""Status renderers."""

from claw_git.status.renderers.quick import format_quick_line
from claw_git.status.renderers.simple import SimpleRenderer

__all__ = [
    "SimpleRenderer",
    "format_quick_line",
]
