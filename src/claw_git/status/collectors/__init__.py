"""Status information collectors."""

from claw_git.status.collectors.git import collect_status

__all__ = [
    "collect_status",
]
