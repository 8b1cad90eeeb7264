"""Data models for status command."""

from claw_git.status.models.status_data import (
    ChangeEntry,
    CommitSummary,
    RemoteDivergence,
    StatusData,
    WorkingTreeState,
)

__all__ = [
    "ChangeEntry",
    "CommitSummary",
    "RemoteDivergence",
    "StatusData",
    "WorkingTreeState",
]
