"""Pydantic models for JSON output schemas.

This module defines the validated JSON schemas for CLI commands that support
--json output. Field names are part of the public output format.
"""

from pydantic import BaseModel, ConfigDict, Field

from claw_git.status.models.status_data import ChangeEntry, StatusData


class ChangeEntryResponse(BaseModel):
    """One changed file."""

    model_config = ConfigDict(strict=True)

    status: str = Field(..., min_length=1, max_length=1)
    file: str


class LastCommitResponse(BaseModel):
    """Most recent commit (hash, subject, relative time)."""

    model_config = ConfigDict(strict=True)

    hash: str
    msg: str
    time: str


class RemoteResponse(BaseModel):
    """Divergence from the upstream branch."""

    model_config = ConfigDict(strict=True)

    ahead: int = Field(..., ge=0)
    behind: int = Field(..., ge=0)


class StatusResponse(BaseModel):
    """JSON response schema for `claw-git status --json`.

    Attributes:
        branch: Current branch, None on a detached HEAD
        staged: Index changes
        unstaged: Worktree changes
        untracked: Untracked paths
        last: Last commit, None in an empty repository
        remote: Ahead/behind counts
    """

    model_config = ConfigDict(strict=True)

    branch: str | None
    staged: list[ChangeEntryResponse]
    unstaged: list[ChangeEntryResponse]
    untracked: list[str]
    last: LastCommitResponse | None
    remote: RemoteResponse


class BranchesResponse(BaseModel):
    """JSON response schema for `claw-git branches --json`.

    Attributes:
        current: Current branch, None on a detached HEAD
        branches: All local branch names
    """

    model_config = ConfigDict(strict=True)

    current: str | None
    branches: list[str]


def _entries_to_pydantic(entries: list[ChangeEntry]) -> list[ChangeEntryResponse]:
    return [ChangeEntryResponse(status=entry.status, file=entry.path) for entry in entries]


def status_data_to_pydantic(status: StatusData) -> StatusResponse:
    """Convert StatusData to its validated JSON model."""
    last = None
    if status.last_commit is not None:
        last = LastCommitResponse(
            hash=status.last_commit.short_hash,
            msg=status.last_commit.subject,
            time=status.last_commit.relative_time,
        )

    return StatusResponse(
        branch=status.branch,
        staged=_entries_to_pydantic(status.tree.staged),
        unstaged=_entries_to_pydantic(status.tree.unstaged),
        untracked=list(status.tree.untracked),
        last=last,
        remote=RemoteResponse(ahead=status.remote.ahead, behind=status.remote.behind),
    )
