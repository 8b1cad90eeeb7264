"""Data models for status information."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ChangeEntry:
    """One file's change as reported by git status.

    ``status`` is the single-character porcelain code for the side of the
    index/worktree split this entry belongs to (e.g. ``M``, ``A``, ``D``).
    """

    status: str
    path: str


@dataclass(frozen=True)
class WorkingTreeState:
    """Staged, unstaged and untracked changes of a working tree."""

    staged: list[ChangeEntry] = field(default_factory=list)
    unstaged: list[ChangeEntry] = field(default_factory=list)
    untracked: list[str] = field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.staged) + len(self.unstaged) + len(self.untracked)

    @property
    def is_clean(self) -> bool:
        return self.total == 0


@dataclass(frozen=True)
class CommitSummary:
    """Information about a single commit."""

    short_hash: str
    subject: str
    relative_time: str


@dataclass(frozen=True)
class RemoteDivergence:
    """Commit counts relative to the upstream branch."""

    ahead: int = 0
    behind: int = 0


@dataclass(frozen=True)
class StatusData:
    """Everything the status presenters need, collected in one pass."""

    branch: str | None
    tree: WorkingTreeState
    last_commit: CommitSummary | None
    remote: RemoteDivergence
