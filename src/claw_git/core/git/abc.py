"""High-level git operations interface.

This module provides a clean abstraction over git subprocess calls, making the
codebase more testable and maintainable.

Architecture:
- Git: Abstract base class defining the interface
- RealGit: Production implementation using subprocess
- FakeGit (tests/fakes/git.py): In-memory implementation for tests
"""

from abc import ABC, abstractmethod
from pathlib import Path

from claw_git.status.models.status_data import (
    CommitSummary,
    RemoteDivergence,
    WorkingTreeState,
)


class Git(ABC):
    """Abstract interface for git operations.

    All implementations (real and fake) must implement this interface.
    This interface contains ONLY runtime operations - no test setup methods.
    """

    # Repository discovery

    @abstractmethod
    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git working tree.

        Never raises: any git failure means "not a repository".
        """
        ...

    @abstractmethod
    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the working tree, or None."""
        ...

    # Read-only queries

    @abstractmethod
    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch (None on a detached HEAD)."""
        ...

    @abstractmethod
    def get_working_tree_state(self, cwd: Path) -> WorkingTreeState:
        """Get staged, unstaged and untracked changes from git status."""
        ...

    @abstractmethod
    def get_last_commit(self, cwd: Path) -> CommitSummary | None:
        """Get the most recent commit, or None in an empty repository."""
        ...

    @abstractmethod
    def get_ahead_behind(self, cwd: Path) -> RemoteDivergence:
        """Get commits ahead/behind the upstream of the current branch.

        Returns zero counts when there is no upstream or the query fails.
        """
        ...

    @abstractmethod
    def list_local_branches(self, cwd: Path) -> list[str]:
        """List all local branch names in the repository."""
        ...

    @abstractmethod
    def get_staged_files(self, cwd: Path) -> list[str]:
        """List staged file paths from the staged diff summary."""
        ...

    @abstractmethod
    def get_recent_commits(self, cwd: Path, *, limit: int) -> list[CommitSummary]:
        """Get up to `limit` most recent commits, newest first."""
        ...

    @abstractmethod
    def get_log_oneline(self, cwd: Path, *, limit: int) -> str:
        """Get `git log --oneline` text for the last `limit` commits."""
        ...

    @abstractmethod
    def get_diff(self, cwd: Path, *, staged: bool) -> str:
        """Get the working tree diff, or the staged diff when staged=True."""
        ...

    @abstractmethod
    def list_stashes(self, cwd: Path) -> str:
        """Get `git stash list` text (empty when there are no stashes)."""
        ...

    # Mutating operations

    @abstractmethod
    def fetch(self, cwd: Path) -> None:
        """Fetch from the default remote quietly.

        Raises:
            GitCommandError: If the fetch fails (e.g. no network)
        """
        ...

    @abstractmethod
    def stage_all(self, cwd: Path) -> None:
        """Stage every change, including untracked and deleted files."""
        ...

    @abstractmethod
    def commit(self, cwd: Path, message: str) -> None:
        """Create a commit from the staged changes with the given message."""
        ...

    @abstractmethod
    def push(self, cwd: Path, *, force: bool) -> None:
        """Push the current branch.

        Args:
            cwd: Working directory to run command in
            force: Use --force-with-lease instead of a plain push
        """
        ...

    @abstractmethod
    def pull(self, cwd: Path, *, rebase: bool) -> None:
        """Pull the current branch, rebasing instead of merging when rebase=True."""
        ...

    @abstractmethod
    def reset_last_commit(self, cwd: Path, *, soft: bool) -> None:
        """Undo the last commit.

        Args:
            cwd: Working directory to run command in
            soft: Keep the changes staged (--soft) instead of unstaged (mixed)
        """
        ...

    @abstractmethod
    def stash_save(self, cwd: Path) -> None:
        """Stash uncommitted changes."""
        ...

    @abstractmethod
    def stash_pop(self, cwd: Path) -> None:
        """Apply and drop the most recent stash."""
        ...

    @abstractmethod
    def stash_drop(self, cwd: Path) -> None:
        """Drop the most recent stash."""
        ...
