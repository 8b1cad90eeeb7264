"""Fake implementation of Git for testing.

FakeGit is an in-memory implementation that returns constructor-provided
state and records mutating calls, enabling fast CLI tests without a git
binary.
"""

from pathlib import Path

from claw_git.core.git.abc import Git
from claw_git.core.subprocess import GitCommandError
from claw_git.status.models.status_data import (
    CommitSummary,
    RemoteDivergence,
    WorkingTreeState,
)


def _failure(cmd: list[str], stderr: str) -> GitCommandError:
    return GitCommandError(
        f"Failed to run {' '.join(cmd)}\nstderr: {stderr}",
        cmd=cmd,
        returncode=1,
        stderr=stderr,
    )


class FakeGit(Git):
    """In-memory fake implementation of git operations.

    Constructor Injection:
    - All state is provided via constructor parameters
    - Mutating operations are recorded for assertions; stage_all() moves
      every change into the staged list so commit flows can be exercised

    Examples:
        # Outside any repository
        >>> git = FakeGit(repo_root=None)

        # Repository with one untracked file, offline remote
        >>> git = FakeGit(
        ...     working_tree=WorkingTreeState(untracked=["new.txt"]),
        ...     fetch_error="Could not resolve host",
        ... )
    """

    def __init__(
        self,
        *,
        repo_root: Path | None = Path("/repo"),
        current_branch: str | None = "main",
        working_tree: WorkingTreeState | None = None,
        last_commit: CommitSummary | None = None,
        divergence: RemoteDivergence | None = None,
        local_branches: list[str] | None = None,
        staged_files: list[str] | None = None,
        recent_commits: list[CommitSummary] | None = None,
        log_oneline: str = "",
        diffs: dict[bool, str] | None = None,
        stash_list: str = "",
        fetch_error: str | None = None,
        push_error: str | None = None,
    ) -> None:
        self._repo_root = repo_root
        self._current_branch = current_branch
        self._working_tree = working_tree if working_tree is not None else WorkingTreeState()
        self._last_commit = last_commit
        self._divergence = divergence if divergence is not None else RemoteDivergence()
        self._local_branches = local_branches if local_branches is not None else ["main"]
        self._staged_files = staged_files
        self._recent_commits = recent_commits or []
        self._log_oneline = log_oneline
        self._diffs = diffs or {}
        self._stash_list = stash_list
        self._fetch_error = fetch_error
        self._push_error = push_error

        self._staged_all = False
        self._fetch_calls: list[Path] = []
        self._commits: list[str] = []
        self._pushes: list[bool] = []
        self._pulls: list[bool] = []
        self._resets: list[bool] = []
        self._stash_calls: list[str] = []
        self._stage_all_calls = 0

    # Repository discovery

    def is_inside_work_tree(self, cwd: Path) -> bool:
        return self._repo_root is not None

    def get_repository_root(self, cwd: Path) -> Path | None:
        return self._repo_root

    # Read-only queries

    def get_current_branch(self, cwd: Path) -> str | None:
        return self._current_branch

    def get_working_tree_state(self, cwd: Path) -> WorkingTreeState:
        return self._working_tree

    def get_last_commit(self, cwd: Path) -> CommitSummary | None:
        return self._last_commit

    def get_ahead_behind(self, cwd: Path) -> RemoteDivergence:
        return self._divergence

    def list_local_branches(self, cwd: Path) -> list[str]:
        return list(self._local_branches)

    def get_staged_files(self, cwd: Path) -> list[str]:
        if self._staged_files is not None:
            return list(self._staged_files)
        tree = self._working_tree
        paths = [entry.path for entry in tree.staged]
        if self._staged_all:
            paths += [entry.path for entry in tree.unstaged if entry.path not in paths]
            paths += [path for path in tree.untracked if path not in paths]
        return paths

    def get_recent_commits(self, cwd: Path, *, limit: int) -> list[CommitSummary]:
        return self._recent_commits[:limit]

    def get_log_oneline(self, cwd: Path, *, limit: int) -> str:
        return "\n".join(self._log_oneline.splitlines()[:limit])

    def get_diff(self, cwd: Path, *, staged: bool) -> str:
        return self._diffs.get(staged, "")

    def list_stashes(self, cwd: Path) -> str:
        return self._stash_list

    # Mutating operations

    def fetch(self, cwd: Path) -> None:
        self._fetch_calls.append(cwd)
        if self._fetch_error is not None:
            raise _failure(["git", "fetch", "--quiet"], self._fetch_error)

    def stage_all(self, cwd: Path) -> None:
        self._stage_all_calls += 1
        self._staged_all = True

    def commit(self, cwd: Path, message: str) -> None:
        self._commits.append(message)

    def push(self, cwd: Path, *, force: bool) -> None:
        if self._push_error is not None:
            raise _failure(["git", "push"], self._push_error)
        self._pushes.append(force)

    def pull(self, cwd: Path, *, rebase: bool) -> None:
        self._pulls.append(rebase)

    def reset_last_commit(self, cwd: Path, *, soft: bool) -> None:
        self._resets.append(soft)

    def stash_save(self, cwd: Path) -> None:
        self._stash_calls.append("save")

    def stash_pop(self, cwd: Path) -> None:
        self._stash_calls.append("pop")

    def stash_drop(self, cwd: Path) -> None:
        self._stash_calls.append("drop")

    # Recorded calls, for test assertions only

    @property
    def fetch_calls(self) -> list[Path]:
        return self._fetch_calls.copy()

    @property
    def stage_all_calls(self) -> int:
        return self._stage_all_calls

    @property
    def commits(self) -> list[str]:
        """Messages passed to commit(), in order."""
        return self._commits.copy()

    @property
    def pushes(self) -> list[bool]:
        """The `force` flag of each push() call."""
        return self._pushes.copy()

    @property
    def pulls(self) -> list[bool]:
        """The `rebase` flag of each pull() call."""
        return self._pulls.copy()

    @property
    def resets(self) -> list[bool]:
        """The `soft` flag of each reset_last_commit() call."""
        return self._resets.copy()

    @property
    def stash_calls(self) -> list[str]:
        return self._stash_calls.copy()
