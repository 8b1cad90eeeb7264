"""Production Git implementation using subprocess.

This module provides the real Git implementation that executes actual git
commands via subprocess.
"""

import subprocess
from pathlib import Path

from claw_git.core.commit_message import parse_stat_files
from claw_git.core.git.abc import Git
from claw_git.core.parsing import (
    COMMIT_RECORD_FORMAT,
    parse_branch_list,
    parse_commit_records,
    parse_left_right_counts,
    parse_porcelain_status,
)
from claw_git.core.subprocess import run_git, run_subprocess_with_context
from claw_git.status.models.status_data import (
    CommitSummary,
    RemoteDivergence,
    WorkingTreeState,
)


class RealGit(Git):
    """Production implementation using subprocess.

    All git operations execute actual git commands via subprocess.
    """

    def is_inside_work_tree(self, cwd: Path) -> bool:
        """Check whether cwd is inside a git working tree."""
        output = run_git(
            ["git", "rev-parse", "--is-inside-work-tree"],
            operation_context="detect git repository",
            cwd=cwd,
            silent=True,
        )
        return output == "true"

    def get_repository_root(self, cwd: Path) -> Path | None:
        """Get the top-level directory of the working tree."""
        output = run_git(
            ["git", "rev-parse", "--show-toplevel"],
            operation_context="find repository root",
            cwd=cwd,
            silent=True,
        )
        if not output:
            return None
        return Path(output)

    def get_current_branch(self, cwd: Path) -> str | None:
        """Get the currently checked-out branch."""
        output = run_git(
            ["git", "branch", "--show-current"],
            operation_context="get current branch",
            cwd=cwd,
        )
        # Empty output means detached HEAD
        if not output:
            return None
        return output

    def get_working_tree_state(self, cwd: Path) -> WorkingTreeState:
        """Get staged, unstaged and untracked changes from git status."""
        output = run_git(
            ["git", "status", "--porcelain"],
            operation_context="get file status",
            cwd=cwd,
        )
        return parse_porcelain_status(output or "")

    def get_last_commit(self, cwd: Path) -> CommitSummary | None:
        """Get the most recent commit, or None in an empty repository."""
        output = run_git(
            ["git", "log", "-1", f"--format={COMMIT_RECORD_FORMAT}"],
            operation_context="get last commit",
            cwd=cwd,
            silent=True,
        )
        if not output:
            return None

        commits = parse_commit_records(output)
        if not commits:
            return None
        return commits[0]

    def get_ahead_behind(self, cwd: Path) -> RemoteDivergence:
        """Get number of commits ahead and behind the tracking branch."""
        # Check if branch has upstream
        upstream = run_git(
            ["git", "rev-parse", "--abbrev-ref", "@{upstream}"],
            operation_context="resolve upstream branch",
            cwd=cwd,
            silent=True,
        )
        if not upstream:
            return RemoteDivergence()

        output = run_git(
            ["git", "rev-list", "--left-right", "--count", f"{upstream}...HEAD"],
            operation_context=f"count commits against '{upstream}'",
            cwd=cwd,
            silent=True,
        )
        return parse_left_right_counts(output)

    def list_local_branches(self, cwd: Path) -> list[str]:
        """List all local branch names in the repository."""
        output = run_git(
            ["git", "branch", "--format=%(refname:short)"],
            operation_context="list local branches",
            cwd=cwd,
        )
        return parse_branch_list(output or "")

    def get_staged_files(self, cwd: Path) -> list[str]:
        """List staged file paths from the staged diff summary."""
        output = run_git(
            ["git", "diff", "--cached", "--stat"],
            operation_context="summarize staged changes",
            cwd=cwd,
        )
        return parse_stat_files(output or "")

    def get_recent_commits(self, cwd: Path, *, limit: int) -> list[CommitSummary]:
        """Get recent commit information."""
        output = run_git(
            ["git", "log", f"-{limit}", f"--format={COMMIT_RECORD_FORMAT}"],
            operation_context=f"get recent {limit} commits",
            cwd=cwd,
        )
        return parse_commit_records(output or "")

    def get_log_oneline(self, cwd: Path, *, limit: int) -> str:
        """Get one-line log text for the last commits."""
        output = run_git(
            ["git", "log", f"-{limit}", "--oneline"],
            operation_context=f"get recent {limit} commits",
            cwd=cwd,
        )
        return output or ""

    def get_diff(self, cwd: Path, *, staged: bool) -> str:
        """Get the working tree or staged diff."""
        cmd = ["git", "diff"]
        if staged:
            cmd.append("--cached")
        output = run_git(cmd, operation_context="get diff", cwd=cwd)
        return output or ""

    def list_stashes(self, cwd: Path) -> str:
        """Get the stash list."""
        output = run_git(
            ["git", "stash", "list"],
            operation_context="list stashes",
            cwd=cwd,
        )
        return output or ""

    def fetch(self, cwd: Path) -> None:
        """Fetch from the default remote quietly."""
        run_subprocess_with_context(
            ["git", "fetch", "--quiet"],
            operation_context="fetch from remote",
            cwd=cwd,
            stdin=subprocess.DEVNULL,
        )

    def stage_all(self, cwd: Path) -> None:
        """Stage every change."""
        run_subprocess_with_context(
            ["git", "add", "-A"],
            operation_context="stage all changes",
            cwd=cwd,
        )

    def commit(self, cwd: Path, message: str) -> None:
        """Create a commit with the given message."""
        run_subprocess_with_context(
            ["git", "commit", "-m", message],
            operation_context="commit staged changes",
            cwd=cwd,
        )

    def push(self, cwd: Path, *, force: bool) -> None:
        """Push the current branch."""
        cmd = ["git", "push"]
        if force:
            cmd.append("--force-with-lease")
        run_subprocess_with_context(cmd, operation_context="push to remote", cwd=cwd)

    def pull(self, cwd: Path, *, rebase: bool) -> None:
        """Pull the current branch."""
        cmd = ["git", "pull"]
        if rebase:
            cmd.append("--rebase")
        run_subprocess_with_context(cmd, operation_context="pull from remote", cwd=cwd)

    def reset_last_commit(self, cwd: Path, *, soft: bool) -> None:
        """Undo the last commit."""
        cmd = ["git", "reset"]
        if soft:
            cmd.append("--soft")
        cmd.append("HEAD~1")
        run_subprocess_with_context(cmd, operation_context="reset last commit", cwd=cwd)

    def stash_save(self, cwd: Path) -> None:
        """Stash uncommitted changes."""
        run_subprocess_with_context(
            ["git", "stash"],
            operation_context="stash changes",
            cwd=cwd,
        )

    def stash_pop(self, cwd: Path) -> None:
        """Apply and drop the most recent stash."""
        run_subprocess_with_context(
            ["git", "stash", "pop"],
            operation_context="pop stash",
            cwd=cwd,
        )

    def stash_drop(self, cwd: Path) -> None:
        """Drop the most recent stash."""
        run_subprocess_with_context(
            ["git", "stash", "drop"],
            operation_context="drop stash",
            cwd=cwd,
        )
