"""Application context with dependency injection."""

from dataclasses import dataclass
from pathlib import Path

from claw_git.core.git.abc import Git
from claw_git.core.git.real import RealGit
from claw_git.core.repo_discovery import (
    NoRepoSentinel,
    RepoContext,
    discover_repo_or_sentinel,
)
from claw_git.core.user_feedback import InteractiveFeedback, UserFeedback


@dataclass(frozen=True)
class ClawGitContext:
    """Immutable context holding all dependencies for claw-git operations.

    Created at CLI entry point and threaded through the application.
    Frozen to prevent accidental modification at runtime.
    """

    git: Git
    feedback: UserFeedback
    cwd: Path  # Current working directory at CLI invocation

    def discover_repo(self) -> RepoContext | NoRepoSentinel:
        """Locate the working tree containing cwd."""
        return discover_repo_or_sentinel(self.cwd, self.git)

    @staticmethod
    def for_test(
        git: Git,
        cwd: Path,
        feedback: UserFeedback | None = None,
    ) -> "ClawGitContext":
        """Create a context for tests, defaulting to interactive feedback.

        Example:
            >>> ctx = ClawGitContext.for_test(FakeGit(current_branch="main"), tmp_path)
            >>> runner.invoke(cli, ["quick"], obj=ctx)
        """
        return ClawGitContext(
            git=git,
            feedback=feedback if feedback is not None else InteractiveFeedback(),
            cwd=cwd,
        )


def create_context() -> ClawGitContext:
    """Create the production context.

    Uses RealGit and the process working directory captured at startup.
    """
    return ClawGitContext(
        git=RealGit(),
        feedback=InteractiveFeedback(),
        cwd=Path.cwd(),
    )
