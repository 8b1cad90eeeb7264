"""CLI error handling utilities with styled output.

This module provides the Ensure class for checking command preconditions
with consistent, user-friendly error messages, and the error boundary that
turns failed git commands into a styled message and exit code 1.
"""

import logging
from collections.abc import Callable
from functools import wraps
from typing import Any

import click

from claw_git.cli.json_output import emit_json_error
from claw_git.cli.output import user_output
from claw_git.core.context import ClawGitContext
from claw_git.core.repo_discovery import NoRepoSentinel, RepoContext
from claw_git.core.subprocess import GitCommandError

logger = logging.getLogger(__name__)


class Ensure:
    """Helper class for checking command preconditions with consistent error handling."""

    @staticmethod
    def in_git_repository(ctx: ClawGitContext) -> RepoContext:
        """Ensure the command runs inside a git working tree.

        Returns:
            RepoContext of the enclosing working tree

        Raises:
            SystemExit: If cwd is not inside a repository (with exit code 1)
        """
        repo = ctx.discover_repo()
        if isinstance(repo, NoRepoSentinel):
            user_output(click.style("Error: ", fg="red") + click.style(repo.message, fg="red"))
            raise SystemExit(1)
        return repo


def git_error_boundary(func: Callable) -> Callable:
    """Decorator reporting GitCommandError as a styled error with exit code 1.

    When the command was invoked with ``as_json=True`` the error is emitted
    as a JSON ErrorResponse on stdout instead.

    Example:
        @click.command("push")
        @click.pass_obj
        @git_error_boundary
        def push_cmd(ctx: ClawGitContext) -> None:
            ...
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except GitCommandError as e:
            logger.debug("Exception caught: %s: %s", type(e).__name__, str(e))
            logger.debug("Exception details:", exc_info=True)
            if kwargs.get("as_json"):
                emit_json_error(str(e), type(e).__name__, exit_code=1)
            user_output(click.style(f"Error: {e}", fg="red"))
            raise SystemExit(1) from None

    return wrapper
