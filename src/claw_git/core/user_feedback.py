"""User-facing diagnostic output."""

from abc import ABC, abstractmethod

import click

from claw_git.cli.output import user_output

CHECK_MARK = "✓"


class UserFeedback(ABC):
    """Provides user-facing progress and confirmation output.

    Commands call ctx.feedback methods instead of printing directly, so tests
    and quiet callers can swap in a different implementation.

    Usage:
        ctx.feedback.info("Pushing...")
        ctx.git.push(repo.root, force=False)
        ctx.feedback.success("Pushed")
    """

    @abstractmethod
    def info(self, message: str) -> None:
        """Show a progress message (dimmed)."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Show a confirmation prefixed with a green check mark."""

    @abstractmethod
    def warning(self, message: str) -> None:
        """Show a warning in yellow."""


class InteractiveFeedback(UserFeedback):
    """Feedback shown in interactive mode (all messages)."""

    def info(self, message: str) -> None:
        user_output(click.style(message, dim=True))

    def success(self, message: str) -> None:
        user_output(f"{click.style(CHECK_MARK, fg='green')} {message}")

    def warning(self, message: str) -> None:
        user_output(click.style(message, fg="yellow"))
