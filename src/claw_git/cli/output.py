"""Output utilities for CLI commands with clear intent.

- user_output: progress, confirmations and errors for the person at the
  terminal (stderr)
- machine_output: reports and data that callers may capture or pipe (stdout)

click.echo strips ANSI styling automatically when the stream is not a tty.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write report/data output to stdout."""
    click.echo(message, nl=nl)
