"""Recent commit history."""

import click

from claw_git.cli.alias import alias
from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.cli.output import machine_output
from claw_git.core.context import ClawGitContext

DEFAULT_LOG_COUNT = 10


def parse_log_count(raw: str | None) -> int:
    """Return COUNT as a positive int, falling back to the default.

    Missing, non-numeric and non-positive values all give DEFAULT_LOG_COUNT.
    """
    if raw is None:
        return DEFAULT_LOG_COUNT
    try:
        count = int(raw)
    except ValueError:
        return DEFAULT_LOG_COUNT
    return count if count > 0 else DEFAULT_LOG_COUNT


@alias("l")
@click.command("log")
@click.argument("count", required=False)
@click.option("--oneline", is_flag=True, help="Plain `git log --oneline` output.")
@click.pass_obj
@git_error_boundary
def log_cmd(ctx: ClawGitContext, count: str | None, oneline: bool) -> None:
    """Show last COUNT commits (default 10)."""
    repo = Ensure.in_git_repository(ctx)
    limit = parse_log_count(count)

    if oneline:
        machine_output(ctx.git.get_log_oneline(repo.root, limit=limit))
        return

    commits = ctx.git.get_recent_commits(repo.root, limit=limit)
    machine_output()
    for commit in commits:
        machine_output(
            f"{click.style(commit.short_hash, fg='yellow')} {commit.subject} "
            + click.style(f"({commit.relative_time})", dim=True)
        )
    machine_output()
