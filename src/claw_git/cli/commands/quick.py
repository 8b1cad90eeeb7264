"""One-line status summary."""

import click

from claw_git.cli.alias import alias
from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.cli.output import machine_output
from claw_git.core.context import ClawGitContext
from claw_git.status.collectors.git import collect_status
from claw_git.status.renderers.quick import format_quick_line


@alias("q")
@click.command("quick")
@click.pass_obj
@git_error_boundary
def quick_cmd(ctx: ClawGitContext) -> None:
    """One-line status (emoji + counts)."""
    repo = Ensure.in_git_repository(ctx)
    status_data = collect_status(ctx, repo.root, include_last_commit=False)
    machine_output(format_quick_line(status_data))
