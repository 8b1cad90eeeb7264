"""Full repository status."""

import click

from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.cli.rendering import get_renderer
from claw_git.core.context import ClawGitContext
from claw_git.status.collectors.git import collect_status


@click.command("status")
@click.option("--json", "as_json", is_flag=True, help="Output status as JSON.")
@click.pass_obj
@git_error_boundary
def status_cmd(ctx: ClawGitContext, as_json: bool) -> None:
    """Full status with remote info."""
    repo = Ensure.in_git_repository(ctx)
    status_data = collect_status(ctx, repo.root)
    get_renderer("json" if as_json else "text").render_status(status_data)
