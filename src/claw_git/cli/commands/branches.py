"""List local branches."""

import click

from claw_git.cli.alias import alias
from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.cli.rendering import get_renderer
from claw_git.core.context import ClawGitContext


@alias("br")
@click.command("branches")
@click.option("--json", "as_json", is_flag=True, help="Output branches as JSON.")
@click.pass_obj
@git_error_boundary
def branches_cmd(ctx: ClawGitContext, as_json: bool) -> None:
    """List branches."""
    repo = Ensure.in_git_repository(ctx)

    current = ctx.git.get_current_branch(repo.root)
    branches = ctx.git.list_local_branches(repo.root)
    get_renderer("json" if as_json else "text").render_branches(current, branches)
