"""Working tree or staged diff."""

import click

from claw_git.cli.alias import alias
from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.cli.output import machine_output
from claw_git.core.context import ClawGitContext


@alias("d")
@click.command("diff")
@click.option("-s", "--staged", is_flag=True, help="Show the staged diff.")
@click.pass_obj
@git_error_boundary
def diff_cmd(ctx: ClawGitContext, staged: bool) -> None:
    """Show unstaged diff."""
    repo = Ensure.in_git_repository(ctx)
    machine_output(ctx.git.get_diff(repo.root, staged=staged))
