"""Pull the current branch."""

import click

from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.core.context import ClawGitContext
from claw_git.status.renderers.simple import display_branch


@click.command("pull")
@click.option("-r", "--rebase", is_flag=True, help="Rebase instead of merging.")
@click.pass_obj
@git_error_boundary
def pull_cmd(ctx: ClawGitContext, rebase: bool) -> None:
    """Pull from remote."""
    repo = Ensure.in_git_repository(ctx)

    branch = ctx.git.get_current_branch(repo.root)
    ctx.feedback.info(f"Pulling from origin/{display_branch(branch)}...")
    ctx.git.pull(repo.root, rebase=rebase)
    ctx.feedback.success("Pulled")
