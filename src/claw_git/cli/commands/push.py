"""Push the current branch."""

import click

from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.core.context import ClawGitContext
from claw_git.core.remote import get_remote_divergence
from claw_git.status.renderers.simple import display_branch


@click.command("push")
@click.option("-f", "--force", is_flag=True, help="Push with --force-with-lease.")
@click.pass_obj
@git_error_boundary
def push_cmd(ctx: ClawGitContext, force: bool) -> None:
    """Push to remote."""
    repo = Ensure.in_git_repository(ctx)

    branch = ctx.git.get_current_branch(repo.root)
    remote = get_remote_divergence(ctx.git, repo.root)

    if remote.ahead == 0:
        ctx.feedback.success("Already up to date")
        return

    ctx.feedback.info(
        f"Pushing {remote.ahead} commit(s) to origin/{display_branch(branch)}..."
    )
    ctx.git.push(repo.root, force=force)
    ctx.feedback.success("Pushed")
