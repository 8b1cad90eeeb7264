"""Undo the last commit."""

import click

from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.core.context import ClawGitContext


@click.command("undo")
@click.option("-s", "--soft", is_flag=True, help="Keep the changes staged.")
@click.pass_obj
@git_error_boundary
def undo_cmd(ctx: ClawGitContext, soft: bool) -> None:
    """Undo last commit."""
    repo = Ensure.in_git_repository(ctx)

    ctx.git.reset_last_commit(repo.root, soft=soft)
    if soft:
        ctx.feedback.success("Undid last commit (changes kept staged)")
    else:
        ctx.feedback.success("Undid last commit (changes unstaged)")
