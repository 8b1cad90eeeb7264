"""Stash operations."""

import click

from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.cli.output import machine_output, user_output
from claw_git.core.context import ClawGitContext

STASH_ACTIONS = ("save", "pop", "list", "drop")


@click.command("stash")
@click.argument("action", required=False, default="save")
@click.pass_obj
@git_error_boundary
def stash_cmd(ctx: ClawGitContext, action: str) -> None:
    """Stash commands (save/pop/list/drop)."""
    repo = Ensure.in_git_repository(ctx)
    if action not in STASH_ACTIONS:
        user_output(f"Unknown stash action: {action}")
        return

    if action == "save":
        ctx.git.stash_save(repo.root)
        ctx.feedback.success("Stashed changes")
    elif action == "pop":
        ctx.git.stash_pop(repo.root)
        ctx.feedback.success("Popped stash")
    elif action == "list":
        stashes = ctx.git.list_stashes(repo.root)
        machine_output(stashes if stashes else "No stashes")
    elif action == "drop":
        ctx.git.stash_drop(repo.root)
        ctx.feedback.success("Dropped stash")
