"""Stage and commit, optionally pushing afterwards."""

import click

from claw_git.cli.alias import alias
from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.core.commit_message import synthesize_commit_message
from claw_git.core.context import ClawGitContext


@alias("c")
@click.command("commit")
@click.argument("message", required=False)
@click.option("-a", "--all", "stage_all", is_flag=True, help="Stage all changes before committing.")
@click.option("-p", "--push", "push", is_flag=True, help="Push after committing.")
@click.pass_obj
@git_error_boundary
def commit_cmd(ctx: ClawGitContext, message: str | None, stage_all: bool, push: bool) -> None:
    """Commit changes.

    Stages everything when --all is given or nothing is staged yet. Without
    MESSAGE, one is generated from the staged file names.
    """
    repo = Ensure.in_git_repository(ctx)

    tree = ctx.git.get_working_tree_state(repo.root)
    if stage_all or not tree.staged:
        ctx.git.stage_all(repo.root)
        ctx.feedback.info("Staged all changes")

    if not message:
        message = synthesize_commit_message(ctx.git.get_staged_files(repo.root))
        if message is None:
            ctx.feedback.warning("Nothing to commit")
            return

    ctx.git.commit(repo.root, message)
    ctx.feedback.success(f"Committed: {click.style(message, bold=True)}")

    if push:
        ctx.feedback.info("Pushing...")
        ctx.git.push(repo.root, force=False)
        ctx.feedback.success("Pushed")
