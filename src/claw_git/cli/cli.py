import logging
import os

import click

from claw_git.cli.alias import register_with_aliases
from claw_git.cli.commands.branches import branches_cmd
from claw_git.cli.commands.commit import commit_cmd
from claw_git.cli.commands.diff import diff_cmd
from claw_git.cli.commands.help import help_cmd
from claw_git.cli.commands.log import log_cmd
from claw_git.cli.commands.pull import pull_cmd
from claw_git.cli.commands.push import push_cmd
from claw_git.cli.commands.quick import quick_cmd
from claw_git.cli.commands.stash import stash_cmd
from claw_git.cli.commands.status import status_cmd
from claw_git.cli.commands.undo import undo_cmd
from claw_git.cli.help_formatter import GroupedCommandGroup
from claw_git.core.context import create_context

# Enable debug logging if CLAW_GIT_DEBUG environment variable is set
if os.getenv("CLAW_GIT_DEBUG"):
    logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

EPILOG = """\b
Examples:
  claw-git status             Full repo status
  claw-git q                  Quick one-liner
  claw-git commit "fix bug"   Commit with message
  claw-git commit -ap         Stage all, commit, push
  claw-git log 5              Last 5 commits
"""


@click.group(
    cls=GroupedCommandGroup,
    context_settings=CONTEXT_SETTINGS,
    invoke_without_command=True,
    epilog=EPILOG,
)
@click.version_option(None, "-v", "--version", package_name="claw-git", message="%(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Git helper for AI agents: quick status, smart commits, branch management."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        ctx.obj = create_context()

    # Bare invocation shows full status
    if ctx.invoked_subcommand is None:
        ctx.invoke(status_cmd)


# Commands with @alias decorators use register_with_aliases() to auto-register aliases
cli.add_command(status_cmd)
register_with_aliases(cli, quick_cmd)  # Has @alias("q")
register_with_aliases(cli, commit_cmd)  # Has @alias("c")
cli.add_command(push_cmd)
cli.add_command(pull_cmd)
register_with_aliases(cli, branches_cmd)  # Has @alias("br")
register_with_aliases(cli, log_cmd)  # Has @alias("l")
register_with_aliases(cli, diff_cmd)  # Has @alias("d")
cli.add_command(undo_cmd)
cli.add_command(stash_cmd)
cli.add_command(help_cmd)


def main() -> None:
    """CLI entry point used by the `claw-git` console script."""
    cli()
