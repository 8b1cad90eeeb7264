"""Git status collector."""

from pathlib import Path

from claw_git.core.context import ClawGitContext
from claw_git.core.remote import get_remote_divergence
from claw_git.status.models.status_data import StatusData


def collect_status(
    ctx: ClawGitContext,
    repo_root: Path,
    *,
    include_last_commit: bool = True,
) -> StatusData:
    """Gather branch, working tree, last commit and remote divergence.

    Args:
        ctx: Application context
        repo_root: Root of the working tree
        include_last_commit: Skip the last-commit lookup when False (quick view)

    Returns:
        StatusData snapshot of the repository
    """
    branch = ctx.git.get_current_branch(repo_root)
    tree = ctx.git.get_working_tree_state(repo_root)
    last_commit = ctx.git.get_last_commit(repo_root) if include_last_commit else None
    remote = get_remote_divergence(ctx.git, repo_root)

    return StatusData(branch=branch, tree=tree, last_commit=last_commit, remote=remote)
