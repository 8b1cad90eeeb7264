"""One-line status summary."""

from claw_git.status.models.status_data import StatusData
from claw_git.status.renderers.simple import display_branch, format_divergence

CLEAN_EMOJI = "🟢"
STAGED_EMOJI = "🟡"
DIRTY_EMOJI = "🔴"


def format_quick_line(status: StatusData) -> str:
    """Format ``<emoji> <branch> [↑N] [↓M] | <s>S <m>M <u>U`` (or ``| clean``).

    The emoji is green for a clean tree, yellow when something is staged
    and red when there are only unstaged or untracked changes.
    """
    tree = status.tree
    if tree.is_clean:
        emoji = CLEAN_EMOJI
    elif tree.staged:
        emoji = STAGED_EMOJI
    else:
        emoji = DIRTY_EMOJI

    line = f"{emoji} {display_branch(status.branch)}"
    line += format_divergence(status.remote, styled=False)

    if tree.is_clean:
        line += " | clean"
    else:
        line += f" | {len(tree.staged)}S {len(tree.unstaged)}M {len(tree.untracked)}U"

    return line
