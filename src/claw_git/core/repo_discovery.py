"""Repository discovery functionality."""

from dataclasses import dataclass
from pathlib import Path

from claw_git.core.git.abc import Git

NOT_A_REPOSITORY_MESSAGE = "Not a git repository"


@dataclass(frozen=True)
class RepoContext:
    """Represents the root of the git working tree a command operates on."""

    root: Path


@dataclass(frozen=True)
class NoRepoSentinel:
    """Sentinel value indicating execution outside a git repository.

    Commands that require repo context check for this sentinel and fail fast.
    """

    message: str = NOT_A_REPOSITORY_MESSAGE


def discover_repo_or_sentinel(cwd: Path, git: Git) -> RepoContext | NoRepoSentinel:
    """Find the working tree containing `cwd`.

    Args:
        cwd: Current working directory to start from
        git: Git operations interface

    Returns:
        RepoContext if inside a git working tree, NoRepoSentinel otherwise
    """
    if not git.is_inside_work_tree(cwd):
        return NoRepoSentinel()

    root = git.get_repository_root(cwd)
    if root is None:
        return NoRepoSentinel()

    return RepoContext(root=root)
