"""Ahead/behind calculation against the upstream branch."""

import logging
from pathlib import Path

from claw_git.core.git.abc import Git
from claw_git.core.subprocess import GitCommandError
from claw_git.status.models.status_data import RemoteDivergence

logger = logging.getLogger(__name__)


def get_remote_divergence(git: Git, cwd: Path) -> RemoteDivergence:
    """Refresh remote refs, then count commits ahead/behind the upstream.

    A failed fetch (offline, no remote, auth prompt refused) is ignored so
    local status still works; the counts then reflect the last known
    remote refs.

    Args:
        git: Git implementation to query
        cwd: Working directory inside the repository

    Returns:
        RemoteDivergence, zeros when there is no upstream
    """
    try:
        git.fetch(cwd)
    except GitCommandError as e:
        logger.debug("Ignoring fetch failure: %s", e)

    return git.get_ahead_behind(cwd)
