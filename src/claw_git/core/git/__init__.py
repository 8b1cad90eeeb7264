"""Git operations subpackage.

This subpackage provides abstractions over git operations with support for
testing via fakes.
"""

from claw_git.core.git.abc import Git
from claw_git.core.git.real import RealGit

__all__ = [
    "Git",
    "RealGit",
]
