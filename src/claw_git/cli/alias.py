"""Command alias support.

Usage:
    @alias("q")
    @click.command("quick")
    def quick_cmd(...): ...

    register_with_aliases(cli, quick_cmd)
"""

from collections.abc import Callable

import click

_ALIASES_ATTR = "_claw_git_aliases"


def alias(*names: str) -> Callable[[click.Command], click.Command]:
    """Attach short alias names to a click command."""

    def decorator(cmd: click.Command) -> click.Command:
        existing: tuple[str, ...] = getattr(cmd, _ALIASES_ATTR, ())
        setattr(cmd, _ALIASES_ATTR, (*existing, *names))
        return cmd

    return decorator


def get_aliases(cmd: click.Command) -> tuple[str, ...]:
    """Return the aliases registered on a command (empty if none)."""
    return getattr(cmd, _ALIASES_ATTR, ())


def register_with_aliases(group: click.Group, cmd: click.Command, name: str | None = None) -> None:
    """Add a command to a group under its own name and every alias."""
    group.add_command(cmd, name=name)
    for alias_name in get_aliases(cmd):
        group.add_command(cmd, name=alias_name)
