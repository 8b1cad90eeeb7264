"""Custom Click group: sectioned help output and unknown-command handling."""

from typing import NoReturn

import click

from claw_git.cli.alias import get_aliases
from claw_git.cli.output import user_output


def _exit_unknown_command(name: str) -> NoReturn:
    user_output(f"Unknown command: {name}")
    user_output("Run with --help for usage")
    raise SystemExit(1)


class GroupedCommandGroup(click.Group):
    """Click Group that organizes commands into logical sections in help output.

    Aliases are listed next to their command (``quick, q``) rather than as
    separate rows. Unknown commands and unknown top-level options exit with
    status 1 instead of click's usage-error status 2.
    """

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.NoSuchOption as e:
            if ctx.resilient_parsing:
                raise
            _exit_unknown_command(e.option_name)

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        cmd_name = args[0]
        is_unknown = self.get_command(ctx, cmd_name) is None
        if is_unknown and not ctx.resilient_parsing:
            _exit_unknown_command(cmd_name)
        return super().resolve_command(ctx, args)

    def format_commands(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Format commands into organized sections."""
        commands = []
        for subcommand in self.list_commands(ctx):
            cmd = self.get_command(ctx, subcommand)
            if cmd is None or cmd.hidden:
                continue
            # Aliases are rendered with their primary command
            if subcommand != cmd.name:
                continue
            commands.append((subcommand, cmd))

        if not commands:
            return

        inspect_names = ["status", "quick", "branches", "log", "diff"]
        change_names = ["commit", "undo", "stash"]
        remote_names = ["push", "pull"]

        inspect_cmds = []
        change_cmds = []
        remote_cmds = []
        other_cmds = []

        for name, cmd in commands:
            if name in inspect_names:
                inspect_cmds.append((name, cmd))
            elif name in change_names:
                change_cmds.append((name, cmd))
            elif name in remote_names:
                remote_cmds.append((name, cmd))
            else:
                other_cmds.append((name, cmd))

        inspect_cmds.sort(key=lambda item: inspect_names.index(item[0]))
        change_cmds.sort(key=lambda item: change_names.index(item[0]))
        remote_cmds.sort(key=lambda item: remote_names.index(item[0]))

        if inspect_cmds:
            with formatter.section("Inspect"):
                self._format_command_list(ctx, formatter, inspect_cmds)

        if change_cmds:
            with formatter.section("Changes"):
                self._format_command_list(ctx, formatter, change_cmds)

        if remote_cmds:
            with formatter.section("Remote"):
                self._format_command_list(ctx, formatter, remote_cmds)

        if other_cmds:
            with formatter.section("Other"):
                self._format_command_list(ctx, formatter, other_cmds)

    def _format_command_list(
        self,
        ctx: click.Context,
        formatter: click.HelpFormatter,
        commands: list[tuple[str, click.Command]],
    ) -> None:
        """Format a list of commands with their help text."""
        rows = []
        for name, cmd in commands:
            label = ", ".join([name, *get_aliases(cmd)])
            help_text = cmd.get_short_help_str(limit=formatter.width)
            rows.append((label, help_text))

        if rows:
            formatter.write_dl(rows)
