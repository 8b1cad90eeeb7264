"""Multi-section text renderer for the status command."""

import click

from claw_git.cli.output import machine_output
from claw_git.status.models.status_data import (
    ChangeEntry,
    RemoteDivergence,
    StatusData,
)

DETACHED_HEAD_LABEL = "HEAD (detached)"


def display_branch(branch: str | None) -> str:
    """Name shown for the current branch, covering detached HEAD."""
    return branch if branch is not None else DETACHED_HEAD_LABEL


def format_divergence(remote: RemoteDivergence, *, styled: bool) -> str:
    """Format ` ↑N ↓M`, omitting zero counts."""
    parts = ""
    if remote.ahead > 0:
        ahead = f"↑{remote.ahead}"
        parts += " " + (click.style(ahead, fg="green") if styled else ahead)
    if remote.behind > 0:
        behind = f"↓{remote.behind}"
        parts += " " + (click.style(behind, fg="red") if styled else behind)
    return parts


class SimpleRenderer:
    """Renders StatusData as a colorized report.

    Layout: branch line with divergence, last commit, then the Staged,
    Modified and Untracked sections in that order (or a clean marker).
    """

    def render(self, status: StatusData) -> None:
        for line in self.format_lines(status):
            machine_output(line)

    def format_lines(self, status: StatusData) -> list[str]:
        branch = click.style(display_branch(status.branch), fg="cyan", bold=True)
        lines = ["", f"  📍 {branch}{format_divergence(status.remote, styled=True)}"]

        last = status.last_commit
        if last is not None:
            lines.append(
                "  "
                + click.style(
                    f"└─ {last.short_hash} {last.subject} ({last.relative_time})", dim=True
                )
            )

        tree = status.tree
        if tree.is_clean:
            lines.extend(["", "  " + click.style("✓ Clean working tree", fg="green"), ""])
            return lines

        lines.append("")
        if tree.staged:
            lines.extend(self._format_section("Staged", tree.staged, "green"))
        if tree.unstaged:
            lines.extend(self._format_section("Modified", tree.unstaged, "yellow"))
        if tree.untracked:
            untracked = [ChangeEntry(status="?", path=path) for path in tree.untracked]
            lines.extend(self._format_section("Untracked", untracked, "red"))
        lines.append("")

        return lines

    def _format_section(self, title: str, entries: list[ChangeEntry], color: str) -> list[str]:
        lines = ["  " + click.style(f"{title} ({len(entries)}):", fg=color)]
        for entry in entries:
            lines.append(f"    {click.style(entry.status, fg=color)} {entry.path}")
        return lines
