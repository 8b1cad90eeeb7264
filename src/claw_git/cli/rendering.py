"""Output rendering framework for CLI commands.

Provides a common interface for rendering command output in different formats
(text, JSON). Commands collect their data first, then hand it to a renderer.
"""

from abc import ABC, abstractmethod

import click

from claw_git.cli.json_output import emit_json
from claw_git.cli.output import machine_output
from claw_git.status.models.status_data import StatusData


class OutputRenderer(ABC):
    """Base class for output renderers."""

    @abstractmethod
    def render_status(self, status_data: StatusData) -> None:
        """Render full repository status."""
        pass

    @abstractmethod
    def render_branches(self, current: str | None, branches: list[str]) -> None:
        """Render the local branch list with the current branch marked."""
        pass


class TextRenderer(OutputRenderer):
    """Renders output as colorized text for human consumption."""

    def render_status(self, status_data: StatusData) -> None:
        """Delegate to the status SimpleRenderer."""
        from claw_git.status.renderers.simple import SimpleRenderer

        SimpleRenderer().render(status_data)

    def render_branches(self, current: str | None, branches: list[str]) -> None:
        """Render one branch per line, current branch prefixed with `* `."""
        machine_output()
        for branch in branches:
            if branch == current:
                machine_output(click.style("* ", fg="green") + click.style(branch, bold=True))
            else:
                machine_output(f"  {branch}")
        machine_output()


class JsonRenderer(OutputRenderer):
    """Renders output as JSON for machine consumption.

    Data is converted to validated Pydantic models before emission.
    """

    def render_status(self, status_data: StatusData) -> None:
        """Render status as indented JSON."""
        from claw_git.cli.json_schemas import status_data_to_pydantic

        pydantic_model = status_data_to_pydantic(status_data)
        emit_json(pydantic_model.model_dump(mode="json"))

    def render_branches(self, current: str | None, branches: list[str]) -> None:
        """Render branches as a single compact JSON line."""
        from claw_git.cli.json_schemas import BranchesResponse

        response = BranchesResponse(current=current, branches=branches)
        emit_json(response.model_dump(mode="json"), indent=None)


def get_renderer(format: str) -> OutputRenderer:
    """Factory function to get appropriate renderer based on format.

    Args:
        format: Output format ("text" or "json")

    Returns:
        Appropriate renderer instance
    """
    if format == "json":
        return JsonRenderer()
    return TextRenderer()
