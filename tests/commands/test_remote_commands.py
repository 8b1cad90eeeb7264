"""Tests for push and pull."""

from pathlib import Path

from click.testing import CliRunner

from claw_git.cli.cli import cli
from claw_git.core.context import ClawGitContext
from claw_git.status.models.status_data import RemoteDivergence
from tests.fakes.git import FakeGit


def _invoke(git: FakeGit, args: list[str]):
    runner = CliRunner()
    return runner.invoke(cli, args, obj=ClawGitContext.for_test(git, Path("/repo")))


def test_push_up_to_date_does_not_push() -> None:
    git = FakeGit(divergence=RemoteDivergence(ahead=0, behind=2))

    result = _invoke(git, ["push"])

    assert result.exit_code == 0
    assert "✓ Already up to date" in result.output
    assert git.pushes == []


def test_push_ahead() -> None:
    git = FakeGit(current_branch="feature", divergence=RemoteDivergence(ahead=3))

    result = _invoke(git, ["push"])

    assert result.exit_code == 0
    assert "Pushing 3 commit(s) to origin/feature..." in result.output
    assert "✓ Pushed" in result.output
    assert git.pushes == [False]


def test_push_force_uses_lease() -> None:
    git = FakeGit(divergence=RemoteDivergence(ahead=1))

    result = _invoke(git, ["push", "-f"])

    assert result.exit_code == 0
    assert git.pushes == [True]


def test_push_failure_reports_git_stderr() -> None:
    git = FakeGit(divergence=RemoteDivergence(ahead=1), push_error="remote: Permission denied")

    result = _invoke(git, ["push"])

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "remote: Permission denied" in result.output


def test_pull() -> None:
    git = FakeGit(current_branch="main")

    result = _invoke(git, ["pull"])

    assert result.exit_code == 0
    assert "Pulling from origin/main..." in result.output
    assert "✓ Pulled" in result.output
    assert git.pulls == [False]


def test_pull_rebase() -> None:
    git = FakeGit()

    result = _invoke(git, ["pull", "--rebase"])

    assert result.exit_code == 0
    assert git.pulls == [True]
