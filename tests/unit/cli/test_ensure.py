"""Tests for Ensure and the git error boundary."""

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from claw_git.cli.ensure import Ensure, git_error_boundary
from claw_git.core.context import ClawGitContext
from claw_git.core.repo_discovery import RepoContext
from claw_git.core.subprocess import GitCommandError
from tests.fakes.git import FakeGit


def _error() -> GitCommandError:
    return GitCommandError(
        "Failed to push to remote\nstderr: rejected",
        cmd=["git", "push"],
        returncode=1,
        stderr="rejected",
    )



def test_in_git_repository_returns_repo() -> None:
    ctx = ClawGitContext.for_test(FakeGit(repo_root=Path("/work")), Path("/work/src"))

    assert Ensure.in_git_repository(ctx) == RepoContext(root=Path("/work"))


@patch("claw_git.cli.ensure.user_output")
def test_in_git_repository_exits_outside(mock_user_output: MagicMock) -> None:
    ctx = ClawGitContext.for_test(FakeGit(repo_root=None), Path("/tmp"))

    with pytest.raises(SystemExit) as exc_info:
        Ensure.in_git_repository(ctx)

    assert exc_info.value.code == 1
    assert "Not a git repository" in mock_user_output.call_args.args[0]


@patch("claw_git.cli.ensure.user_output")
def test_error_boundary_text_mode(mock_user_output: MagicMock) -> None:
    @git_error_boundary
    def failing(as_json: bool = False) -> None:
        raise _error()

    with pytest.raises(SystemExit) as exc_info:
        failing(as_json=False)

    assert exc_info.value.code == 1
    assert "stderr: rejected" in mock_user_output.call_args.args[0]


@patch("claw_git.cli.json_output.machine_output")
def test_error_boundary_json_mode(mock_machine_output: MagicMock) -> None:
    @git_error_boundary
    def failing(as_json: bool = False) -> None:
        raise _error()

    with pytest.raises(SystemExit) as exc_info:
        failing(as_json=True)

    assert exc_info.value.code == 1
    payload = json.loads(mock_machine_output.call_args.args[0])
    assert payload["error_type"] == "GitCommandError"
    assert "rejected" in payload["error"]


def test_error_boundary_passes_other_exceptions() -> None:
    @git_error_boundary
    def failing() -> None:
        raise ValueError("not a git failure")

    with pytest.raises(ValueError):
        failing()


def test_error_boundary_returns_value() -> None:
    @git_error_boundary
    def ok() -> str:
        return "done"

    assert ok() == "done"
