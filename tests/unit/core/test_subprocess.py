"""Tests for the subprocess invoker."""

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from claw_git.core.subprocess import GitCommandError, run_git, run_subprocess_with_context


def _completed(stdout: str) -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=["git"], returncode=0, stdout=stdout, stderr="")


def _called_process_error(stderr: str) -> subprocess.CalledProcessError:
    return subprocess.CalledProcessError(
        returncode=128, cmd=["git", "status"], output="", stderr=stderr
    )


@patch("claw_git.core.subprocess.subprocess.run")
def test_run_git_right_trims_only(mock_run: MagicMock) -> None:
    """Leading whitespace is significant in porcelain output."""
    mock_run.return_value = _completed(" M bar.txt\n?? new.txt\n\n")

    output = run_git(["git", "status", "--porcelain"], "get status", cwd=Path("/repo"))

    assert output == " M bar.txt\n?? new.txt"


@patch("claw_git.core.subprocess.subprocess.run")
def test_run_git_passes_cwd_and_checks(mock_run: MagicMock) -> None:
    mock_run.return_value = _completed("main\n")

    run_git(["git", "branch", "--show-current"], "get branch", cwd=Path("/repo"))

    _, kwargs = mock_run.call_args
    assert kwargs["cwd"] == Path("/repo")
    assert kwargs["check"] is True
    assert kwargs["capture_output"] is True


@patch("claw_git.core.subprocess.subprocess.run")
def test_run_git_raises_with_stderr(mock_run: MagicMock) -> None:
    mock_run.side_effect = _called_process_error("fatal: not a git repository\n")

    with pytest.raises(GitCommandError) as exc_info:
        run_git(["git", "status"], "get file status")

    error = exc_info.value
    assert error.returncode == 128
    assert error.stderr == "fatal: not a git repository"
    assert error.cmd == ["git", "status"]
    assert "Failed to get file status" in str(error)
    assert "stderr: fatal: not a git repository" in str(error)


@patch("claw_git.core.subprocess.subprocess.run")
def test_run_git_silent_returns_none(mock_run: MagicMock) -> None:
    mock_run.side_effect = _called_process_error("fatal: no upstream configured")

    assert run_git(["git", "rev-parse", "@{upstream}"], "resolve upstream", silent=True) is None


@patch("claw_git.core.subprocess.subprocess.run")
def test_missing_binary_becomes_git_command_error(mock_run: MagicMock) -> None:
    mock_run.side_effect = FileNotFoundError("git")

    with pytest.raises(GitCommandError) as exc_info:
        run_subprocess_with_context(["git", "status"], operation_context="get file status")

    assert exc_info.value.returncode == 127
    assert "Command not found" in str(exc_info.value)


@patch("claw_git.core.subprocess.subprocess.run")
def test_missing_binary_silenced(mock_run: MagicMock) -> None:
    mock_run.side_effect = FileNotFoundError("git")

    assert run_git(["git", "rev-parse"], "detect repository", silent=True) is None
