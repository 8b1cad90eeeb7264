"""Subprocess execution with rich error context.

All git invocations go through this module. Failures are raised as
GitCommandError, which carries the command, exit code and captured output so
the CLI error boundary can show git's own stderr to the user.
"""

import logging
import subprocess
from collections.abc import Sequence
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class GitCommandError(RuntimeError):
    """An external command exited non-zero (or could not be started).

    Attributes:
        cmd: Command and arguments that were executed
        returncode: Exit code of the process (127 when the binary is missing)
        stdout: Captured stdout, stripped
        stderr: Captured stderr, stripped
    """

    def __init__(
        self,
        message: str,
        *,
        cmd: Sequence[str],
        returncode: int,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr


def _decode(output: str | bytes | None) -> str:
    if output is None:
        return ""
    if isinstance(output, bytes):
        return output.decode("utf-8", errors="replace").strip()
    return output.strip()


def run_subprocess_with_context(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    capture_output: bool = True,
    text: bool = True,
    encoding: str = "utf-8",
    check: bool = True,
    **kwargs: Any,
) -> subprocess.CompletedProcess[str]:
    """Execute subprocess with enriched error reporting.

    Wraps subprocess.run() to catch CalledProcessError and re-raise as
    GitCommandError with operation context, stderr output, and command details.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description of operation
        cwd: Working directory for command execution
        capture_output: Whether to capture stdout/stderr (default: True)
        text: Whether to decode output as text (default: True)
        encoding: Text encoding to use (default: "utf-8")
        check: Whether to raise on non-zero exit (default: True)
        **kwargs: Additional arguments passed to subprocess.run()

    Returns:
        CompletedProcess instance from subprocess.run()

    Raises:
        GitCommandError: If command fails or the binary is not found
    """
    cmd_str = " ".join(str(arg) for arg in cmd)
    logger.debug("Running: %s (cwd=%s)", cmd_str, cwd)

    try:
        return subprocess.run(
            cmd,
            cwd=cwd,
            capture_output=capture_output,
            text=text,
            encoding=encoding,
            check=check,
            **kwargs,
        )

    except subprocess.CalledProcessError as e:
        stdout_stripped = _decode(e.stdout)
        stderr_stripped = _decode(e.stderr)
        logger.debug("Command failed with exit code %d: %s", e.returncode, cmd_str)

        error_msg = f"Failed to {operation_context}"
        error_msg += f"\nCommand: {cmd_str}"
        error_msg += f"\nExit code: {e.returncode}"
        if stdout_stripped:
            error_msg += f"\nstdout: {stdout_stripped}"
        if stderr_stripped:
            error_msg += f"\nstderr: {stderr_stripped}"

        raise GitCommandError(
            error_msg,
            cmd=cmd,
            returncode=e.returncode,
            stdout=stdout_stripped,
            stderr=stderr_stripped,
        ) from e

    except FileNotFoundError as e:
        error_msg = f"Command not found while trying to {operation_context}: {cmd[0]}"
        error_msg += f"\nFull command: {cmd_str}"
        raise GitCommandError(error_msg, cmd=cmd, returncode=127) from e


def run_git(
    cmd: Sequence[str],
    operation_context: str,
    cwd: Path | None = None,
    *,
    silent: bool = False,
) -> str | None:
    """Run a command and return its right-trimmed stdout.

    Only trailing whitespace is removed: porcelain output can start with a
    significant space on its first line.

    Args:
        cmd: Command and arguments to execute
        operation_context: Human-readable description used in error messages
        cwd: Working directory for command execution
        silent: Return None instead of raising when the command fails

    Returns:
        Command stdout without trailing whitespace, or None on a silenced failure

    Raises:
        GitCommandError: If the command fails and silent is False
    """
    try:
        result = run_subprocess_with_context(cmd, operation_context=operation_context, cwd=cwd)
    except GitCommandError:
        if silent:
            return None
        raise
    return result.stdout.rstrip()
