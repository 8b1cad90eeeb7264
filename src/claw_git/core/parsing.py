"""Pure parsers for git's fixed-format text output.

Kept separate from RealGit so they can be tested without a git binary.
"""

from claw_git.status.models.status_data import (
    ChangeEntry,
    CommitSummary,
    RemoteDivergence,
    WorkingTreeState,
)

UNTRACKED_CODE = "??"

# Record format used with `git log --format`, fields separated by NUL
COMMIT_RECORD_FORMAT = "%h%x00%s%x00%ar"


def parse_porcelain_status(output: str) -> WorkingTreeState:
    """Classify `git status --porcelain` lines into staged/unstaged/untracked.

    Each line is ``XY <path>`` where X is the index code and Y the worktree
    code. ``??`` marks an untracked path; otherwise a non-blank X yields a
    staged entry and a non-blank Y an unstaged entry, so a path can appear
    in both lists.

    Args:
        output: Raw porcelain text (only right-trimmed, leading spaces matter)

    Returns:
        WorkingTreeState preserving git's ordering
    """
    staged: list[ChangeEntry] = []
    unstaged: list[ChangeEntry] = []
    untracked: list[str] = []

    for line in output.splitlines():
        if not line.strip():
            continue

        code = line[:2].ljust(2)
        path = line[3:]

        if code == UNTRACKED_CODE:
            untracked.append(path)
            continue

        index_code, worktree_code = code[0], code[1]
        if index_code not in (" ", "?"):
            staged.append(ChangeEntry(status=index_code, path=path))
        if worktree_code not in (" ", "?"):
            unstaged.append(ChangeEntry(status=worktree_code, path=path))

    return WorkingTreeState(staged=staged, unstaged=unstaged, untracked=untracked)


def parse_left_right_counts(output: str | None) -> RemoteDivergence:
    """Parse `git rev-list --left-right --count <upstream>...HEAD`.

    The left count is commits only on the upstream (behind), the right count
    is commits only on HEAD (ahead). Anything unparseable means no divergence.
    """
    if output is None:
        return RemoteDivergence()

    parts = output.split()
    if len(parts) != 2:
        return RemoteDivergence()

    try:
        behind = int(parts[0])
        ahead = int(parts[1])
    except ValueError:
        return RemoteDivergence()

    return RemoteDivergence(ahead=max(ahead, 0), behind=max(behind, 0))


def parse_branch_list(output: str) -> list[str]:
    """Parse `git branch --format=%(refname:short)` into branch names."""
    return [line.strip() for line in output.splitlines() if line.strip()]


def parse_commit_records(output: str) -> list[CommitSummary]:
    """Parse `git log --format=%h%x00%s%x00%ar` output.

    Lines that don't contain exactly three fields are skipped.
    """
    commits: list[CommitSummary] = []
    for line in output.splitlines():
        if not line:
            continue

        parts = line.split("\x00")
        if len(parts) != 3:
            continue

        commits.append(
            CommitSummary(short_hash=parts[0], subject=parts[1], relative_time=parts[2])
        )

    return commits
