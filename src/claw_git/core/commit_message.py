"""Commit message synthesis from the staged file summary."""

# Up to this many file names are spelled out in a generated message
MAX_LISTED_FILES = 3


def parse_stat_files(stat_output: str) -> list[str]:
    """Extract file paths from `git diff --cached --stat` output.

    Every line except the trailing summary line (``N files changed, ...``)
    is ``<path> | <changes>``.

    Args:
        stat_output: Raw stat text, possibly empty

    Returns:
        Staged file paths in git's order
    """
    lines = [line for line in stat_output.splitlines() if line.strip()]
    file_lines = lines[:-1]
    return [line.split("|")[0].strip() for line in file_lines]


def synthesize_commit_message(files: list[str]) -> str | None:
    """Build a commit message from the list of staged files.

    Returns:
        ``update <file>`` for one file, the comma-joined names for two or
        three files, ``update <count> files`` above that, or None when
        nothing is staged.
    """
    if not files:
        return None

    if len(files) <= MAX_LISTED_FILES:
        return f"update {', '.join(files)}"

    return f"update {len(files)} files"
