"""
Turn raw step output into the lines shown in a comment.
"""

from typing import Iterable, List

def curate_logs(lines: Iterable[str], verbatim: bool = False) -> List[str]:
    """
    Strip trailing newlines, drop "+" command echo lines unless verbatim,
    then trim blank lines from both ends.
    """
    logs = []
    for line in lines:
        line = line.rstrip("\n")
        # Commands are echoed with a leading "+" since steps run with set -x
        if verbatim or not line.startswith("+"):
            logs.append(line)

    return trim_blank_logs(logs)

def trim_blank_logs(logs: List[str]) -> List[str]:
    """Discard leading and trailing blank lines. Interior blank lines are kept."""
    start = 0
    while start < len(logs) and not logs[start].strip():
        start += 1

    end = len(logs)
    while end > start and not logs[end - 1].strip():
        end -= 1

    return logs[start:end]
