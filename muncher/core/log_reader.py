"""
Read vote labels out of election log files.

Each matching line looks like `... vote => Name`; everything after the arrow
is the raw label. Labels are normalized before they reach the consolidator.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, Optional

VOTE_PATTERN = r"vote\s*=>\s*(.+)"

_LATIN = re.compile(r"[a-zA-Z]")
_CASE_BOUNDARY = re.compile(r"([a-zа-я])([A-ZА-Я])")


def iter_lines(path: Path, encoding: str = "utf-8") -> Iterator[str]:
    """
    Yield lines from a log file.

    Raises:
        FileNotFoundError: If the log file does not exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Log file not found: {path}")

    with open(path, encoding=encoding) as f:
        for line in f:
            yield line


def extract_label(line: str, pattern: str = VOTE_PATTERN) -> Optional[str]:
    """Raw label from a log line, or None if the line carries no vote."""
    match = re.search(pattern, line)
    if match is None:
        return None
    return match.group(1).strip()


def normalize_label(name: str) -> str:
    """
    Strip Latin letters and split glued words on case transitions.

    "ИвановИван" -> "Иванов Иван"; "Иванxов" -> "Иванов".
    """
    cleaned = _LATIN.sub("", name)
    return _CASE_BOUNDARY.sub(r"\1 \2", cleaned)


def iter_labels(
    lines: Iterable[str],
    pattern: str = VOTE_PATTERN,
) -> Iterator[tuple[int, str, str]]:
    """
    Extract and normalize labels, skipping lines without a vote.

    Yields:
        (line_number, raw_label, normalized_label), line numbers from 1
    """
    for line_num, line in enumerate(lines, start=1):
        raw = extract_label(line, pattern)
        if raw is None:
            continue
        yield line_num, raw, normalize_label(raw)
