"""
Scenario splitting.

A rerun list holds one scenario identifier per line; a run with several
threads may also leave several identifiers in one file.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from .errors import SourceReadError


def split_scenarios(text: str) -> List[str]:
    """
    Return the trimmed, non-blank lines of ``text`` in file order.

    Only ``\\n`` separates identifiers; a trailing ``\\r`` is trimmed away
    and any other character stays part of the identifier.
    """
    scenarios = []
    for line in text.split("\n"):
        line = line.strip()
        if line:
            scenarios.append(line)
    return scenarios


def read_scenarios(path: Path) -> List[str]:
    """
    Read one rerun list and split it into scenario identifiers.

    Raises:
        SourceReadError: If the file cannot be read or is not valid UTF-8
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(f"Failed to read rerun list {path}: {e}", path=path) from e
    return split_scenarios(text)
