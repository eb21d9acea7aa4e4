"""Path predicates used by candidate discovery."""

from pathlib import Path
from typing import Iterable


def is_hidden(path: Path) -> bool:
    """True if the entry name starts with a dot."""
    return path.name.startswith('.')


def has_suffix(path: Path, suffixes: Iterable[str]) -> bool:
    """
    Check whether a file name ends with one of the given suffixes.

    Multi-part suffixes such as ``.fq.gz`` are matched on the full name,
    which ``Path.suffix`` cannot do.

    Args:
        path: Path to check
        suffixes: Accepted name endings, e.g. ``(".fq", ".fastq")``

    Returns:
        True if the name ends with any suffix
    """
    name = path.name
    return any(name.endswith(suffix) for suffix in suffixes)
