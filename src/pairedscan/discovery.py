"""Candidate discovery.

Walks the scan root and returns read files in lexicographic path order:
entries of each directory are visited sorted by name, depth first.
Hidden entries are skipped and hidden directories are not entered.
Symbolic links are followed.
"""

import logging
import os
from pathlib import Path
from typing import Iterator, List, Optional, Sequence, Set, Tuple

from .common import is_hidden, has_suffix
from .errors import DiscoveryError

logger = logging.getLogger(__name__)

PLAIN_SUFFIXES = (".fq", ".fastq")
GZIPPED_SUFFIXES = (".fq.gz", ".fastq.gz")


def suffixes_for(gzipped: bool) -> Tuple[str, ...]:
    """Name endings accepted for plain or gzipped reads."""
    return GZIPPED_SUFFIXES if gzipped else PLAIN_SUFFIXES


def discover_candidates(
    root: Path,
    recursive: bool = False,
    suffixes: Sequence[str] = PLAIN_SUFFIXES,
) -> List[Path]:
    """Collect candidate read files under ``root``.

    Args:
        root: Directory to scan
        recursive: Descend into subdirectories (otherwise direct children only)
        suffixes: Accepted file name endings

    Returns:
        Candidate file paths in lexicographic path order

    Raises:
        DiscoveryError: Root is not a directory, a directory cannot be read,
            or a symbolic link loops back to one of its ancestors
    """
    root = Path(root)
    if not root.is_dir():
        raise DiscoveryError(f"Path provided is not a directory: {root}", path=str(root))

    max_depth: Optional[int] = None if recursive else 1
    candidates = list(_walk(root, suffixes, depth=1, max_depth=max_depth, ancestors=set()))

    logger.info(f"Discovered candidates: {{'root': {str(root)!r}, 'count': {len(candidates)}, 'recursive': {recursive}}}")
    return candidates


def _walk(
    directory: Path,
    suffixes: Sequence[str],
    depth: int,
    max_depth: Optional[int],
    ancestors: Set[Tuple[int, int]],
) -> Iterator[Path]:
    """Yield matching files below ``directory`` in sorted depth-first order."""
    directory_id = _identity(directory)
    if directory_id in ancestors:
        raise DiscoveryError(
            f"Symbolic link loop detected at: {directory}",
            path=str(directory),
        )
    ancestors = ancestors | {directory_id}

    try:
        entries = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DiscoveryError(f"Cannot read directory {directory}: {e}", path=str(directory)) from e

    for entry in entries:
        if is_hidden(entry):
            logger.debug(f"Skipping hidden entry: {entry}")
            continue

        # is_dir() follows symbolic links
        if entry.is_dir():
            if max_depth is None or depth < max_depth:
                yield from _walk(entry, suffixes, depth + 1, max_depth, ancestors)
            continue

        if has_suffix(entry, suffixes):
            yield entry


def _identity(directory: Path) -> Tuple[int, int]:
    stat = os.stat(directory)
    return stat.st_dev, stat.st_ino
