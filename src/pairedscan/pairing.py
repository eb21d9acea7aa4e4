"""Pairing engine.

Sorts candidate files into mate-1 and mate-2 groups, checks that every file
has exactly one mate, and emits the paired list grouped or interleaved.

Pairing is checked on base identities as sets. Emission uses the order the
files were classified in, so interleaved output relies on the scanner's
lexicographic ordering to put the i-th mate-1 next to its mate-2. That
alignment is not re-checked here.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Set, Tuple

from .config import PairingConfig
from .errors import ClassificationError, CountMismatchError, IdentityMismatchError
from .prefixes import MatePattern, infer_patterns

logger = logging.getLogger(__name__)


@dataclass
class MateGroups:
    """Files classified per mate, in scan order.

    A file matching both patterns is listed in both groups.
    """
    mate_1: List[Path] = field(default_factory=list)
    mate_2: List[Path] = field(default_factory=list)


def classify_files(
    candidates: Iterable[Path],
    pattern_1: MatePattern,
    pattern_2: MatePattern,
    absolute: bool = False,
) -> MateGroups:
    """Partition candidate files into mate groups.

    Args:
        candidates: Paths in scan order
        pattern_1: Mate-1 pattern
        pattern_2: Mate-2 pattern
        absolute: Resolve each path to its absolute form before matching

    Returns:
        MateGroups preserving the input order within each group

    Raises:
        ClassificationError: A file name matches neither pattern
    """
    groups = MateGroups()

    for candidate in candidates:
        path = Path(candidate)
        if absolute:
            path = path.resolve()

        is_mate_1 = pattern_1.match(path.name) is not None
        is_mate_2 = pattern_2.match(path.name) is not None

        if not is_mate_1 and not is_mate_2:
            raise ClassificationError(
                f"File does not contain either a {pattern_1} or {pattern_2} identifier: \"{path}\"",
                path=str(path),
                mate_1=pattern_1.token,
                mate_2=pattern_2.token,
            )

        if is_mate_1:
            groups.mate_1.append(path)
        if is_mate_2:
            groups.mate_2.append(path)

    logger.debug(f"Classified files: {{'mate_1': {len(groups.mate_1)}, 'mate_2': {len(groups.mate_2)}}}")
    return groups


def collect_identities(paths: Iterable[Path], pattern: MatePattern) -> Set[str]:
    """Base identities of a group; files sharing an identity collapse."""
    identities = set()
    for path in paths:
        identity = pattern.identity(path.name)
        if identity is None:
            # Classification guarantees a match
            raise ClassificationError(
                f"File does not contain a {pattern} identifier: \"{path}\"",
                path=str(path),
            )
        identities.add(identity)
    return identities


def find_missing_mates(
    groups: MateGroups,
    pattern_1: MatePattern,
    pattern_2: MatePattern,
) -> Tuple[Set[str], Set[str]]:
    """Return identities lacking a mate-2 file and identities lacking a mate-1 file."""
    identities_1 = collect_identities(groups.mate_1, pattern_1)
    identities_2 = collect_identities(groups.mate_2, pattern_2)
    return identities_1 - identities_2, identities_2 - identities_1


def validate_groups(
    groups: MateGroups,
    pattern_1: MatePattern,
    pattern_2: MatePattern,
) -> None:
    """Check that the two groups pair up completely.

    Raises:
        CountMismatchError: Groups differ in size
        IdentityMismatchError: Same size but base identities differ; the
            missing identities are logged before raising
    """
    count_1 = len(groups.mate_1)
    count_2 = len(groups.mate_2)

    if count_1 != count_2:
        if count_1 > count_2:
            more, fewer = pattern_1, pattern_2
        else:
            more, fewer = pattern_2, pattern_1
        raise CountMismatchError(
            f"Unpaired number of {pattern_1} and {pattern_2} identifiers! "
            f"There are more {more} than {fewer} ({count_1} vs {count_2})",
            surplus=more.token,
            mate_1_count=count_1,
            mate_2_count=count_2,
        )

    missing_from_2, missing_from_1 = find_missing_mates(groups, pattern_1, pattern_2)

    if missing_from_1 or missing_from_2:
        logger.error(f"Files without a {pattern_2} mate: {sorted(missing_from_2)}")
        logger.error(f"Files without a {pattern_1} mate: {sorted(missing_from_1)}")
        raise IdentityMismatchError(
            f"Found {len(missing_from_2) + len(missing_from_1)} file(s) without a matching "
            f"{pattern_1}/{pattern_2} mate",
            missing_from_mate_1=missing_from_1,
            missing_from_mate_2=missing_from_2,
        )


def emit_paired(groups: MateGroups, interleave: bool = False) -> List[str]:
    """Build the output list from validated groups.

    Interleaved: mate-1[i], mate-2[i] for each i. Otherwise every mate-1
    file, then every mate-2 file.
    """
    if interleave:
        output = []
        for mate_1, mate_2 in zip(groups.mate_1, groups.mate_2):
            output.append(str(mate_1))
            output.append(str(mate_2))
        return output

    return [str(path) for path in groups.mate_1] + [str(path) for path in groups.mate_2]


def pair_files(
    candidates: Iterable[Path],
    config: PairingConfig,
    patterns: Optional[Tuple[MatePattern, MatePattern]] = None,
) -> List[str]:
    """Classify, validate and emit candidate files.

    Args:
        candidates: Candidate paths in scan order
        config: Pairing options
        patterns: Pre-inferred mate patterns, inferred from ``config`` if omitted

    Returns:
        Ordered list of path strings

    Raises:
        ConfigurationError: Prefix options are invalid
        PairingError: Files cannot be classified or paired
    """
    pattern_1, pattern_2 = patterns if patterns is not None else infer_patterns(config)

    groups = classify_files(candidates, pattern_1, pattern_2, absolute=config.absolute)
    validate_groups(groups, pattern_1, pattern_2)

    output = emit_paired(groups, interleave=config.interleave)
    logger.info(f"Paired files: {{'pairs': {len(groups.mate_1)}, 'interleave': {config.interleave}}}")
    return output
