"""Mate pattern inference.

Turns the prefix options of a run into the two patterns that recognise
mate-1 and mate-2 file names. Each pattern captures the text before the
mate token and the text after it; joining the two gives the base identity
used to check that every file has its mate.

Prefixes are matched literally. In a shared prefix the placeholder X is the
only wildcard and stands for either mate digit.
"""

import logging
import re
from dataclasses import dataclass
from typing import Optional, Tuple

from .config import PairingConfig
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_PREFIX_1 = "R1"
DEFAULT_PREFIX_2 = "R2"

# Character in a shared prefix that stands for the mate number
PAIRED_PLACEHOLDER = "X"
PAIRED_WILDCARD = "[12X]"


@dataclass(frozen=True)
class MatePattern:
    """Compiled mate pattern and the token it was built from.

    Attributes:
        token: Prefix as given by the user (used in messages)
        regex: Compiled pattern with exactly two groups: before and after the token
    """
    token: str
    regex: re.Pattern

    def match(self, name: str) -> Optional[re.Match]:
        """Match a file name; the token binds to its first occurrence."""
        return self.regex.match(name)

    def identity(self, name: str) -> Optional[str]:
        """Return the name with the token removed, or None if it does not match."""
        m = self.match(name)
        if m is None:
            return None
        return m.group(1) + m.group(2)

    def __str__(self) -> str:
        return f'"{self.token}"'


def build_mate_pattern(token: str, fragment: Optional[str] = None) -> MatePattern:
    """Compile a mate token into a two-group pattern.

    Args:
        token: Token as given by the user, matched literally
        fragment: Already escaped regular expression to use in place of
            ``re.escape(token)``

    Returns:
        MatePattern whose regex is ``^(.*?)<token>(.*)$``

    Raises:
        ConfigurationError: Token is empty or does not compile
    """
    if not token:
        raise ConfigurationError("Mate prefix must not be empty", prefix=token)
    fragment = re.escape(token) if fragment is None else fragment

    try:
        regex = re.compile(rf"^(.*?){fragment}(.*)$", re.DOTALL)
    except re.error as e:
        raise ConfigurationError(
            f"Prefix \"{token}\" is not a valid pattern: {e}",
            prefix=token,
        ) from e

    return MatePattern(token=token, regex=regex)


def shared_fragment(shared: str) -> str:
    """Escape a shared prefix, turning each placeholder into the mate wildcard."""
    return PAIRED_WILDCARD.join(re.escape(piece) for piece in shared.split(PAIRED_PLACEHOLDER))


def infer_patterns(config: PairingConfig) -> Tuple[MatePattern, MatePattern]:
    """Derive the mate-1 and mate-2 patterns from the prefix options.

    - shared prefix: one pattern, returned for both mates
    - both individual prefixes: one pattern each
    - neither: the R1/R2 defaults

    Raises:
        ConfigurationError: Shared prefix mixed with individual prefixes,
            only one individual prefix given, or a prefix fails to compile
    """
    prefix_1 = config.prefix_1
    prefix_2 = config.prefix_2
    shared = config.prefix_paired

    if shared is not None:
        if prefix_1 is not None or prefix_2 is not None:
            raise ConfigurationError(
                "A shared prefix cannot be combined with separate mate prefixes",
                prefix_paired=shared,
                prefix_1=prefix_1,
                prefix_2=prefix_2,
            )
        pattern = build_mate_pattern(shared, shared_fragment(shared))
        logger.debug(f"Using shared mate pattern: {{'prefix': {shared!r}, 'regex': {pattern.regex.pattern!r}}}")
        return pattern, pattern

    if prefix_1 is not None and prefix_2 is not None:
        pattern_1 = build_mate_pattern(prefix_1)
        pattern_2 = build_mate_pattern(prefix_2)
    elif prefix_1 is not None or prefix_2 is not None:
        raise ConfigurationError(
            "Both mate prefixes must be set when one is set",
            prefix_1=prefix_1,
            prefix_2=prefix_2,
        )
    else:
        pattern_1 = build_mate_pattern(DEFAULT_PREFIX_1)
        pattern_2 = build_mate_pattern(DEFAULT_PREFIX_2)

    logger.debug(f"Using mate patterns: {{'mate_1': {pattern_1.token!r}, 'mate_2': {pattern_2.token!r}}}")
    return pattern_1, pattern_2
