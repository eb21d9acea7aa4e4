"""Discovery, validation and ordering of paired read files."""

from .config import PairedScanConfig, PairingConfig
from .discovery import discover_candidates, suffixes_for
from .pairing import pair_files
from .prefixes import MatePattern, infer_patterns

__version__ = "0.1.0"

__all__ = [
    'PairedScanConfig',
    'PairingConfig',
    'discover_candidates',
    'suffixes_for',
    'pair_files',
    'MatePattern',
    'infer_patterns',
]
