"""Error classes for prefix inference, discovery and pairing."""

from pairedscan.common import ConfigurationError, PairedScanError

__all__ = [
    'ConfigurationError',
    'DiscoveryError',
    'PairingError',
    'ClassificationError',
    'CountMismatchError',
    'IdentityMismatchError',
    'classify_error',
]


class DiscoveryError(PairedScanError):
    """Candidate files could not be collected from the scan root."""
    pass


class PairingError(PairedScanError):
    """Base error for pairing engine failures."""
    pass


class ClassificationError(PairingError):
    """A file matches neither the mate-1 nor the mate-2 pattern."""
    pass


class CountMismatchError(PairingError):
    """Mate groups have different sizes."""
    pass


class IdentityMismatchError(PairingError):
    """Mate groups have equal sizes but different base identities."""
    pass


def classify_error(exception: Exception) -> str:
    """
    Classify an exception into an error category.
    
    Args:
        exception: The exception to classify
        
    Returns:
        Error category string: 'configuration', 'discovery', 'classification',
        'count_mismatch', 'identity_mismatch', 'pairing', 'permission', 'io',
        or 'unknown'
    """
    if isinstance(exception, ConfigurationError):
        return 'configuration'
    elif isinstance(exception, DiscoveryError):
        return 'discovery'
    elif isinstance(exception, ClassificationError):
        return 'classification'
    elif isinstance(exception, CountMismatchError):
        return 'count_mismatch'
    elif isinstance(exception, IdentityMismatchError):
        return 'identity_mismatch'
    elif isinstance(exception, PairingError):
        return 'pairing'
    elif isinstance(exception, PermissionError):
        return 'permission'
    elif isinstance(exception, OSError):
        return 'io'
    else:
        return 'unknown'
