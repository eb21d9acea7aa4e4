"""Base error definitions for pairedscan."""

from typing import Any, Dict


class PairedScanError(Exception):
    """Base exception for all pairedscan errors."""

    def __init__(self, message: str, **context: Any) -> None:
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context


class ConfigurationError(PairedScanError):
    """Configuration is invalid, conflicting, or cannot be found."""
    pass
