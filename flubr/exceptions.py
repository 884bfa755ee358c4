"""
Custom exceptions for the flubr bot.
"""

from typing import Optional


class FlubrError(Exception):
    """Base exception for flubr bot errors."""

    pass


class ConfigurationError(FlubrError):
    """Raised when required configuration is missing or invalid."""

    pass


class FlubrConnectionError(FlubrError):
    """Raised when the flubr image service is unreachable."""

    pass


class FlubrApiError(FlubrError):
    """Raised when the flubr image service answers with a non-200 status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
