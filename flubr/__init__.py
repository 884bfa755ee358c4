"""
Flubr bot - answers build notifications in Slack with pass/fail images.
"""

from flubr.classifier import classify, PASS, FAIL
from flubr.config import FlubrConfig
from flubr.exceptions import (
    FlubrError,
    ConfigurationError,
    FlubrConnectionError,
    FlubrApiError,
)

__all__ = [
    "classify",
    "PASS",
    "FAIL",
    "FlubrConfig",
    "FlubrError",
    "ConfigurationError",
    "FlubrConnectionError",
    "FlubrApiError",
]
