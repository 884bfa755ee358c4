"""
Flubr bot configuration.

Built once at startup from the process environment and passed explicitly to
every component. Nothing else in the bot reads os.environ.
"""

import os
import re
from dataclasses import dataclass
from typing import Mapping, Optional, Pattern

from flubr.exceptions import ConfigurationError

REQUIRED_VARS = {
    "FLUBR_SLACK_TOKEN": "Bot token from api.slack.com (xoxb-...)",
    "FLUBR_SLACK_APP_TOKEN": "App token for Socket Mode (xapp-...)",
    "FLUBR_URL": "Base URL of the flubr image service",
    "FLUBR_PASS": "Regular expression for passing builds",
    "FLUBR_FAIL": "Regular expression for failing builds",
}

OPTIONAL_VARS = {
    "FLUBR_HTTP_TIMEOUT": "30",
    "FLUBR_AUTO_RECONNECT": "true",
    "FLUBR_LOG_LEVEL": "INFO",
    "FLUBR_LOG_FILE": "",
}


def _compile(name: str, pattern: str) -> Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ConfigurationError(f"{name} is not a valid regular expression: {e}") from e


@dataclass(frozen=True)
class FlubrConfig:
    """Immutable bot configuration."""

    bot_token: str
    app_token: str
    flubr_url: str
    pass_pattern: Pattern
    fail_pattern: Pattern
    http_timeout: float = 30.0
    auto_reconnect: bool = True
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "FlubrConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from (defaults to os.environ)

        Returns:
            FlubrConfig instance

        Raises:
            ConfigurationError: If a required variable is missing, a pattern
                does not compile, or a value has the wrong type
        """
        env = os.environ if environ is None else environ

        missing = [var for var in REQUIRED_VARS if not env.get(var)]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        timeout_raw = env.get("FLUBR_HTTP_TIMEOUT") or OPTIONAL_VARS["FLUBR_HTTP_TIMEOUT"]
        try:
            http_timeout = float(timeout_raw)
        except ValueError as e:
            raise ConfigurationError(
                f"FLUBR_HTTP_TIMEOUT must be a number, got {timeout_raw!r}"
            ) from e

        auto_reconnect = (
            env.get("FLUBR_AUTO_RECONNECT") or OPTIONAL_VARS["FLUBR_AUTO_RECONNECT"]
        ).lower() == "true"

        return cls(
            bot_token=env["FLUBR_SLACK_TOKEN"],
            app_token=env["FLUBR_SLACK_APP_TOKEN"],
            flubr_url=env["FLUBR_URL"],
            pass_pattern=_compile("FLUBR_PASS", env["FLUBR_PASS"]),
            fail_pattern=_compile("FLUBR_FAIL", env["FLUBR_FAIL"]),
            http_timeout=http_timeout,
            auto_reconnect=auto_reconnect,
            log_level=(env.get("FLUBR_LOG_LEVEL") or "INFO").upper(),
            log_file=env.get("FLUBR_LOG_FILE") or None,
        )
