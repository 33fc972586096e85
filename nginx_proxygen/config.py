"""Runtime settings resolved from environment variables and command-line flags"""

import os
from dataclasses import dataclass, replace

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
LOG_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Settings:
    """
    Settings for one run.

    Environment variables:
    - PROXYGEN_LOG_LEVEL: Log level (default: WARNING)
    - PROXYGEN_LOG_FORMAT: "json" or "text" (default: text)
    - PROXYGEN_LOG_FILE: Optional log file path
    - NO_COLOR: Disable colored output when set to any value
    """

    log_level: str = "WARNING"
    log_format: str = "text"
    log_file: str | None = None
    color: bool = True
    banner: bool = True

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        env = os.environ if environ is None else environ

        level = env.get("PROXYGEN_LOG_LEVEL", "WARNING").upper()
        if level not in LOG_LEVELS:
            level = "WARNING"

        log_format = env.get("PROXYGEN_LOG_FORMAT", "text").lower()
        if log_format not in LOG_FORMATS:
            log_format = "text"

        return cls(
            log_level=level,
            log_format=log_format,
            log_file=env.get("PROXYGEN_LOG_FILE") or None,
            color=not env.get("NO_COLOR"),
        )

    def with_args(self, args) -> "Settings":
        """Apply command-line overrides on top of the environment"""
        overrides = {}
        if getattr(args, "log_level", None):
            overrides["log_level"] = args.log_level.upper()
        if getattr(args, "no_color", False):
            overrides["color"] = False
        if getattr(args, "quiet", False):
            overrides["banner"] = False
        return replace(self, **overrides)
