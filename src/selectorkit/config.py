from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class SelectorKitConfig:
    log_level: str = "WARNING"
    log_format: str = DEFAULT_LOG_FORMAT

    @classmethod
    def from_env(cls) -> SelectorKitConfig:
        """Build a config, taking the log level from SELECTORKIT_LOG_LEVEL.

        Unknown level names fall back to the default.
        """
        level = os.environ.get("SELECTORKIT_LOG_LEVEL", cls.log_level).strip().upper()
        if level not in LOG_LEVELS:
            level = cls.log_level
        return cls(log_level=level)
