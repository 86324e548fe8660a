"""Runtime configuration model for basegraph.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import os
from pathlib import Path

from core.constants import DEFAULT_DATA_ROOT, DEFAULT_LOG_LEVEL, SUPPORTED_LOG_LEVELS
from core.errors import BaseGraphConfigError


@dataclass(frozen=True)
class BaseGraphConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for the disk transport.
        log_level: Minimum structured log level.
    """

    data_root: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "BaseGraphConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            BaseGraphConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("BASEGRAPH_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        log_level_value = os.getenv("BASEGRAPH_LOG_LEVEL", DEFAULT_LOG_LEVEL)
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            log_level=_parse_log_level(log_level_value),
        )


def _parse_log_level(raw_value: str) -> str:
    """Parse the log level environment value.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Upper-cased supported level name.

    Raises:
        BaseGraphConfigError: If the level is not supported.
    """
    level = raw_value.strip().upper()
    if level not in SUPPORTED_LOG_LEVELS:
        raise BaseGraphConfigError(
            "Invalid BASEGRAPH_LOG_LEVEL value: "
            f"expected one of {', '.join(SUPPORTED_LOG_LEVELS)}, got '{raw_value}'. "
            "Set BASEGRAPH_LOG_LEVEL to a supported level name."
        )
    return level
