from __future__ import annotations

import logging
from typing import Optional

from .config import ObservabilityConfig, get_config
from .domain.errors import ConfigurationError

_CONFIGURED = False


def configure_logging(config: Optional[ObservabilityConfig] = None) -> None:
    """Apply the configured level and format to the root logger.

    Only the first call installs a handler; later calls just update the level.
    """
    global _CONFIGURED
    config = config or get_config().observability
    level = logging.getLevelName(config.level.upper())
    if not isinstance(level, int):
        raise ConfigurationError(
            f"Unknown log level: {config.level!r}",
            setting_name="YBS_LOG_LEVEL",
        )

    root = logging.getLogger()
    if not _CONFIGURED:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(config.format))
        root.addHandler(handler)
        _CONFIGURED = True
    root.setLevel(level)
