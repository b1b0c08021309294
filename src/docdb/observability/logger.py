from __future__ import annotations

import json
import logging
from typing import Any, Mapping

from ..application.interfaces import ObservabilityRecorder

LOGGER_NAME = "docdb"


def _build_logger() -> logging.Logger:
    """Build logger that respects the centralized LOG_LEVEL configuration."""
    from .logging_setup import get_log_level_from_settings

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(get_log_level_from_settings())
    return logger


class LoggingObservabilityRecorder(ObservabilityRecorder):
    """Adapter that writes structured events to Python logging."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self._logger = logger or _build_logger()

    def record_event(
        self,
        stage: str,
        details: Mapping[str, Any] | None = None,
        level: str = "info",
    ) -> None:
        log_parts = [f"stage={stage}"]
        if details:
            payload = json.dumps(dict(details), ensure_ascii=False, default=str, sort_keys=True)
            log_parts.append(f"details={payload}")
        self._logger.log(logging.getLevelName(level.upper()), " | ".join(log_parts))
