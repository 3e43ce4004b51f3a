"""Logging setup driven by ``ObservabilityConfig``.

Modules in this package log through ``logging.getLogger(__name__)`` and
attach context with ``extra={...}``. ``configure_logging`` installs a
single handler on the package logger; in structured mode the ``extra``
fields are emitted as JSON alongside the message.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import ObservabilityConfig, get_config

PACKAGE_LOGGER = "towngraph"

# Attributes present on every LogRecord; anything else came from ``extra``.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render a record and its ``extra`` fields as a single JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in vars(record).items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(config: Optional[ObservabilityConfig] = None) -> logging.Logger:
    """Attach a stream handler to the package logger.

    Calling this again replaces the handler installed by a previous call
    rather than stacking a second one.

    Args:
        config: Logging settings; defaults to ``get_config().observability``.

    Returns:
        The configured package logger.
    """
    config = config or get_config().observability
    package_logger = logging.getLogger(PACKAGE_LOGGER)

    for handler in list(package_logger.handlers):
        if getattr(handler, "_towngraph_handler", False):
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler._towngraph_handler = True  # type: ignore[attr-defined]
    if config.structured:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(config.format))

    package_logger.addHandler(handler)
    package_logger.setLevel(config.level.upper())
    return package_logger
