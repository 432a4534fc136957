"""Structured logging setup for mcschema.

Library modules log through ``structlog.get_logger(__name__)`` and never
configure logging themselves. Applications (the ``mcschema`` CLI, or a
caller embedding the converter) call configure_logging() once at startup.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog


def configure_logging(
    *,
    log_level: str = "INFO",
    json_format: bool = False,
    add_timestamp: bool = True,
) -> None:
    """Route structlog events through the standard library to stderr.

    stdout is left alone so JSON Schema printed there stays machine
    readable. An existing root handler (for example one installed by a
    test runner) is reused rather than duplicated.

    Args:
        log_level: Minimum level name, e.g. ``"DEBUG"`` or ``"WARNING"``.
        json_format: Render one JSON object per line instead of console text.
        add_timestamp: Prefix events with an ISO timestamp.

    Example:
        >>> configure_logging(log_level="DEBUG", add_timestamp=False)
    """
    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_format
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[*_event_chain(add_timestamp), renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    root = logging.getLogger()
    root.setLevel(logging.getLevelName(log_level.upper()))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(message)s"))
        root.addHandler(handler)


def _event_chain(add_timestamp: bool) -> list[Any]:
    chain: list[Any] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
    ]
    if add_timestamp:
        chain.append(structlog.processors.TimeStamper(fmt="iso", utc=True))
    chain.append(structlog.processors.StackInfoRenderer())
    chain.append(structlog.processors.format_exc_info)
    return chain
