"""Structlog logging routed through the stdlib root logger."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Any

import structlog

from .config import get_settings

_CONFIGURED = False
_QUIET_LOGGERS = ("httpx", "httpcore", "watchfiles.main")


def _render_line(_: Any, __: str, event_dict: dict[str, Any]) -> str:
    """`<iso-ts> [LEVEL] event key=value ...`"""

    head = [
        event_dict.pop("timestamp", ""),
        f"[{str(event_dict.pop('level', 'info')).upper()}]",
        str(event_dict.pop("event", "")),
    ]
    context = [f"{key}={value}" for key, value in event_dict.items() if value is not None]
    return " ".join(part for part in head + context if part)


def _handlers(level: str, formatter: logging.Formatter) -> list[logging.Handler]:
    # stdout belongs to the MCP stdio transport.
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    log_file = (get_settings().log_file or "").strip()
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def configure_logging() -> None:
    """Configure structlog and the root logger once per process."""

    global _CONFIGURED
    if _CONFIGURED and logging.getLogger().handlers:
        return

    level = get_settings().log_level

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _render_line,
        ],
    )

    logging.basicConfig(handlers=_handlers(level, formatter), level=level, format="%(message)s")
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    _CONFIGURED = True


def get_logger(*args: Any, **kwargs: Any) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger, configuring logging on first use."""

    configure_logging()
    return structlog.get_logger(*args, **kwargs)
