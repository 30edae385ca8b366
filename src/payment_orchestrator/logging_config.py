"""
Structlog logging configuration.
"""
from __future__ import annotations

import json
import logging
from typing import Any

import structlog
from structlog.contextvars import merge_contextvars
from structlog.dev import ConsoleRenderer
from structlog.processors import JSONRenderer, TimeStamper, add_log_level
from structlog.stdlib import ProcessorFormatter


def get_renderer(json_output: bool) -> Any:
    """Console renderer for development, JSON otherwise.

    structlog passes default/sort_keys through to the serializer.
    """
    if not json_output:
        return ConsoleRenderer(colors=False)

    def _dumps(obj: Any, default: Any = None, **kwargs: Any) -> str:
        return json.dumps(obj, ensure_ascii=False, default=default or str, **kwargs)

    return JSONRenderer(serializer=_dumps)


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """Configure structlog and bridge stdlib logging into the same chain."""
    shared_pre_chain: list[Any] = [
        merge_contextvars,
        add_log_level,
        TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    structlog.configure(
        processors=[
            *shared_pre_chain,
            ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = ProcessorFormatter(
        foreign_pre_chain=shared_pre_chain,
        processors=[
            ProcessorFormatter.remove_processors_meta,
            get_renderer(json_output),
        ],
    )

    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.getLevelName(level.upper()))


def get_logger(name: str = __name__) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)
