"""structlog rendering for mode-selector's stdlib loggers.

Records go to stderr, plus an optional file, because stdout carries only the
chosen identifier. Modules keep using ``logging.getLogger(__name__)``.
"""

from __future__ import annotations

import logging
import os
import sys

import structlog
from structlog.types import Processor

LEVEL_ENV = "MS_LOG_LEVEL"
JSON_ENV = "MS_LOG_JSON"
FILE_ENV = "MS_LOG_FILE"

DEFAULT_LEVEL = logging.WARNING

_PRE_CHAIN: tuple[Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso", utc=True),
)


def level_from(value: str | int | None) -> int:
    """Map ``"info"``, ``"20"`` or ``20`` to a level; unknown names give the default."""
    if isinstance(value, int):
        return value
    if not value:
        return DEFAULT_LEVEL
    value = value.strip()
    if value.isdigit():
        return int(value)
    return logging.getLevelNamesMapping().get(value.upper(), DEFAULT_LEVEL)


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


def _handlers(log_file: str | None, renderer: Processor) -> list[logging.Handler]:
    formatter = structlog.stdlib.ProcessorFormatter(
        processor=renderer,
        foreign_pre_chain=list(_PRE_CHAIN),
    )
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def configure_logging(
    *,
    level: str | int | None = None,
    debug: bool = False,
    log_file: str | None = None,
    json: bool | None = None,
    force: bool = False,
) -> None:
    """Install the stderr (and file) handlers on the root logger.

    Arguments win over ``MS_LOG_LEVEL``, ``MS_LOG_JSON`` and ``MS_LOG_FILE``;
    ``debug`` wins over any level. A root logger that already has handlers
    is left alone unless ``force`` is set.
    """
    structlog.configure(
        processors=[*_PRE_CHAIN, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    root = logging.getLogger()
    if root.handlers and not force:
        return

    if json is None:
        json = _env_flag(JSON_ENV)
    renderer: Processor = (
        structlog.processors.JSONRenderer()
        if json
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in _handlers(log_file or os.environ.get(FILE_ENV), renderer):
        root.addHandler(handler)
    root.setLevel(logging.DEBUG if debug else level_from(level or os.environ.get(LEVEL_ENV)))
