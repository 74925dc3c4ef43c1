"""structlog setup for chatjpt.

Library modules only call :func:`get_logger`; nothing is configured on import.
Applications that want to see chatjpt events call :func:`setup_logging` once.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import BoundLogger


# Loggers of the transport stack; they log every request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "httpcore.http11")


def _shared_processors() -> list[Any]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
    ]


def configure_structlog() -> None:
    """Route structlog events through the stdlib logging machinery."""
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            # Rendering happens once, in the handler's ProcessorFormatter
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


def _renderer(json_logs: bool) -> Any:
    if json_logs:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def setup_logging(
    json_logs: bool = False,
    log_level: str = "INFO",
    stream: TextIO | None = None,
) -> BoundLogger:
    """Configure structlog and stdlib logging for an application using chatjpt.

    Args:
        json_logs: Render one JSON object per line instead of console output
        log_level: Level for the root and ``chatjpt`` loggers
        stream: Output stream, stdout by default

    Returns:
        A logger bound to the ``chatjpt`` namespace
    """
    level = getattr(logging, log_level.upper(), logging.INFO)
    configure_structlog()

    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            processor=_renderer(json_logs),
            foreign_pre_chain=_shared_processors(),
        )
    )

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    package_logger = logging.getLogger("chatjpt")
    package_logger.handlers = []
    package_logger.propagate = True
    package_logger.setLevel(level)

    transport_level = logging.INFO if level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        transport_logger = logging.getLogger(name)
        transport_logger.handlers = []
        transport_logger.propagate = True
        transport_logger.setLevel(transport_level)

    return structlog.get_logger("chatjpt")  # type: ignore[no-any-return]


def get_logger(name: str | None = None) -> BoundLogger:
    """Return a structlog logger, typically ``get_logger(__name__)``."""
    return structlog.get_logger(name)  # type: ignore[no-any-return]
