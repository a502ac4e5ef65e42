"""
Structured logging for the Carhub services

Every record carries the request ID and the name of the service that
handled it, so car and reviews logs can share one sink.
"""

import base64
import logging
import secrets
import sys
import time
from contextvars import ContextVar
from typing import Any

import structlog

request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
service_ctx: ContextVar[str | None] = ContextVar("service", default=None)


def add_request_context(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """structlog processor that stamps the current request ID and service."""
    _ = logger, method_name

    if request_id := request_id_ctx.get():
        event_dict.setdefault("request_id", request_id)
    if service := service_ctx.get():
        event_dict.setdefault("service", service)
    return event_dict


def _processors(debug: bool) -> list[Any]:
    processors: list[Any] = [
        # Drop records below the stdlib level before doing any work
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        add_request_context,
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]
    # Colored key=value lines locally, one JSON object per line elsewhere
    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())
    return processors


def configure_logging(debug: bool = False) -> None:
    """Route structlog through stdlib logging on stdout.

    Args:
        debug: Log at DEBUG with console output instead of INFO with JSON.
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    structlog.configure(
        processors=_processors(debug),
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Build a 14-character url-safe request ID.

    8 bytes of microsecond timestamp followed by 2 random bytes, base64
    encoded without padding.
    """
    raw = int(time.time() * 1_000_000).to_bytes(8, byteorder="big") + secrets.token_bytes(2)
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, service: str | None = None) -> str:
    """Bind the request ID (generated when missing) and service for this request.

    Returns:
        The request ID now bound to the context
    """
    request_id = request_id or generate_request_id()
    request_id_ctx.set(request_id)
    if service is not None:
        service_ctx.set(service)
    return request_id


def clear_request_context() -> None:
    request_id_ctx.set(None)
    service_ctx.set(None)


def get_request_id() -> str | None:
    return request_id_ctx.get()
