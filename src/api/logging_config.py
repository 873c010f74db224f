"""Logging configuration for the ShopList API.

Root logging goes to stdout either as one JSON object per line or as plain
text. ``RequestLoggingMiddleware`` adds an access log entry per request and
tags each response with a request ID.
"""

import json
import logging
import sys
import time
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Dict

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

REQUEST_ID_HEADER = "X-Request-ID"
PLAIN_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
ACCESS_LOGGER = "src.api.main"

# Keys present on every LogRecord; anything else arrived through ``extra=``
_RECORD_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    """Render a record and its ``extra=`` fields as a JSON line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        payload.update(
            (key, value) for key, value in vars(record).items() if key not in _RECORD_KEYS
        )
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, ensure_ascii=False)


_FORMATTERS: Dict[str, Callable[[], logging.Formatter]] = {
    "json": JSONFormatter,
    "plain": lambda: logging.Formatter(PLAIN_FORMAT),
}


def setup_logging(log_level: str = "INFO", log_format: str = "json") -> None:
    """Send all logging to stdout through a single handler.

    Args:
        log_level: Logging level name, case-insensitive. Unknown names mean INFO.
        log_format: ``"json"`` or ``"plain"``. Unknown formats mean JSON.
    """
    level = logging.getLevelName(log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_FORMATTERS.get(log_format.lower(), JSONFormatter)())

    root = logging.getLogger()
    root.handlers[:] = [handler]
    root.setLevel(level)

    # RequestLoggingMiddleware already writes an access log
    for name in ("uvicorn", "uvicorn.access"):
        logging.getLogger(name).setLevel(logging.WARNING)


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Access log with a per-request ID, echoed in ``X-Request-ID``.

    An ID sent by the client is reused so calls can be traced across services.
    """

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        logger = logging.getLogger(ACCESS_LOGGER)
        started = time.perf_counter()
        context = {
            "request_id": request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex,
            "method": request.method,
            "path": request.url.path,
        }

        logger.info(
            "Incoming request",
            extra={
                **context,
                "query_params": str(request.query_params),
                "client_host": request.client.host if request.client else None,
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            logger.error(
                "Request failed",
                extra={**context, "error_type": type(e).__name__, "duration_ms": _elapsed_ms(started)},
                exc_info=True,
            )
            raise

        logger.info(
            "Request completed",
            extra={
                **context,
                "status_code": response.status_code,
                "duration_ms": _elapsed_ms(started),
            },
        )
        response.headers[REQUEST_ID_HEADER] = context["request_id"]
        return response
