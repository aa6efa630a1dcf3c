"""Structured JSON logging for the wardrobe sanctuary engine.

Every record carries the service name and a correlation id so one outfit or
insight request can be followed across the tool, engine and HTTP layers.
Wardrobe payloads never reach the log sink verbatim: clothing records are
collapsed to their ids and personal fields are masked.
"""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import time
import uuid
from typing import IO, Any, Dict, Iterator, Mapping, Optional

SERVICE_NAME = "wardrobe-sanctuary"
CORRELATION_ID: contextvars.ContextVar[Optional[str]] = contextvars.ContextVar("correlation_id", default=None)

# LogRecord attributes that are bookkeeping rather than event fields.
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}
_PERSONAL_KEYS = frozenset({"user_id", "email", "notes", "userNotes", "brand", "image_url", "imageUrl"})
_EMAIL_PATTERN = re.compile(r"[\w.\-]+@[\w.\-]+")


class JsonFormatter(logging.Formatter):
    """Render each record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = record.getMessage()
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "service": SERVICE_NAME,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", message),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        for key, value in record.__dict__.items():
            if key in _RECORD_ATTRIBUTES or key in payload:
                continue
            payload[key] = redact_for_log(value)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def configure_logging(level: int | str | None = None, stream: IO[str] | None = None) -> None:
    """Route the root logger through a single JSON handler.

    ``level`` falls back to ``LOG_LEVEL`` and then INFO. Calling this again
    replaces the previous handler instead of stacking a second one.
    """

    desired_level = level or os.getenv("LOG_LEVEL", "INFO")
    if isinstance(desired_level, str):
        desired_level = desired_level.upper()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=desired_level, handlers=[handler], force=True)


def _redact_string(value: str) -> str:
    if _EMAIL_PATTERN.search(value):
        return _EMAIL_PATTERN.sub("[redacted-email]", value)
    if value.lower().startswith("http"):
        return "[redacted-url]"
    return value


def _is_clothing_record(value: Any) -> bool:
    return isinstance(value, Mapping) and ("item_id" in value or "id" in value) and "category" in value


def redact_for_log(payload: Any) -> Any:
    """Scrub a log payload.

    Clothing records collapse to their id, personal keys are masked and
    email addresses or URLs inside strings are replaced.
    """

    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        return _redact_string(payload)
    if _is_clothing_record(payload):
        return f"item:{payload.get('item_id') or payload.get('id')}"
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, Mapping):
        return _redact_fields(payload)
    return _redact_string(str(payload))


def _redact_fields(fields: Mapping[str, Any]) -> Dict[str, Any]:
    return {key: "[redacted]" if key in _PERSONAL_KEYS else redact_for_log(value) for key, value in fields.items()}


def get_logger(name: str) -> logging.Logger:
    """Return a module logger, installing the JSON handler on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Return the active correlation id, adopting ``correlation_id`` or minting one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    new_id = uuid.uuid4().hex
    CORRELATION_ID.set(new_id)
    return new_id


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id to a block, restoring the previous one afterwards."""

    token = CORRELATION_ID.set(correlation_id or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Emit a structured record whose extra fields are already redacted."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **_redact_fields(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, **attributes: Any) -> Iterator[str]:
    """Time one engine operation under a scoped correlation id.

    Emits ``operation_started`` and ``operation_finished`` at DEBUG, the latter
    with ``duration_ms`` and an ``outcome`` of ``ok`` or ``error``.
    """

    logger = logging.getLogger(__name__)
    with correlation_context(attributes.pop("correlation_id", None)) as scoped_id:
        log_event(logger, logging.DEBUG, "operation_started", operation=name, correlation_id=scoped_id, **attributes)
        start = time.perf_counter()
        outcome = "ok"
        try:
            yield scoped_id
        except Exception:
            outcome = "error"
            raise
        finally:
            log_event(
                logger,
                logging.DEBUG,
                "operation_finished",
                operation=name,
                correlation_id=scoped_id,
                outcome=outcome,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
            )


__all__ = [
    "SERVICE_NAME",
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "redact_for_log",
    "operation_context",
]
