"""Instrumentation for engine tools: input validation plus structured call logs."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Callable, Dict, Mapping, ParamSpec, TypeVar

from pydantic import BaseModel, ValidationError

from sanctuary_app.logging_config import (
    ensure_correlation_id,
    get_logger,
    log_event,
    operation_context,
)

LOGGER = get_logger(__name__)
P = ParamSpec("P")
R = TypeVar("R")


def _summarise_arguments(kwargs: Mapping[str, Any]) -> Dict[str, Any]:
    """Describe tool arguments without echoing wardrobe contents."""

    summary: Dict[str, Any] = {}
    for key, value in kwargs.items():
        if isinstance(value, (list, tuple)):
            summary[f"{key}_count"] = len(value)
        elif value is not None:
            summary[key] = value
    return summary


def _summarise_result(result: Any) -> Dict[str, Any]:
    if not isinstance(result, Mapping):
        return {}
    summary: Dict[str, Any] = {"status": result.get("status")}
    if "skipped" in result:
        summary["skipped_count"] = len(result["skipped"])
    return summary


def instrument_tool(
    tool_name: str,
    input_model: type[BaseModel] | None = None,
    on_validation_error: Callable[[ValidationError], R] | None = None,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Validate keyword input against ``input_model`` and log the call lifecycle.

    Invalid input is handed to ``on_validation_error`` when given, otherwise
    the :class:`ValidationError` propagates. Unexpected failures are logged
    with their traceback and re-raised.
    """

    def decorator(func: Callable[P, R]) -> Callable[P, R]:
        @wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            correlation_id = ensure_correlation_id()

            if input_model:
                try:
                    kwargs = input_model.model_validate(kwargs).model_dump()
                except ValidationError as exc:
                    log_event(
                        LOGGER,
                        logging.WARNING,
                        "tool_validation_failed",
                        tool=tool_name,
                        correlation_id=correlation_id,
                        fields=[".".join(str(part) for part in error.get("loc", ())) for error in exc.errors()],
                        errors=[error.get("msg") for error in exc.errors()],
                    )
                    if on_validation_error:
                        return on_validation_error(exc)
                    raise

            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_started",
                tool=tool_name,
                correlation_id=correlation_id,
                arguments=_summarise_arguments(kwargs),
            )
            start = time.perf_counter()
            with operation_context(f"tool:{tool_name}", correlation_id=correlation_id):
                try:
                    result = func(*args, **kwargs)
                except Exception:
                    log_event(
                        LOGGER,
                        logging.ERROR,
                        "tool_call_failed",
                        tool=tool_name,
                        correlation_id=correlation_id,
                        duration_ms=round((time.perf_counter() - start) * 1000, 2),
                        exc_info=True,
                    )
                    raise
            log_event(
                LOGGER,
                logging.INFO,
                "tool_call_completed",
                tool=tool_name,
                correlation_id=correlation_id,
                duration_ms=round((time.perf_counter() - start) * 1000, 2),
                **_summarise_result(result),
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_tool"]
