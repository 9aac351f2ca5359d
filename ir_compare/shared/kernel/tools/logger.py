from __future__ import annotations

import contextvars
import json
import logging
import os
import sys
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import TypedDict

_SERVICE = "ir-compare-core"
_CONTEXT_KEYS = ("request_id", "model_id", "prompt_id", "provider")
_REDACTED = "[REDACTED]"
_SENSITIVE_KEYS = frozenset(
    {
        "authorization",
        "api_key",
        "secret",
        "token",
        "azure_openai_api_key",
        "gemini_api_key",
    }
)

_configured = False


class LogContext(TypedDict, total=False):
    request_id: str
    model_id: str
    prompt_id: str
    provider: str


_LOG_CONTEXT: contextvars.ContextVar[LogContext | None] = contextvars.ContextVar(
    "ir_compare_log_context",
    default=None,
)


def _redact(value: object, key: str | None = None) -> object:
    if key is not None and key.strip().lower().replace("-", "_") in _SENSITIVE_KEYS:
        return _REDACTED
    if isinstance(value, Mapping):
        return {str(name): _redact(item, str(name)) for name, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_redact(item) for item in value]
    return value


def get_log_context() -> LogContext:
    current = _LOG_CONTEXT.get()
    return dict(current) if current else {}


@contextmanager
def log_context(**fields: str | None) -> Iterator[None]:
    """Bind context keys (blank values ignored) for the enclosed block."""
    merged = get_log_context()
    for key, value in fields.items():
        text = value.strip() if value is not None else ""
        if text:
            merged[key] = text
    token = _LOG_CONTEXT.set(merged)
    try:
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def _record_payload(record: logging.LogRecord) -> dict[str, object]:
    payload: dict[str, object] = {
        "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
        "level": record.levelname,
        "logger": record.name,
        "message": record.getMessage(),
    }
    for key in (*_CONTEXT_KEYS, "event", "error_code"):
        value = getattr(record, key, None)
        if isinstance(value, str) and value:
            payload[key] = value
    fields = getattr(record, "fields", None)
    if isinstance(fields, Mapping) and fields:
        payload["fields"] = _redact(fields)
    return payload


class _JsonLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = _record_payload(record)
        payload["service"] = os.getenv("LOG_SERVICE", _SERVICE)
        payload["environment"] = os.getenv("APP_ENV", "dev")
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, sort_keys=True, default=str)


class _TextLogFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = _record_payload(record)
        parts = [
            str(payload.pop(key)) for key in ("timestamp", "level", "logger", "message")
        ]
        fields = payload.pop("fields", None)
        parts.extend(f"{key}={value}" for key, value in payload.items())
        if fields:
            encoded = json.dumps(fields, ensure_ascii=False, sort_keys=True, default=str)
            parts.append(f"fields={encoded}")
        if record.exc_info:
            parts.append(f"exception={self.formatException(record.exc_info)}")
        return " ".join(parts)


class _LogContextFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        context = get_log_context()
        for key in _CONTEXT_KEYS:
            setattr(record, key, context.get(key))
        return True


def _configure_logging() -> None:
    global _configured
    if _configured:
        return

    if os.getenv("LOG_FORMAT", "json").strip().lower() == "text":
        formatter: logging.Formatter = _TextLogFormatter()
    else:
        formatter = _JsonLogFormatter()
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(formatter)
    handler.addFilter(_LogContextFilter())

    root = logging.getLogger()
    level = logging.getLevelName(os.getenv("LOG_LEVEL", "INFO").upper())
    root.setLevel(level if isinstance(level, int) else logging.INFO)
    if not root.handlers:
        root.addHandler(handler)
    else:
        for existing in root.handlers:
            existing.addFilter(_LogContextFilter())
    _configured = True


def get_logger(name: str) -> logging.Logger:
    _configure_logging()
    return logging.getLogger(name)


def log_event(
    logger: logging.Logger,
    *,
    event: str,
    message: str,
    level: int = logging.INFO,
    error_code: str | None = None,
    fields: Mapping[str, object] | None = None,
) -> None:
    extra: dict[str, object] = {"event": event}
    if error_code is not None:
        extra["error_code"] = error_code
    if fields is not None:
        extra["fields"] = dict(fields)
    logger.log(level, message, extra=extra)
