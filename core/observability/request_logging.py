"""HTTP request logging with redacted payload previews.

Journal entries and chat messages are personal, so bodies are only logged at
DEBUG and free-text fields are replaced by their length.
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping

from fastapi import FastAPI, Request

_PREVIEW_LIMIT = 1024
_MAX_DEPTH = 6
_SKIPPED_PREFIXES = ("/health",)
_MASKED_KEYS = {"api_key", "apikey", "authorization", "email", "password", "token"}
_LENGTH_ONLY_KEYS = {"content", "message", "text"}


def _redact(value: Any, depth: int = _MAX_DEPTH) -> Any:
    if depth <= 0:
        return "<nested>"
    if isinstance(value, Mapping):
        result: dict[str, Any] = {}
        for key, item in value.items():
            name = str(key)
            if name.lower() in _MASKED_KEYS:
                result[name] = "***"
            elif name in _LENGTH_ONLY_KEYS and isinstance(item, str):
                result[name] = f"<{len(item)} chars>"
            else:
                result[name] = _redact(item, depth - 1)
        return result
    if isinstance(value, (list, tuple)):
        return [_redact(item, depth - 1) for item in value]
    return value


def _clip(text: str, total_bytes: int) -> str:
    text = " ".join(text.split())
    if total_bytes > _PREVIEW_LIMIT:
        return f"{text[:_PREVIEW_LIMIT]}... ({total_bytes} bytes)"
    return text


def render_payload_preview(payload: Any) -> str:
    """Redacted single-line preview of a request payload (bytes, str or JSON data)."""

    if payload is None:
        return "<none>"

    if isinstance(payload, (bytes, bytearray)):
        raw = bytes(payload)
        if not raw:
            return "<empty>"
        try:
            payload = json.loads(raw)
        except UnicodeDecodeError:
            return f"<binary {len(raw)} bytes>"
        except ValueError:
            return _clip(raw.decode("utf-8", errors="replace"), len(raw))

    if isinstance(payload, str):
        return _clip(payload, len(payload.encode("utf-8", errors="ignore")))

    serialized = json.dumps(_redact(payload), default=repr, ensure_ascii=False, separators=(",", ":"))
    return _clip(serialized, len(serialized.encode("utf-8")))


def register_http_request_logging(app: FastAPI, *, logger_name: str = "core.http") -> None:
    """Log method, path, status and latency of every non-probe request."""

    if getattr(app.state, "request_logging_installed", False):
        return
    logger = logging.getLogger(logger_name)

    @app.middleware("http")
    async def log_request(request: Request, call_next):
        path = request.url.path
        if path.startswith(_SKIPPED_PREFIXES):
            return await call_next(request)

        if logger.isEnabledFor(logging.DEBUG):
            body = await request.body()
            if body:
                logger.debug("%s %s payload %s", request.method, path, render_payload_preview(body))

        started = time.perf_counter()
        response = await call_next(request)
        client = f"{request.client.host}:{request.client.port}" if request.client else "unknown"
        logger.info(
            "%s %s from %s -> %s (%.1f ms)",
            request.method,
            path,
            client,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    app.state.request_logging_installed = True


__all__ = ["register_http_request_logging", "render_payload_preview"]
