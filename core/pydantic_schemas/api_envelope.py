"""Response envelope for the ``/api/v1`` routes.

Every journal, analytics and profile response has the same outer shape so
the dashboard can read ``success`` and ``message`` without knowing the
payload::

    {"code": 200, "success": true, "message": "...", "data": ..., "meta": {...}}

``/api/analyze-sentiment`` is the exception; it keeps the browser contract.
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel


class ApiResponse(BaseModel):
    code: int
    success: bool
    message: str
    data: Any = None
    meta: Optional[Dict[str, Any]] = None


def api_response(
    *,
    code: int,
    message: str,
    data: Any = None,
    meta: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """Build the envelope dict; ``success`` follows from ``code``."""

    return ApiResponse(code=code, success=code < 400, message=message, data=data, meta=meta).model_dump(
        mode="json"
    )


def ok(message: str, data: Any = None, meta: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    return api_response(code=200, message=message, data=data, meta=meta)


def error(code: int, message: str, data: Any = None, meta: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    if code < 400:
        raise ValueError(f"error() needs a 4xx/5xx code, got {code}")
    return api_response(code=code, message=message, data=data, meta=meta)


__all__ = ["ApiResponse", "api_response", "error", "ok"]
