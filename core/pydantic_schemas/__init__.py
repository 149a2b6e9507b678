"""Public pydantic schema exports for FastAPI interfaces."""

from .api_envelope import ApiResponse, api_response, error, ok
from .common import CamelModel, ProviderResponse

__all__ = [
    "ApiResponse",
    "CamelModel",
    "ProviderResponse",
    "api_response",
    "error",
    "ok",
]
