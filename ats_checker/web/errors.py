"""API error helpers and exception handlers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import ATSCheckerError, DecodeError, InvalidRequest, UnsupportedFormat


class APIError(Exception):
    """Application-level API error with status/code mapping."""

    def __init__(
        self,
        status_code: int,
        code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "details": self.details,
            }
        }


def to_api_error(exc: ATSCheckerError) -> APIError:
    """Map a pipeline/decoder error onto the API error contract."""
    if isinstance(exc, InvalidRequest):
        return APIError(400, "BAD_REQUEST", str(exc), {"field": exc.field})
    if isinstance(exc, UnsupportedFormat):
        return APIError(415, "UNSUPPORTED_FORMAT", str(exc), {"supported": list(exc.supported)})
    if isinstance(exc, DecodeError):
        return APIError(422, "DECODE_ERROR", str(exc))
    return APIError(500, "INTERNAL_ERROR", str(exc))


async def api_error_handler(_: Request, exc: APIError) -> JSONResponse:
    """Render contract-compliant error response."""
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def checker_error_handler(request: Request, exc: ATSCheckerError) -> JSONResponse:
    """Render pipeline errors that escaped an endpoint."""
    return await api_error_handler(request, to_api_error(exc))


async def validation_error_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    """Normalize FastAPI validation errors to API contract shape."""
    return JSONResponse(
        status_code=400,
        content={
            "error": {
                "code": "BAD_REQUEST",
                "message": "Invalid request payload",
                "details": {"errors": _json_safe_errors(exc)},
            }
        },
    )


def _json_safe_errors(exc: RequestValidationError) -> list:
    # Pydantic may attach non-serializable objects (e.g. the raised ValueError) under "ctx".
    return [{key: value for key, value in error.items() if key in ("type", "loc", "msg")} for error in exc.errors()]
