"""FastAPI app entrypoint for the ATS Checker web API."""

from __future__ import annotations

import logging
import os
from time import perf_counter
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError

from .. import __version__
from ..config import AnalyzerConfig, config_from_env
from ..errors import ATSCheckerError
from .api.v1.router import api_v1_router
from .errors import APIError, api_error_handler, checker_error_handler, validation_error_handler

logger = logging.getLogger("ats_checker.web.api")


def create_app(config: Optional[AnalyzerConfig] = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Without an explicit *config*, settings come from ``ATS_CHECKER_CONFIG``
    and ``ATS_CHECKER_MAX_UPLOAD_BYTES``.
    """
    app = FastAPI(title="ATS Checker API", version=__version__)
    app.state.analyzer_config = config or config_from_env()
    app.include_router(api_v1_router)

    @app.middleware("http")
    async def request_logging_middleware(request: Request, call_next):
        start = perf_counter()
        try:
            response = await call_next(request)
        except Exception:
            duration_ms = (perf_counter() - start) * 1000
            logger.info(
                "api_request method=%s path=%s status=%s duration_ms=%.2f",
                request.method,
                request.url.path,
                500,
                duration_ms,
            )
            raise

        duration_ms = (perf_counter() - start) * 1000
        logger.info(
            "api_request method=%s path=%s status=%s duration_ms=%.2f",
            request.method,
            request.url.path,
            response.status_code,
            duration_ms,
        )
        return response

    @app.get("/healthz", tags=["system"])
    async def healthz() -> dict:
        return {"status": "ok"}

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(ATSCheckerError, checker_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    return app


def main() -> None:
    """Run development API server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    uvicorn.run(
        "ats_checker.web.app:create_app",
        factory=True,
        host=os.getenv("ATS_CHECKER_HOST", "127.0.0.1"),
        port=int(os.getenv("ATS_CHECKER_PORT", "8000")),
    )
