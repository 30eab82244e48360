"""Exception handlers mapping unexpected failures to HTTP responses"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from credit_engine.api.dependencies import get_request_id
from credit_engine.infrastructure.observability.metrics import record_failed_check

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Client errors are raised as HTTPException by the routes and use
    FastAPI's default handler. Anything else reaching this point, including
    response serialization failures, becomes a generic 500.

    This handler runs outside the middleware stack, so it stamps the
    request ID header itself.
    """

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        request_id = get_request_id(request)
        logger.error(
            f"Unexpected error: {exc}",
            extra={"request_id": request_id, "path": request.url.path},
        )
        if request.url.path.startswith("/credit"):
            record_failed_check()

        return JSONResponse(
            status_code=500,
            content={"detail": "Internal server error"},
            headers={"X-Request-ID": request_id},
        )
