"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from credit_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from credit_engine.api.errors import register_exception_handlers
from credit_engine.api.routes import credit
from credit_engine.api.routes.schemas import StatusResponse
from credit_engine.infrastructure.observability.logging import setup_logging
from credit_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Credit Engine",
        description="Simulated credit limit and payment plan service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    @app.get("/status", response_model=StatusResponse)
    def status():
        return StatusResponse()

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    app.include_router(credit.router, tags=["credit"])

    return app


app = create_app()
