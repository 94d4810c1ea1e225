"""FastAPI application factory"""

from fastapi import FastAPI
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from cashflow_engine.api.middleware import RequestIDMiddleware, MetricsMiddleware
from cashflow_engine.api.v1 import cards, projections, recurrences
from cashflow_engine.infrastructure.observability.logging import setup_logging
from cashflow_engine.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Cashflow Engine",
        description="Recurrence, credit card installment and cash-flow projection service",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(recurrences.router, prefix="/v1", tags=["recurrences"])
    app.include_router(cards.router, prefix="/v1", tags=["credit cards"])
    app.include_router(projections.router, prefix="/v1", tags=["projections"])

    return app


app = create_app()
