"""FastAPI application factory"""

import logging
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST
from starlette.responses import Response

from socia_finance.api.middleware import RequestIDMiddleware, MetricsMiddleware
from socia_finance.api.dependencies import get_request_id
from socia_finance.api.v1 import simulator, profile, goals, finances, clients, insights, reto, inventory
from socia_finance.domain.exceptions import InvalidPreferenceError
from socia_finance.infrastructure.observability.logging import setup_logging
from socia_finance.config import settings

# Setup structured logging
setup_logging(settings.log_level)


def create_app() -> FastAPI:
    """Create and configure FastAPI application"""
    app = FastAPI(
        title="Socia Finance",
        description="Sales, clients and Reto 0 a 10,000 progress for independent resellers",
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # Add middleware (order matters: last added = first executed)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # Stored percentages that cannot split a sale
    @app.exception_handler(InvalidPreferenceError)
    async def invalid_preference_handler(request: Request, exc: InvalidPreferenceError):
        logging.warning(f"Invalid cost-split preference: {exc}", extra={"request_id": get_request_id(request)})
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    # Health check endpoint
    @app.get("/health")
    def health_check():
        return {"status": "ok", "service": settings.service_name}

    # Prometheus metrics endpoint
    @app.get("/metrics")
    def metrics():
        return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)

    # Register API routers
    app.include_router(simulator.router, prefix="/v1", tags=["simulator"])
    app.include_router(profile.router, prefix="/v1", tags=["profile"])
    app.include_router(goals.router, prefix="/v1", tags=["goals"])
    app.include_router(finances.router, prefix="/v1", tags=["finances"])
    app.include_router(clients.router, prefix="/v1", tags=["clients"])
    app.include_router(insights.router, prefix="/v1", tags=["insights"])
    app.include_router(reto.router, prefix="/v1", tags=["reto"])
    app.include_router(inventory.router, prefix="/v1", tags=["inventory"])

    return app


app = create_app()
