"""Main FastAPI application exposing the technical analysis engine.
"""
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi import Request
from fastapi import status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chart_analyst.api.v1 import analysis
from chart_analyst.api.v1 import health
from chart_analyst.api.v1.health import API_VERSION
from chart_analyst.core.config import get_settings
from chart_analyst.core.exceptions import AnalysisServiceError
from chart_analyst.utils.structured_logging import configure_structured_logging
from chart_analyst.utils.structured_logging import get_logger

configure_structured_logging(
    log_level=get_settings().log_level,
    json_logs=not get_settings().is_development,
)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan management."""
    settings = get_settings()
    logger.info(
        "Starting Chart Analyst API",
        environment=settings.environment,
        extended_signals=settings.extended_signals,
    )
    yield
    logger.info("Shutting down Chart Analyst API")


def create_app() -> FastAPI:
    """Create and configure FastAPI application.

    Returns:
        FastAPI: Configured application instance
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description="Candlestick patterns, indicators, trade levels and short-term "
        "price projections for daily price series.",
        version=API_VERSION,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        openapi_url="/openapi.json" if settings.is_development else None,
        debug=settings.debug,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        """Log method, path, status and latency of every request."""
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "Request handled",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )
        response.headers["X-API-Version"] = API_VERSION
        return response

    @app.exception_handler(AnalysisServiceError)
    async def analysis_error_handler(request: Request, exc: AnalysisServiceError) -> JSONResponse:
        """Map analysis input errors to 400."""
        logger.warning("Analysis input rejected", path=request.url.path, error=str(exc))
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"detail": str(exc)},
        )

    # Global exception handler
    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """Global exception handler for unhandled exceptions.

        Args:
            request: The incoming request
            exc: The exception that occurred

        Returns:
            JSONResponse: Error response
        """
        logger.error(
            "Unhandled exception occurred",
            exc_info=exc,
            path=str(request.url),
            method=request.method,
        )

        if settings.is_development:
            # In development, include more error details
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "error": "Internal Server Error",
                    "detail": str(exc),
                    "type": type(exc).__name__,
                },
            )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal Server Error",
                "detail": "An unexpected error occurred",
            },
        )

    # Include routers
    app.include_router(health.router, prefix=settings.api_v1_prefix, tags=["health"])
    app.include_router(analysis.router, prefix=settings.api_v1_prefix, tags=["analysis"])

    return app


# Create application instance
app = create_app()


@app.get("/", include_in_schema=False)
async def root() -> dict[str, str]:
    """Root endpoint.

    Returns:
        dict: Welcome message with links
    """
    settings = get_settings()
    return {
        "message": settings.app_name,
        "version": API_VERSION,
        "docs": "/docs" if settings.is_development else "disabled",
        "health": f"{settings.api_v1_prefix}/health",
    }


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "chart_analyst.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
        log_level=settings.log_level.lower(),
    )
