# app/adapters/api/main.py
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager
import structlog

from app import __version__
from app.shared.container import container
from app.shared.config import settings, AppEnv
from app.shared.logging_config import configure_logging
from app.shared.telemetry import setup_telemetry, instrument_fastapi

# Import Routers
# Note: We import the modules directly to ensure 'container.wire' works correctly
from app.adapters.api.routers import health, lexicon

logger = structlog.get_logger()

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages the application lifecycle.
    1. Startup: Wires DI container, loads and indexes the lexicon.
    2. Shutdown: Nothing to release; the store lives as long as the process.
    """
    setup_telemetry(settings.OTEL_SERVICE_NAME)
    logger.info("app_startup", app=settings.APP_NAME, env=settings.APP_ENV.value)

    # 1. Wire the Container
    container.wire(modules=[
        "app.adapters.api.routers.lexicon",
        "app.adapters.api.routers.health",
    ])

    # 2. Build the store before the first request (Fail Fast on unreadable data)
    store = container.lexicon_store()
    logger.info("lexicon_ready", **store.stats().model_dump())

    yield

    logger.info("app_shutdown")

def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    configure_logging()

    app = FastAPI(
        title="Lexique3 API",
        version=__version__,
        description="Read-only lookup service over the Lexique 3 French lexical database",
        lifespan=lifespan,
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url=None,
    )

    # Global Middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    instrument_fastapi(app)

    # Global Exception Handlers
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """
        Unparsable query parameters (e.g. min_freq=abc) are a client error.
        """
        logger.warning("request_rejected", path=request.url.path, errors=exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={
                "status": "error",
                "code": status.HTTP_400_BAD_REQUEST,
                "message": _format_validation_errors(exc),
            },
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={
                "status": "error",
                "code": exc.status_code,
                "message": exc.detail,
            },
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """
        Catches unhandled exceptions to avoid leaking stack traces in Prod.
        """
        logger.error("unhandled_exception", path=request.url.path, error=str(exc), exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "message": "Internal Server Error" if not settings.DEBUG else str(exc),
            },
        )

    # Register Routers
    app.include_router(lexicon.router)
    app.include_router(health.router)

    return app

def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(p) for p in error.get("loc", ()) if p != "query")
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts) or "Invalid request"
