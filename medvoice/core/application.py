"""
Core FastAPI application instance and configuration.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from medvoice.core.config import Settings, get_settings
from medvoice.core.exceptions import ChatError
from medvoice.core.middleware import LoggingMiddleware
import logging

logger = logging.getLogger(__name__)


def validate_environment(settings: Settings) -> None:
    """Fail fast on missing provider keys when configured to."""
    if not settings.REQUIRE_PROVIDER_KEYS:
        return
    missing = [k for k in ("GEMINI_API_KEY", "TAVILY_API_KEY") if not getattr(settings, k)]
    if missing:
        raise ValueError(f"Missing required environment variables: {', '.join(missing)}")


def create_application(settings: Settings = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()
    validate_environment(settings)

    app = FastAPI(title=settings.PROJECT_NAME)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)

    # Every failure is reported as 500 {"error": message}
    @app.exception_handler(ChatError)
    async def chat_error_handler(request: Request, exc: ChatError):
        logger.error("Chat request failed", extra={
            "error": exc.message,
            "type": type(exc).__name__,
            "path": request.url.path
        })
        return JSONResponse(status_code=500, content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        details = "; ".join(
            f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg')}"
            for err in exc.errors()
        )
        logger.error("Invalid request body", extra={
            "error": details,
            "path": request.url.path
        })
        return JSONResponse(status_code=500, content={"error": f"Invalid request: {details}"})

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.error("Unhandled Exception", extra={
            "error": str(exc),
            "type": type(exc).__name__,
            "path": request.url.path
        }, exc_info=True)
        return JSONResponse(status_code=500, content={"error": str(exc) or "Internal server error"})

    @app.get("/health")
    async def health():
        return {"status": "ok"}

    return app
