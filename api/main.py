"""FastAPI application for the onboarding chatbot admin API."""

from contextlib import asynccontextmanager
from typing import Any

import fastapi
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse

from core.config import get_settings
from core.database import close_client, create_client, get_database, init_db
from core.errors import ApiError
from core.logger import configure_logging, get_logger
from core.telemetry import SERVICE_VERSION, RequestTimingMiddleware
from core.wide_event import set_wide_event_fields
from repositories import build_repositories
from routes import (
    actividad_router,
    configuracion_router,
    conversacion_router,
    documento_router,
    faq_router,
    health_router,
    mensaje_automatico_router,
    usuario_router,
)

configure_logging()
logger = get_logger(__name__)


async def api_error_handler(request: Request, exc: Exception) -> JSONResponse:
    """Render a boundary error as ``{"message": ..., "error"?: ...}``."""
    if not isinstance(exc, ApiError):
        return await global_exception_handler(request, exc)

    set_wide_event_fields(error_message=exc.message)
    if exc.error is not None:
        set_wide_event_fields(error_detail=exc.error)
    return JSONResponse(status_code=exc.status_code, content=exc.to_body())


async def validation_exception_handler(
    request: Request, exc: Exception
) -> JSONResponse:
    """Payload shape failures are bad input, reported like blank required fields."""
    if not isinstance(exc, RequestValidationError):
        return await global_exception_handler(request, exc)

    errors = exc.errors()
    logger.warning(
        "request.validation_error",
        path=request.url.path,
        method=request.method,
        error_count=len(errors),
    )
    message = "; ".join(_describe_validation_error(error) for error in errors)
    return JSONResponse(
        status_code=400,
        content={"message": message or "Solicitud inválida"},
    )


def _describe_validation_error(error: dict[str, Any]) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
    if location:
        return f"{location}: {error.get('msg', 'invalid')}"
    return str(error.get("msg", "invalid"))


async def global_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler for unhandled exceptions."""
    logger.exception(
        "unhandled.exception",
        exc_type=type(exc).__name__,
        path=request.url.path,
        method=request.method,
    )
    return JSONResponse(
        status_code=500,
        content={"message": "Error interno del servidor", "error": str(exc)},
    )


@asynccontextmanager
async def lifespan(app: fastapi.FastAPI):
    """Connect to MongoDB and build repositories at startup, close on shutdown."""
    settings = get_settings()
    client = create_client()
    app.state.mongo_client = client

    try:
        await init_db(client)
        app.state.db = get_database(client)
        app.state.repositories = build_repositories(app.state.db, settings)
        logger.info("init.complete", database=settings.mongodb_database)
    except TimeoutError:
        logger.error(
            "init.timeout",
            hint="Startup hung, check MongoDB connectivity",
        )
        await close_client(client)
        raise RuntimeError("Application startup timed out")
    except Exception as e:
        logger.error("init.failed", error=str(e), exc_info=True)
        await close_client(client)
        raise

    try:
        yield
    finally:
        await close_client(client)


_settings = get_settings()

app = fastapi.FastAPI(
    title="Chatbot Onboarding Admin API",
    version=SERVICE_VERSION,
    lifespan=lifespan,
    docs_url="/docs" if _settings.docs_enabled else None,
    redoc_url="/redoc" if _settings.docs_enabled else None,
    openapi_url="/openapi.json" if _settings.docs_enabled else None,
)

app.add_exception_handler(ApiError, api_error_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(GZipMiddleware, minimum_size=500)

if _settings.allowed_origins:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=_settings.allowed_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-Id"],
        expose_headers=["Location", "X-Request-Duration-Ms", "X-Request-Id"],
        max_age=600,
    )

# Outermost, so the wide event covers every other middleware.
app.add_middleware(RequestTimingMiddleware)

app.include_router(health_router)
app.include_router(actividad_router)
app.include_router(configuracion_router)
app.include_router(conversacion_router)
app.include_router(documento_router)
app.include_router(faq_router)
app.include_router(mensaje_automatico_router)
app.include_router(usuario_router)
