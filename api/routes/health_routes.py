"""Health check endpoints."""

from fastapi import APIRouter

from core.database import Database, check_db_connection
from core.errors import ServiceUnavailableError
from core.telemetry import SERVICE_NAME
from schemas import ErrorResponse, HealthResponse

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness endpoint. Does not touch the database."""
    return HealthResponse(status="healthy", service=SERVICE_NAME)


@router.get(
    "/ready",
    response_model=HealthResponse,
    responses={
        503: {"model": ErrorResponse, "description": "MongoDB unreachable"},
    },
)
async def ready(db: Database) -> HealthResponse:
    """Readiness endpoint: 200 only when MongoDB answers a ping."""
    try:
        await check_db_connection(db)
    except Exception as e:
        raise ServiceUnavailableError("Base de datos no disponible", str(e)) from e

    return HealthResponse(status="ready", service=SERVICE_NAME)
