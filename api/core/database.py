"""MongoDB client, database handle, and index management.

One ``AsyncMongoClient`` is created at startup and shared by every repository
for the lifetime of the process. The driver's own connection pool makes the
handle safe for concurrent use; the application adds no locking of its own.
"""

from __future__ import annotations

import asyncio
from typing import Annotated, Any

from fastapi import Depends, Request
from pymongo import ASCENDING, AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from core.config import get_settings
from core.logger import get_logger

logger = get_logger(__name__)

# Single-field indexes backing the filtered list routes and single lookups.
INDEXES: dict[str, list[str]] = {
    "actividades": ["dia", "tipo", "obligatorio"],
    "configuracion": ["tipo", "activo", "nombre"],
    "conversaciones": ["usuarioId", "activa", "resuelto"],
    "documentos": ["categoria", "tipo", "tags"],
    "faqs": ["palabrasClave", "categoria"],
    "mensajesAutomaticos": ["tipo", "activo"],
    "usuarios": ["email", "dni", "estadoOnboarding", "activo", "departamento"],
}


def create_client() -> AsyncMongoClient[dict[str, Any]]:
    """Build the shared client. No I/O happens until the first operation."""
    settings = get_settings()
    return AsyncMongoClient(
        settings.mongodb_url,
        tz_aware=True,
        serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        connectTimeoutMS=settings.mongodb_timeout_ms,
        appname="chatbot-admin-api",
    )


def get_database(client: AsyncMongoClient[dict[str, Any]]) -> AsyncDatabase:
    return client.get_database(get_settings().mongodb_database)


async def init_db(client: AsyncMongoClient[dict[str, Any]]) -> None:
    """Verify MongoDB is reachable before the app starts serving."""
    settings = get_settings()
    logger.info(
        "db.connectivity.verifying", database=settings.mongodb_database
    )

    async with asyncio.timeout(settings.startup_timeout_seconds):
        await client.admin.command("ping")
    logger.info("db.connectivity.verified", database=settings.mongodb_database)


async def close_client(client: AsyncMongoClient[dict[str, Any]]) -> None:
    await client.close()
    logger.info("db.client.closed")


async def check_db_connection(db: AsyncDatabase) -> None:
    """Verify database is reachable (5s timeout)."""
    async with asyncio.timeout(5):
        await db.command("ping")


async def create_indexes(db: AsyncDatabase) -> list[str]:
    """Create the filter indexes. Idempotent; returns the index names."""
    created: list[str] = []
    for collection_name, fields in INDEXES.items():
        collection = db.get_collection(collection_name)
        for field in fields:
            name = await collection.create_index([(field, ASCENDING)])
            created.append(f"{collection_name}.{name}")
    logger.info("db.indexes.created", count=len(created))
    return created


def get_db(request: Request) -> AsyncDatabase:
    """Database handle created during lifespan startup."""
    return request.app.state.db


Database = Annotated[AsyncDatabase, Depends(get_db)]
