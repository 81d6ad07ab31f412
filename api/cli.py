#!/usr/bin/env python3
"""CLI for chatbot admin API management tasks.

Usage:
    python -m cli <command>

Commands:
    ping            Check that MongoDB is reachable with the current settings
    create-indexes  Create the indexes backing the filtered list routes
    export-openapi  Write the OpenAPI schema to a JSON file
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path

from core.database import (
    close_client,
    create_client,
    create_indexes,
    get_database,
    init_db,
)
from core.logger import configure_logging, get_logger

logger = get_logger(__name__)

API_ROOT = Path(__file__).resolve().parent


async def _ping() -> None:
    client = create_client()
    try:
        await init_db(client)
    finally:
        await close_client(client)


async def _create_indexes() -> list[str]:
    client = create_client()
    try:
        await init_db(client)
        return await create_indexes(get_database(client))
    finally:
        await close_client(client)


def cmd_ping() -> int:
    """Ping MongoDB."""
    logger.info("cli.ping.start")
    asyncio.run(_ping())
    logger.info("cli.ping.ok")
    return 0


def cmd_create_indexes() -> int:
    """Create filter indexes on every collection."""
    logger.info("cli.create_indexes.start")
    names = asyncio.run(_create_indexes())
    for name in names:
        print(name)
    logger.info("cli.create_indexes.complete", count=len(names))
    return 0


def cmd_export_openapi(output: Path) -> int:
    """Write the app's OpenAPI schema to ``output``."""
    from main import app

    schema = app.openapi()
    output.write_text(json.dumps(schema, indent=2, sort_keys=True) + "\n")
    logger.info("cli.export_openapi.complete", path=str(output))
    return 0


def main(argv: list[str] | None = None) -> int:
    configure_logging()
    parser = argparse.ArgumentParser(
        description="Chatbot Admin API CLI",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser(
        "ping",
        help="Check that MongoDB is reachable",
    )
    subparsers.add_parser(
        "create-indexes",
        help="Create the indexes backing the filtered list routes",
    )
    export_parser = subparsers.add_parser(
        "export-openapi",
        help="Write the OpenAPI schema to a JSON file",
    )
    export_parser.add_argument(
        "--output",
        type=Path,
        default=API_ROOT / "openapi.json",
        help="Destination file (default: api/openapi.json)",
    )

    args = parser.parse_args(argv)

    if args.command == "ping":
        return cmd_ping()
    elif args.command == "create-indexes":
        return cmd_create_indexes()
    elif args.command == "export-openapi":
        return cmd_export_openapi(args.output)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
