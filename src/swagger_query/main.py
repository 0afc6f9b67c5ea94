"""CLI entry point for the Swagger query server."""

from __future__ import annotations

import argparse
import asyncio
import logging
from typing import List, Optional

from .config import Settings, get_settings
from .logging import configure_logging
from .server import build_server

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="swagger-query",
        description="Serve query tools over a Swagger/OpenAPI JSON document",
    )
    parser.add_argument("swagger_url", help="URL of the Swagger/OpenAPI JSON document")
    return parser.parse_args(argv)


async def _run(settings: Settings) -> None:
    configure_logging(settings.server_log_level)
    logger.info("Swagger JSON URL: %s", settings.swagger_url)

    mcp = build_server(settings)
    await mcp.run_stdio_async()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    settings = get_settings().with_url(args.swagger_url)
    asyncio.run(_run(settings))


if __name__ == "__main__":
    main()
