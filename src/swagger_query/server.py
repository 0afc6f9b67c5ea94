"""MCP server setup for the Swagger query tools."""

import logging
from typing import Optional

from fastmcp import FastMCP

from .config import Settings
from .openapi import SpecLoader
from .service import SpecQueryService

logger = logging.getLogger(__name__)


def build_server(settings: Settings, loader: Optional[SpecLoader] = None) -> FastMCP:
    if loader is None:
        if not settings.swagger_url:
            raise RuntimeError("swagger_url must be set before building the server")
        loader = SpecLoader(
            settings.swagger_url,
            timeout_seconds=settings.swagger_fetch_timeout_seconds,
            verify_ssl=settings.swagger_verify_ssl,
        )
    service = SpecQueryService(loader)

    mcp = FastMCP(
        settings.service_name,
        instructions=_instructions(),
        version=settings.service_version,
    )
    _register_tools(mcp, service)
    return mcp


def _register_tools(mcp: FastMCP, service: SpecQueryService) -> None:
    @mcp.tool(name="load_swagger_spec")
    async def load_swagger_spec() -> str:
        """Fetch the Swagger/OpenAPI document and return it as JSON."""
        return await service.load_spec()

    @mcp.tool(name="list_apis")
    async def list_apis() -> str:
        """List every API path declared in the Swagger/OpenAPI document."""
        return await service.list_apis()

    @mcp.tool(name="get_api_info")
    async def get_api_info(apiname: str) -> str:
        """Describe the first API path containing ``apiname``."""
        return await service.get_api_info(apiname)

    @mcp.tool(name="list_endpoints")
    async def list_endpoints(
        api_name: str,
        method: Optional[str] = None,
        path_filter: Optional[str] = None,
    ) -> str:
        """List endpoints, optionally filtered by HTTP method and path substring."""
        return await service.list_endpoints(api_name, method=method, path_filter=path_filter)

    for name in ("load_swagger_spec", "list_apis", "get_api_info", "list_endpoints"):
        logger.info("Registered tool: %s", name)


def _instructions() -> str:
    return (
        "Query tools over a single Swagger/OpenAPI document. "
        "Each call fetches the document again from its URL."
    )
