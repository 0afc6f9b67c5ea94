"""Query operations over the Swagger/OpenAPI document."""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Dict, List, Optional

from .openapi import (
    SpecFetchError,
    SpecLoader,
    example_from_schema,
    extract_body_schema,
    extract_endpoints,
    extract_parameters,
    find_path,
    get_paths,
    has_paths,
    iter_operations,
    resolve_schema_ref,
)

logger = logging.getLogger(__name__)

NO_PATHS_MESSAGE = "No API paths found in the Swagger spec."
NO_ENDPOINTS_MESSAGE = "No endpoints found with the given filters."


def _dump(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False)


def _describe(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class SpecQueryService:
    """
    Answers the tool queries against a freshly fetched document.

    Every call fetches the document again; nothing is cached between calls.
    Fetch and processing failures are returned as text, never raised.
    """

    def __init__(self, loader: SpecLoader) -> None:
        self.loader = loader

    async def load_spec(self) -> str:
        return await self._run("load_swagger_spec", _dump)

    async def list_apis(self) -> str:
        return await self._run("list_apis", self._format_api_list)

    async def get_api_info(self, apiname: str) -> str:
        return await self._run(
            "get_api_info", lambda spec: self._format_api_info(spec, apiname)
        )

    async def list_endpoints(
        self,
        api_name: str,
        method: Optional[str] = None,
        path_filter: Optional[str] = None,
    ) -> str:
        # api_name does not select anything: one server serves one document
        logger.debug("list_endpoints api_name=%s", api_name)
        return await self._run(
            "list_endpoints",
            lambda spec: self._format_endpoints(spec, method, path_filter),
        )

    async def _run(self, operation: str, render: Callable[[Dict[str, Any]], str]) -> str:
        logger.info("Running %s against %s", operation, self.loader.url)
        try:
            spec = await self.loader.load_spec()
            return render(spec)
        except SpecFetchError as exc:
            logger.warning(
                "%s could not fetch %s (%s)", operation, self.loader.url, exc.status_code
            )
            return f"Failed to fetch: {exc.status_code} {exc.reason}"
        except Exception as exc:
            logger.error("%s failed: %r", operation, exc)
            return f"Error: {_describe(exc)}"

    def _format_api_list(self, spec: Dict[str, Any]) -> str:
        paths = get_paths(spec)
        if not paths:
            return NO_PATHS_MESSAGE
        lines = [f"{idx}. {path}" for idx, path in enumerate(paths, start=1)]
        return "API List:\n" + "\n".join(lines)

    def _format_api_info(self, spec: Dict[str, Any], apiname: str) -> str:
        if not has_paths(spec):
            return NO_PATHS_MESSAGE
        match = find_path(spec, apiname)
        if not match:
            return f"No API found matching '{apiname}'."

        path, path_item = match
        lines: List[str] = [f"Path: {path}"]
        for method, operation in iter_operations(path_item):
            lines.append("")
            lines.append(f"Method: {method.upper()}")
            if operation.get("summary"):
                lines.append(f"Summary: {operation['summary']}")
            if operation.get("tags") is not None:
                lines.append("Tags: " + ", ".join(str(tag) for tag in operation["tags"]))
            if operation.get("parameters") is not None:
                lines.append("Parameters:")
                lines.extend(param.render() for param in extract_parameters(operation))
            if operation.get("requestBody") is not None:
                lines.append("Request Body:")
                lines.append(self._format_request_body(spec, operation["requestBody"]))
            if operation.get("responses") is not None:
                lines.append("Responses:")
                for code, response in operation["responses"].items():
                    description = response.get("description", "") if isinstance(response, dict) else ""
                    lines.append(f"  - {code}: {description}")
        return "\n".join(lines) + "\n"

    def _format_request_body(self, spec: Dict[str, Any], request_body: Any) -> str:
        schema = extract_body_schema(request_body) if isinstance(request_body, dict) else None
        if schema is None:
            return "  (schema not found or not application/json)"
        if "$ref" not in schema:
            return _dump(schema)
        definition = resolve_schema_ref(spec, schema["$ref"])
        if definition is None or definition.get("properties") is None:
            return "  (schema definition not found)"
        return _dump(example_from_schema(definition))

    def _format_endpoints(
        self,
        spec: Dict[str, Any],
        method: Optional[str],
        path_filter: Optional[str],
    ) -> str:
        endpoints = extract_endpoints(spec, method=method, path_filter=path_filter)
        if not endpoints:
            return NO_ENDPOINTS_MESSAGE
        return "\n".join(endpoint.render() for endpoint in endpoints)
