"""OpenAPI document loader and traversal helpers."""

from __future__ import annotations

from typing import Any, Dict, Iterator, List, Optional, Tuple

import httpx

from .models import Endpoint, Parameter

SCHEMA_REF_PREFIX = "#/components/schemas/"

_PLACEHOLDERS: Dict[str, Any] = {
    "string": "string",
    "number": 0,
    "integer": 0,
    "boolean": False,
}


class SpecFetchError(Exception):
    """The document server answered with a non-success status."""

    def __init__(self, status_code: int, reason: str) -> None:
        super().__init__(f"{status_code} {reason}")
        self.status_code = status_code
        self.reason = reason


class SpecLoader:
    def __init__(
        self,
        url: str,
        timeout_seconds: float = 30,
        verify_ssl: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self.verify_ssl = verify_ssl
        self.transport = transport

    async def load_spec(self) -> Dict[str, Any]:
        async with httpx.AsyncClient(
            timeout=self.timeout_seconds,
            verify=self.verify_ssl,
            follow_redirects=True,
            transport=self.transport,
        ) as client:
            response = await client.get(self.url)
            if not response.is_success:
                raise SpecFetchError(response.status_code, response.reason_phrase)
            return response.json()


def has_paths(spec: Dict[str, Any]) -> bool:
    return isinstance(spec.get("paths"), dict)


def get_paths(spec: Dict[str, Any]) -> Dict[str, Any]:
    return spec["paths"] if has_paths(spec) else {}


def iter_operations(path_item: Any) -> Iterator[Tuple[str, Dict[str, Any]]]:
    """Yield ``(method, operation)`` pairs of a path item in document order.

    Entries that are not mappings (path-level ``parameters``, ``$ref`` or
    ``summary``) are not operations and are skipped.
    """
    if not isinstance(path_item, dict):
        return
    for method, operation in path_item.items():
        if isinstance(operation, dict):
            yield method, operation


def find_path(spec: Dict[str, Any], name: str) -> Optional[Tuple[str, Any]]:
    for path, path_item in get_paths(spec).items():
        if name in path:
            return path, path_item
    return None


def extract_endpoints(
    spec: Dict[str, Any],
    method: Optional[str] = None,
    path_filter: Optional[str] = None,
) -> List[Endpoint]:
    endpoints: List[Endpoint] = []
    for path, path_item in get_paths(spec).items():
        for op_method, operation in iter_operations(path_item):
            if method and op_method.lower() != method.lower():
                continue
            if path_filter and path_filter not in path:
                continue
            summary = operation.get("summary") or operation.get("operationId") or ""
            endpoints.append(Endpoint(method=op_method.upper(), path=path, summary=summary))
    return endpoints


def extract_parameters(operation: Dict[str, Any]) -> List[Parameter]:
    parameters: List[Parameter] = []
    for parameter in operation.get("parameters") or []:
        if not isinstance(parameter, dict):
            continue
        parameters.append(
            Parameter(
                name=str(parameter.get("name", "")),
                location=str(parameter.get("in", "")),
                required=bool(parameter.get("required")),
            )
        )
    return parameters


def extract_body_schema(request_body: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    content = request_body.get("content") or {}
    json_body = content.get("application/json") or {}
    schema = json_body.get("schema")
    return schema if isinstance(schema, dict) else None


def resolve_schema_ref(spec: Dict[str, Any], ref: str) -> Optional[Dict[str, Any]]:
    """Look up ``#/components/schemas/<Name>``; only one level is followed."""
    name = ref.replace(SCHEMA_REF_PREFIX, "", 1)
    components = spec.get("components") or {}
    schemas = components.get("schemas") or {}
    schema = schemas.get(name)
    return schema if isinstance(schema, dict) else None


def placeholder_for(schema: Any) -> Any:
    schema_type = schema.get("type") if isinstance(schema, dict) else None
    if not isinstance(schema_type, str):
        return None
    if schema_type == "array":
        return []
    if schema_type == "object":
        return {}
    return _PLACEHOLDERS.get(schema_type)


def example_from_schema(schema: Dict[str, Any]) -> Dict[str, Any]:
    properties = schema.get("properties") or {}
    return {name: placeholder_for(prop) for name, prop in properties.items()}
