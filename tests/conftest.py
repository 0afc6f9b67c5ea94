"""Shared fixtures for swagger-query tests."""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from swagger_query.openapi import SpecLoader
from swagger_query.service import SpecQueryService

SPEC_URL = "https://api.example.com/openapi.json"


@pytest.fixture
def petstore_spec() -> Dict[str, Any]:
    """Small OpenAPI document with refs, inline bodies and path-level entries."""
    return {
        "openapi": "3.0.0",
        "info": {"title": "Petstore", "version": "1.0.0"},
        "paths": {
            "/users": {
                "get": {
                    "operationId": "listUsers",
                    "summary": "List all users",
                    "tags": ["users", "public"],
                    "parameters": [
                        {"name": "limit", "in": "query"},
                        {"name": "X-Trace", "in": "header", "required": False},
                    ],
                    "responses": {"200": {"description": "OK"}},
                },
                "post": {
                    "operationId": "createUser",
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/Widget"}
                            }
                        }
                    },
                    "responses": {
                        "201": {"description": "Created"},
                        "400": {"description": "Bad request"},
                    },
                },
            },
            "/users/{id}": {
                "parameters": [{"name": "id", "in": "path", "required": True}],
                "get": {
                    "summary": "Get user by ID",
                    "parameters": [{"name": "id", "in": "path", "required": True}],
                    "responses": {"200": {"description": "OK"}},
                },
                "put": {
                    "summary": "Replace user",
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {
                                    "type": "object",
                                    "properties": {"name": {"type": "string"}},
                                }
                            }
                        }
                    },
                },
                "delete": {},
            },
            "/pets": {
                "post": {
                    "summary": "Upload a pet photo",
                    "requestBody": {
                        "content": {"multipart/form-data": {"schema": {"type": "object"}}}
                    },
                },
                "patch": {
                    "requestBody": {
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/Missing"}
                            }
                        }
                    },
                },
            },
        },
        "components": {
            "schemas": {
                "Widget": {
                    "type": "object",
                    "properties": {
                        "name": {"type": "string"},
                        "count": {"type": "integer"},
                    },
                },
                "Everything": {
                    "type": "object",
                    "properties": {
                        "s": {"type": "string"},
                        "n": {"type": "number"},
                        "i": {"type": "integer"},
                        "b": {"type": "boolean"},
                        "a": {"type": "array", "items": {"type": "string"}},
                        "o": {"type": "object"},
                        "r": {"$ref": "#/components/schemas/Widget"},
                    },
                },
            }
        },
    }


@pytest.fixture
def requests_seen() -> List[httpx.Request]:
    return []


@pytest.fixture
def make_service(
    requests_seen: List[httpx.Request],
) -> Callable[..., SpecQueryService]:
    """Build a service whose loader talks to an in-memory transport."""

    def factory(
        spec: Optional[Any] = None,
        status_code: int = 200,
        body: Optional[bytes] = None,
        error: Optional[Exception] = None,
    ) -> SpecQueryService:
        def handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            if error is not None:
                raise error
            content = body if body is not None else json.dumps(spec).encode()
            return httpx.Response(
                status_code,
                content=content,
                headers={"Content-Type": "application/json"},
            )

        loader = SpecLoader(SPEC_URL, transport=httpx.MockTransport(handler))
        return SpecQueryService(loader)

    return factory
