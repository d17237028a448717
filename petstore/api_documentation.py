"""Declarative description of the documented API surface.

Route registration in `petstore.api` pulls its decorator arguments from
`ROUTE_DOCS`; `install_openapi` adds the metadata and shared definitions that
FastAPI cannot infer from the handlers themselves.
"""

from __future__ import annotations

from typing import Any, Dict, List, Type

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi
from pydantic import BaseModel

from petstore.models import ErrorResponse, Header, Model, PetModel, PetsModel, QueryParameter

TITLE = "sample api implemented in fastapi"

VERSION = "0.1"

DESCRIPTION = (
    "This is a sample which combines [FastAPI](https://fastapi.tiangolo.com/) with"
    " [swaggerUi](https://swagger.io/). Browse the interactive documentation at"
    " `/docs` or fetch the raw document from `/openapi.json`."
)

CONTACT = {
    "name": "petstore-docs maintainers",
    "url": "https://swagger.io/tools/swagger-ui/",
}

PET_TAG = "pet operations"
GENERIC_TAG = "generic operations"
SHAPE_TAG = "shape operations"
DEBUG_TAG = "debug"

TAGS_METADATA = [
    {"name": PET_TAG, "description": "CRUD operations on the in-memory pet store."},
    {
        "name": GENERIC_TAG,
        "description": "The pet collection wrapped in a generic `elements` envelope.",
    },
    {"name": SHAPE_TAG, "description": "Static example documented with a hand-written schema."},
    {
        "name": DEBUG_TAG,
        "description": "Echo the request's query parameters and headers back as text.",
    },
]

SIZE_SCHEMA = {
    "type": "number",
    "minimum": 0,
}

DEFINITIONS: Dict[str, Dict[str, Any]] = {
    "size": SIZE_SCHEMA,
}

RECTANGLE_SCHEMA = {
    "type": "object",
    "properties": {
        "a": {"$ref": "#/components/schemas/size"},
        "b": {"$ref": "#/components/schemas/size"},
    },
}


def parameters_from_model(model: Type[BaseModel], location: str) -> List[Dict[str, Any]]:
    """Describe each field of `model` as an OpenAPI parameter in `location` (query/header)."""
    schema = model.model_json_schema()
    required = set(schema.get("required", []))
    return [
        {
            "name": name,
            "in": location,
            "required": name in required,
            "schema": {key: value for key, value in field.items() if key != "title"},
        }
        for name, field in schema.get("properties", {}).items()
    ]


NOT_FOUND = {404: {"model": ErrorResponse, "description": "No pet matches the requested id."}}

ROUTE_DOCS: Dict[str, Dict[str, Any]] = {
    "listPets": {
        "method": "GET",
        "path": "/pets",
        "tag": PET_TAG,
        "summary": "all",
        "response_model": PetsModel,
    },
    "createPet": {
        "method": "POST",
        "path": "/pets",
        "tag": PET_TAG,
        "summary": "create",
        "status_code": 201,
        "response_model": PetModel,
        "responses": {201: {"description": "The created pet with its assigned id."}},
    },
    "findPet": {
        "method": "GET",
        "path": "/pets/{id}",
        "tag": PET_TAG,
        "summary": "find",
        "response_model": PetModel,
        "responses": NOT_FOUND,
    },
    "updatePet": {
        "method": "PUT",
        "path": "/pets/{id}",
        "tag": PET_TAG,
        "summary": "update",
        "response_model": PetModel,
        "responses": NOT_FOUND,
    },
    "deletePet": {
        "method": "DELETE",
        "path": "/pets/{id}",
        "tag": PET_TAG,
        "summary": "delete",
        "responses": {200: {"description": "The pet was removed."}, **NOT_FOUND},
    },
    "listGenericPets": {
        "method": "GET",
        "path": "/genericPets",
        "tag": GENERIC_TAG,
        "summary": "all",
        "response_model": Model[PetModel],
    },
    "listShapes": {
        "method": "GET",
        "path": "/shapes",
        "tag": SHAPE_TAG,
        "summary": "all",
        "responses": {
            200: {
                "description": "Rectangle",
                "content": {"application/json": {"schema": RECTANGLE_SCHEMA}},
            }
        },
    },
    "requestInfo": {
        "method": "GET",
        "path": "/request/info",
        "tag": DEBUG_TAG,
        "summary": "request info",
    },
    "withQueryParameter": {
        "method": "GET",
        "path": "/request/withQueryParameter",
        "tag": DEBUG_TAG,
        "summary": "request with query parameters",
        "parameters": (QueryParameter, "query"),
    },
    "withHeader": {
        "method": "GET",
        "path": "/request/withHeader",
        "tag": DEBUG_TAG,
        "summary": "request with headers",
        "parameters": (Header, "header"),
    },
}


def route_options(operation: str) -> Dict[str, Any]:
    """Keyword arguments for `FastAPI.api_route` for a documented operation."""
    doc = ROUTE_DOCS[operation]
    options: Dict[str, Any] = {
        "path": doc["path"],
        "methods": [doc["method"]],
        "operation_id": operation,
        "summary": doc["summary"],
        "tags": [doc["tag"]],
        "status_code": doc.get("status_code", 200),
        "response_model": doc.get("response_model"),
        "responses": doc.get("responses"),
    }
    if "parameters" in doc:
        model, location = doc["parameters"]
        options["openapi_extra"] = {"parameters": parameters_from_model(model, location)}
    return options


def install_openapi(app: FastAPI) -> None:
    def custom_openapi():
        if app.openapi_schema:
            return app.openapi_schema

        openapi_schema = get_openapi(
            title=TITLE,
            version=VERSION,
            description=DESCRIPTION,
            contact=CONTACT,
            tags=TAGS_METADATA,
            routes=app.routes,
        )

        schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
        for name, definition in DEFINITIONS.items():
            schemas.setdefault(name, definition)

        app.openapi_schema = openapi_schema
        return app.openapi_schema

    app.openapi = custom_openapi
