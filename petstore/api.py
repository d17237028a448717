import json
import logging
import time
from typing import Any, Optional

from fastapi import Depends, FastAPI, HTTPException, Request
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse, RedirectResponse, Response

from petstore import api_documentation
from petstore.api_documentation import route_options
from petstore.logging_setup import setup_logging
from petstore.models import Model, PetModel, PetsModel
from petstore.pet_store import PetStore
from petstore.request_echo import format_request_details, request_details

setup_logging()
logger = logging.getLogger(__name__)

SERVER_HEADER = f"petstore-docs/{api_documentation.VERSION}"

SHAPE_EXAMPLE = """{
    "a" : 10,
    "b" : 25
}"""


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(
            content,
            ensure_ascii=False,
            allow_nan=False,
            indent=2,
        ).encode("utf-8")


def get_pet_store(request: Request) -> PetStore:
    return request.app.state.pet_store


def _not_found(pet_id: int) -> HTTPException:
    return HTTPException(status_code=404, detail=f"Pet {pet_id} not found")


def create_app(store: Optional[PetStore] = None) -> FastAPI:
    app = FastAPI(
        title=api_documentation.TITLE,
        description=api_documentation.DESCRIPTION,
        version=api_documentation.VERSION,
        default_response_class=PrettyJSONResponse,
    )
    app.state.pet_store = store if store is not None else PetStore()

    app.add_middleware(GZipMiddleware, minimum_size=1000)

    @app.middleware("http")
    async def log_and_add_default_headers(request: Request, call_next):
        client_host = request.client.host if request.client else "unknown"
        start = time.perf_counter()
        response: Response = await call_next(request)
        latency_ms = (time.perf_counter() - start) * 1000
        response.headers["Server"] = SERVER_HEADER
        response.headers["X-Request-Latency-ms"] = f"{latency_ms:.2f}"

        logger.info(
            "request",
            extra={
                "request_path": request.url.path,
                "method": request.method,
                "status_code": response.status_code,
                "latency_ms": round(latency_ms, 2),
                "client": client_host,
            },
        )
        return response

    @app.get("/", include_in_schema=False)
    async def forward_root() -> RedirectResponse:
        return RedirectResponse(url=app.docs_url)

    @app.api_route(**route_options("listPets"))
    async def list_pets(store: PetStore = Depends(get_pet_store)) -> PetsModel:
        return PetsModel(pets=store.list())

    @app.api_route(**route_options("createPet"))
    async def create_pet(payload: PetModel, store: PetStore = Depends(get_pet_store)) -> PetModel:
        return store.create(payload.name)

    @app.api_route(**route_options("findPet"))
    async def find_pet(id: int, store: PetStore = Depends(get_pet_store)) -> PetModel:
        pet = store.find(id)
        if pet is None:
            raise _not_found(id)
        return pet

    @app.api_route(**route_options("updatePet"))
    async def update_pet(id: int, payload: PetModel, store: PetStore = Depends(get_pet_store)) -> PetModel:
        if not store.update(id, payload):
            raise _not_found(id)
        return payload

    @app.api_route(**route_options("deletePet"), response_class=Response)
    async def delete_pet(id: int, store: PetStore = Depends(get_pet_store)) -> Response:
        if not store.delete(id):
            raise _not_found(id)
        return Response(status_code=200)

    @app.api_route(**route_options("listGenericPets"))
    async def list_generic_pets(store: PetStore = Depends(get_pet_store)) -> Model[PetModel]:
        return Model[PetModel](elements=store.list())

    @app.api_route(**route_options("listShapes"))
    async def list_shapes() -> Response:
        return Response(content=SHAPE_EXAMPLE, media_type="application/json")

    async def respond_request_details(request: Request) -> PlainTextResponse:
        return PlainTextResponse(format_request_details(request_details(request)))

    for operation in ("requestInfo", "withQueryParameter", "withHeader"):
        app.add_api_route(
            endpoint=respond_request_details,
            response_class=PlainTextResponse,
            **route_options(operation),
        )

    api_documentation.install_openapi(app)
    return app


app = create_app()
