"""Request and response shapes for the pet store API."""

from typing import Generic, List, Optional, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class PetModel(BaseModel):
    id: Optional[int] = Field(None, description="Assigned by the server on creation.")
    name: str = Field(..., description="Display name of the pet.")


class PetsModel(BaseModel):
    pets: List[PetModel]


class Model(BaseModel, Generic[T]):
    """Generic envelope exposing a collection under `elements`."""

    elements: List[T]


class ErrorResponse(BaseModel):
    detail: str


class Header(BaseModel):
    optionalHeader: Optional[str] = None
    mandatoryHeader: int


class QueryParameter(BaseModel):
    optionalParameter: Optional[str] = None
    mandatoryParameter: int
