"""In-memory pet collection shared by the API handlers."""

from __future__ import annotations

import logging
import threading
from typing import Iterable, List, Optional

from petstore.models import PetModel

logger = logging.getLogger(__name__)

SEED_PETS = (
    PetModel(id=1, name="max"),
    PetModel(id=2, name="moritz"),
)


class PetStore:
    """Thread-safe ordered list of pets.

    Insertion order is creation order, except that a successful update moves
    the replaced pet to the end. Ids are one past the highest id the store
    has held, so an id freed by a delete is never handed out again.
    """

    def __init__(self, pets: Optional[Iterable[PetModel]] = None):
        self._lock = threading.Lock()
        self._load(SEED_PETS if pets is None else pets)

    def _load(self, pets: Iterable[PetModel]) -> None:
        self._pets: List[PetModel] = [pet.model_copy() for pet in pets]
        self._highest_id = max((pet.id or 0 for pet in self._pets), default=0)

    def reset(self) -> None:
        with self._lock:
            self._load(SEED_PETS)

    def list(self) -> List[PetModel]:
        with self._lock:
            return list(self._pets)

    def _next_id(self) -> int:
        current = max((pet.id or 0 for pet in self._pets), default=0)
        return max(current, self._highest_id) + 1

    def new_id(self) -> int:
        with self._lock:
            return self._next_id()

    def create(self, name: str) -> PetModel:
        with self._lock:
            pet = PetModel(id=self._next_id(), name=name)
            self._pets.append(pet)
            self._highest_id = pet.id
        logger.debug("pet created", extra={"pet_id": pet.id})
        return pet

    def find(self, pet_id: int) -> Optional[PetModel]:
        with self._lock:
            return next((pet for pet in self._pets if pet.id == pet_id), None)

    def update(self, pet_id: int, pet: PetModel) -> bool:
        """Replace the pet with `pet_id`; the body must carry the same id."""
        if pet.id != pet_id:
            return False
        with self._lock:
            for index, existing in enumerate(self._pets):
                if existing.id == pet_id:
                    del self._pets[index]
                    self._pets.append(pet.model_copy())
                    break
            else:
                return False
        logger.debug("pet updated", extra={"pet_id": pet_id})
        return True

    def delete(self, pet_id: int) -> bool:
        with self._lock:
            for index, existing in enumerate(self._pets):
                if existing.id == pet_id:
                    del self._pets[index]
                    break
            else:
                return False
        logger.debug("pet deleted", extra={"pet_id": pet_id})
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._pets)
