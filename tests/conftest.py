import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path():
    """Allow tests to import project modules without installation."""
    repo_root = Path(__file__).resolve().parent.parent
    repo_str = str(repo_root)
    if repo_str not in sys.path:
        sys.path.insert(0, repo_str)


_ensure_repo_root_on_path()


@pytest.fixture
def store():
    from petstore.pet_store import PetStore

    return PetStore()


@pytest.fixture
def client(store):
    from fastapi.testclient import TestClient

    from petstore.api import create_app

    return TestClient(create_app(store))
