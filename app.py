"""ASGI entrypoint for auto-discovery tools.

Some CLIs/buildpacks look specifically for `app = FastAPI(...)` in a well-known
file (e.g. `app.py`). The real application lives in `petstore.api`; this module
keeps auto-discovery happy while re-exporting that app.
"""

from petstore.api import app

__all__ = ["app"]
