"""FastAPI HTTP layer package.

Public re-export so callers can write::

    from replay_service.api import app

    uvicorn replay_service.api:app
"""

from replay_service.api.app import app

__all__ = ["app"]
