"""REST API presentation layer for userhub.

Structure:
    api/
    ├── app.py                # FastAPI application factory
    ├── dependencies.py       # Dependency injection
    ├── exception_handlers.py # Domain error -> HTTP status mapping
    ├── routers/              # API route handlers
    └── schemas/              # Pydantic request/response schemas
"""

from userhub.presentation.api.app import create_app

__all__ = ["create_app"]
