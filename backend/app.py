"""
Compatibility entry point: `uvicorn backend.app:app`.

The application is built by backend.main.create_app().
"""

from backend.main import app, create_app

__all__ = ["app", "create_app"]
