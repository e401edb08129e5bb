"""Mini README: Interactive interfaces for the expense tracker.

Exports the FastAPI application factory that serves both the browser
dashboard and the JSON API.
"""

from .web_app import create_application

__all__ = ["create_application"]
