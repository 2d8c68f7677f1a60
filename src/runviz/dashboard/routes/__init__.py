"""
Runviz dashboard routes.

This package contains route handlers organized by type:
- html_routes: HTML page endpoints
- api_routes: REST API endpoints
"""

from .api_routes import router as api_router
from .html_routes import router as html_router

__all__ = ["html_router", "api_router"]
