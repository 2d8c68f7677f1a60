"""
Runviz dashboard APIRouter aggregation.

This module aggregates all route handlers from sub-modules:
- html_routes: the dashboard page
- api_routes: REST API endpoints
"""

from __future__ import annotations

from fastapi import APIRouter

from .routes import api_router, html_router

router = APIRouter()
router.include_router(html_router)
router.include_router(api_router)

__all__ = ["router"]
