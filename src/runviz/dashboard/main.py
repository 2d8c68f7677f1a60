"""
FastAPI application for the runviz dashboard
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from runviz.config import get_preload_file, is_dev_mode
from runviz.exceptions import RunvizError

from .dependencies import get_app_state
from .router import router

logger = logging.getLogger(__name__)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware to add security headers to all responses."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response = await call_next(request)

        # Prevent MIME type sniffing
        response.headers["X-Content-Type-Options"] = "nosniff"

        # Prevent clickjacking by denying framing
        response.headers["X-Frame-Options"] = "DENY"

        # Charts are inline SVG with inline styles; scripts only from self
        response.headers["Content-Security-Policy"] = (
            "default-src 'self'; "
            "script-src 'self'; "
            "style-src 'self' 'unsafe-inline'; "
            "img-src 'self' data:; "
            "connect-src 'self'; "
            "frame-ancestors 'none'"
        )

        return response


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle.

    On startup, load the table named by RUNVIZ_PRELOAD_FILE if set.
    A table that fails to load leaves the dashboard empty.
    """
    preload = get_preload_file()
    if preload is not None:
        try:
            get_app_state().load_file(preload)
        except (OSError, RunvizError) as e:
            logger.error(f"Failed to preload {preload}: {e}")

    if is_dev_mode():
        logger.info("[DEV MODE] Dashboard started")

    yield


app = FastAPI(
    title="Runviz Dashboard",
    description="Line charts of experiment metrics from an uploaded table",
    docs_url="/docs/dashboard",
    redoc_url=None,
    lifespan=lifespan,
)

# Security headers middleware
app.add_middleware(SecurityHeadersMiddleware)  # ty: ignore[invalid-argument-type]

BASE_DIR = Path(__file__).parent
app.mount("/static", StaticFiles(directory=BASE_DIR / "static"), name="static")

app.include_router(router)
