"""
HTML page routes for the runviz dashboard.

The dashboard is a single page; charts are drawn client-side from the API.
"""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from runviz.config import get_settings

from ..dependencies import AppStateDep
from ..services.template_service import TemplateService, render_mustache_response

router = APIRouter()


@router.get("/")
async def home(state: AppStateDep) -> HTMLResponse:
    """Render the dashboard page."""
    experiments = TemplateService.format_experiments_for_template(state.index.experiment_ids, state.selection)

    context = {
        "page_title": f"{state.file_name} - Runviz" if state.file_name else "Runviz",
        "file_name": state.file_name,
        "data_ready": state.data_ready,
        "error": state.error,
        "skipped_rows": state.skipped_rows,
        "has_skipped_rows": state.skipped_rows > 0,
        "experiments": experiments,
        "has_experiments": len(experiments) > 0,
        "max_upload_size": get_settings().max_upload_size,
    }

    html = render_mustache_response("index", context)
    return HTMLResponse(content=html)
