"""
REST API routes for the runviz dashboard.

This module handles all REST API endpoints:
- Upload API
- State and selection APIs
- Metric names, chart series and summary APIs
"""

from __future__ import annotations

import logging

import msgpack
from fastapi import APIRouter, Depends, Header, HTTPException, Query, Request
from fastapi.responses import Response
from pydantic import BaseModel

from runviz.config import get_settings
from runviz.exceptions import FormatError, InvalidNumberError

from ..dependencies import AppStateDep
from ..models import SelectionRequest, SelectionResponse, StateResponse, SummaryResponse, SummaryRow


async def verify_csrf_header(x_requested_with: str | None = Header(None, alias="X-Requested-With")) -> None:
    """CSRF protection via custom header check.

    Verifies that requests include the X-Requested-With header, which cannot be set
    by cross-origin requests without CORS preflight. This prevents CSRF attacks.

    Args:
        x_requested_with: The X-Requested-With header value

    Raises:
        HTTPException: 403 if header is missing
    """
    if x_requested_with is None:
        raise HTTPException(status_code=403, detail="Missing X-Requested-With header")


logger = logging.getLogger(__name__)

router = APIRouter()


def _json_response(model: BaseModel) -> Response:
    """Serialize a model with pydantic so NaN values become null."""
    return Response(content=model.model_dump_json(), media_type="application/json")


@router.post("/api/upload")
async def upload_table(
    request: Request,
    state: AppStateDep,
    filename: str | None = Query(default=None, description="Name of the uploaded file"),
    _csrf: None = Depends(verify_csrf_header),
) -> StateResponse:
    """Upload a metrics table.

    The request body is the raw file content. The previous index and selection
    are discarded before the new table is parsed.

    Args:
        filename: Optional file name shown in the dashboard.

    Returns:
        StateResponse describing the loaded table.

    Raises:
        HTTPException: 400 if the table has no recognizable header, is not UTF-8,
            or holds non-numeric steps/values under the strict policy;
            413 if the body exceeds the upload size limit.
    """
    settings = get_settings()

    content_length = request.headers.get("content-length")
    if content_length is not None and content_length.isdigit() and int(content_length) > settings.max_upload_size:
        state.reset()
        raise HTTPException(
            status_code=413,
            detail=f"Upload size ({content_length} bytes) exceeds limit ({settings.max_upload_size} bytes)",
        )

    body = await request.body()
    if len(body) > settings.max_upload_size:
        state.reset()
        raise HTTPException(
            status_code=413,
            detail=f"Upload size ({len(body)} bytes) exceeds limit ({settings.max_upload_size} bytes)",
        )

    try:
        state.load_bytes(body, filename)
    except (FormatError, InvalidNumberError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return StateResponse.model_validate(state.to_dict())


@router.get("/api/state")
async def get_state(state: AppStateDep) -> StateResponse:
    """Get the current upload and selection state."""
    return StateResponse.model_validate(state.to_dict())


@router.delete("/api/state")
async def reset_state(
    state: AppStateDep,
    _csrf: None = Depends(verify_csrf_header),
) -> Response:
    """Discard the loaded table and selection.

    Returns:
        204 No Content.
    """
    state.reset()
    logger.info("State reset")
    return Response(status_code=204)


@router.put("/api/selection")
async def update_selection(
    request_body: SelectionRequest,
    state: AppStateDep,
    _csrf: None = Depends(verify_csrf_header),
) -> SelectionResponse:
    """Replace the selection.

    Unknown experiment ids are dropped.

    Args:
        request_body: SelectionRequest with the experiment ids in display order.

    Returns:
        SelectionResponse with the stored selection and its metric names.

    Raises:
        HTTPException: 400 if too many experiments are selected.
    """
    limit = get_settings().max_selection
    if len(request_body.experiments) > limit:
        raise HTTPException(
            status_code=400,
            detail=f"Too many experiments: {len(request_body.experiments)} (max: {limit})",
        )

    selection = state.select(request_body.experiments)
    return SelectionResponse(selection=selection, metrics=state.metric_names())


@router.get("/api/metrics")
async def get_metric_names(state: AppStateDep) -> list[str]:
    """Get the metric names of the selected experiments, one chart each."""
    return state.metric_names()


@router.get("/api/series/{metric}")
async def get_series(
    metric: str,
    state: AppStateDep,
    format: str = "json",
) -> Response:
    """Get one metric's chart series for the selected experiments.

    Args:
        metric: Metric name.
        format: Response format - "json" (default) or "msgpack".

    Returns:
        Response with structure: `{"metric": str, "labels": [...], "series": [...]}`
        - For "json" format: application/json, NaN values as null
        - For "msgpack" format: application/x-msgpack

    Raises:
        HTTPException: 400 if format is invalid.
    """
    if format not in ("json", "msgpack"):
        raise HTTPException(
            status_code=400,
            detail=f"Invalid format: {format}. Must be 'json' or 'msgpack'",
        )

    chart = state.series(metric)

    if format == "msgpack":
        packed_data = msgpack.packb(chart.model_dump())
        return Response(content=packed_data, media_type="application/x-msgpack")

    return _json_response(chart)


@router.get("/api/summary")
async def get_summary(state: AppStateDep) -> Response:
    """Get summary statistics of the selected experiments' metrics.

    Returns:
        Response with structure: `{"rows": [{experiment_id, metric_name, count, ...}]}`
    """
    df = state.summary()
    summary = SummaryResponse(rows=[SummaryRow.model_validate(row) for row in df.to_dicts()])
    return _json_response(summary)
