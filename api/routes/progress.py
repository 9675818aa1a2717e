"""
Progress routes returning the level history, completion forecasts and pace as JSON series or as a rendered chart.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from fastapi import APIRouter
from fastapi.responses import Response

from api.requests import ProgressRequest
from api.responses import ProgressResponse, progress_response
from api.routes.common import attachment
from api.routes.exception import handle_exceptions
from config import CHART_FILENAME
from services import progress_service

router = APIRouter(tags=["Progress"])


@router.post("/progress", response_model=ProgressResponse, summary="Level history, completion forecasts and pace")
@handle_exceptions
async def progress(req: ProgressRequest) -> ProgressResponse:
    report = await progress_service.build_report(req)
    return progress_response(report, progress_service.pipeline_options(req).horizon_years)


@router.post(
    "/progress/chart",
    response_class=Response,
    responses={200: {"content": {"image/png": {}}}},
    summary="Progress chart as PNG",
)
@handle_exceptions
async def progress_chart(req: ProgressRequest) -> Response:
    png = await progress_service.render_report(req)
    return Response(content=png, media_type="image/png", headers=attachment(CHART_FILENAME))
