"""
Test Suite for API Routes - Progress and Token

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import json

import pytest
from fastapi import HTTPException

from api.requests import ProgressRequest, TokenRequest
from api.routes import progress as progress_route
from api.routes import token as token_route
from conftest import utc
from datasources.exceptions import AuthenticationFailed
from engine import GAP, ForecastLine, PaceSample, Point, ProgressReport, SmoothingRegime
from engine.exceptions import InsufficientHistoryError
from services import progress_service


def _report():
    current = Point(utc(2021, 3, 1), 4)
    return ProgressReport(
        history=(Point(utc(2021, 1, 1), 0), Point(utc(2021, 2, 1), 3), GAP, current),
        forecasts=(
            ForecastLine(SmoothingRegime("fast", 0.5), current, 240.0, Point(utc(2021, 9, 1), 60)),
            ForecastLine(SmoothingRegime("slow", 0.25), current, None, None),
        ),
        pace=(PaceSample(utc(2021, 1, 16), 2.9), GAP),
    )


@pytest.mark.asyncio
async def test_progress_serializes_gaps_and_undefined_forecasts(monkeypatch):
    async def fake_build(req):
        return _report()

    monkeypatch.setattr(progress_service, "build_report", fake_build)
    res = await progress_route.progress(ProgressRequest(api_key="k"))
    body = json.loads(res.model_dump_json())

    assert body["history"][2] is None
    assert body["history"][3]["y"] == 4
    assert body["pace"][1] is None
    fast, slow = body["forecasts"]
    assert fast["defined"] is True and len(fast["points"]) == 2
    assert slow["defined"] is False and len(slow["points"]) == 1
    assert slow["average_hours"] is None
    assert body["window"]["start"].startswith("2021-01-01")


@pytest.mark.asyncio
async def test_progress_window_follows_requested_horizon(monkeypatch):
    current = Point(utc(2021, 3, 1), 4)
    report = ProgressReport(
        history=(Point(utc(2021, 1, 1), 0), current),
        forecasts=(ForecastLine(SmoothingRegime("fast", 0.5), current, 1.0, Point(utc(2035, 1, 1), 60)),),
        pace=(),
    )

    async def fake_build(req):
        return report

    monkeypatch.setattr(progress_service, "build_report", fake_build)
    short = await progress_route.progress(ProgressRequest(api_key="k", horizon_years=1))
    long = await progress_route.progress(ProgressRequest(api_key="k", horizon_years=5))

    assert short.window.end == utc(2022, 3, 31, 23, 59, 59, 999999)
    assert long.window.end == utc(2026, 3, 31, 23, 59, 59, 999999)


@pytest.mark.asyncio
async def test_progress_maps_engine_errors_to_422(monkeypatch):
    async def fake_build(req):
        raise InsufficientHistoryError("one point")

    monkeypatch.setattr(progress_service, "build_report", fake_build)
    with pytest.raises(HTTPException) as info:
        await progress_route.progress(ProgressRequest(api_key="k"))
    assert info.value.status_code == 422


@pytest.mark.asyncio
async def test_progress_chart_is_png_attachment(monkeypatch):
    async def fake_render(req):
        return b"\x89PNGdata"

    monkeypatch.setattr(progress_service, "render_report", fake_render)
    res = await progress_route.progress_chart(ProgressRequest(api_key="k"))
    assert res.media_type == "image/png"
    assert res.body == b"\x89PNGdata"
    assert res.headers["content-disposition"] == 'attachment; filename="zenshin.png"'


@pytest.mark.asyncio
async def test_store_token_reports_user(monkeypatch):
    async def fake_register(api_key):
        return {"data": {"username": "kani", "level": 6}}

    monkeypatch.setattr(progress_service, "register_api_key", fake_register)
    res = await token_route.store_token(TokenRequest(api_key="k"))
    assert res.stored is True
    assert res.username == "kani"
    assert res.level == 6


@pytest.mark.asyncio
async def test_store_token_rejected(monkeypatch):
    async def fake_register(api_key):
        raise AuthenticationFailed("401")

    monkeypatch.setattr(progress_service, "register_api_key", fake_register)
    with pytest.raises(HTTPException) as info:
        await token_route.store_token(TokenRequest(api_key="bad"))
    assert info.value.status_code == 401


@pytest.mark.asyncio
async def test_delete_token(monkeypatch):
    calls = []

    async def fake_forget():
        calls.append(1)

    monkeypatch.setattr(progress_service, "forget_api_key", fake_forget)
    res = await token_route.delete_token()
    assert res.stored is False
    assert calls == [1]
