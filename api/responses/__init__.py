"""
Response models for API endpoints, serializing progress reports into plain JSON series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from engine.models import ForecastLine, Gap, PaceItem, ProgressReport, SeriesItem
from render import chart_window


class PointModel(BaseModel):
    x: datetime
    y: float


class ForecastModel(BaseModel):
    regime: str
    alpha: float
    defined: bool
    average_hours: Optional[float] = None
    points: List[PointModel]


class WindowModel(BaseModel):
    start: datetime
    end: datetime


class ProgressResponse(BaseModel):
    # gaps are serialized as null entries
    history: List[Optional[PointModel]]
    forecasts: List[ForecastModel]
    pace: List[Optional[PointModel]]
    window: WindowModel


class TokenResponse(BaseModel):
    stored: bool
    username: Optional[str] = None
    level: Optional[int] = None


def _point(item: SeriesItem | PaceItem) -> Optional[PointModel]:
    if isinstance(item, Gap):
        return None
    return PointModel(x=item.x, y=item.y)


def _forecast(line: ForecastLine) -> ForecastModel:
    return ForecastModel(
        regime=line.regime.name,
        alpha=line.regime.alpha,
        defined=line.is_defined,
        average_hours=line.average_hours,
        points=[PointModel(x=p.x, y=p.y) for p in line.points],
    )


def progress_response(report: ProgressReport, horizon_years: int | None = None) -> ProgressResponse:
    window = chart_window(report, horizon_years)
    return ProgressResponse(
        history=[_point(item) for item in report.history],
        forecasts=[_forecast(line) for line in report.forecasts],
        pace=[_point(item) for item in report.pace],
        window=WindowModel(start=window.start, end=window.end),
    )
