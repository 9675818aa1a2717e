"""
Chart rendering for progress reports: level history, completion forecasts and pace drawn with matplotlib and exported as PNG.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

import numpy as np

from config import settings
from engine.models import Gap, PaceItem, ProgressReport, SeriesItem
from engine.timeutils import add_years, end_of_month, start_of_month

log = logging.getLogger(__name__)

LEVEL_COLOR = (0.0, 127 / 255, 1.0)
PACE_COLOR = (223 / 255, 0.0, 0.0)
FORECAST_COLOR = (0.0, 0.0, 0.0)


@dataclass(frozen=True)
class ChartWindow:
    start: datetime
    end: datetime


def chart_window(report: ProgressReport, horizon_years: int | None = None) -> ChartWindow:
    if horizon_years is None:
        horizon_years = settings.forecast_horizon_years
    points = report.real_history()
    if not points:
        raise ValueError("cannot size a chart for an empty history")

    first, last = points[0].x, points[-1].x
    ends = [f.projected.x for f in report.forecasts if f.projected is not None]
    limit = max(ends) if ends else last
    end = min(limit, add_years(last, horizon_years))
    return ChartWindow(start=start_of_month(first), end=end_of_month(max(end, last)))


def _to_arrays(items: Sequence[SeriesItem] | Sequence[PaceItem]) -> Tuple[List[datetime], np.ndarray]:
    # gaps become NaN so matplotlib breaks the line there
    xs: List[datetime] = []
    ys: List[float] = []
    for item in items:
        if isinstance(item, Gap):
            if xs:
                xs.append(xs[-1])
                ys.append(np.nan)
            continue
        xs.append(item.x)
        ys.append(float(item.y))
    return xs, np.array(ys, dtype=float)


def render_chart(
    report: ProgressReport,
    now: Optional[datetime] = None,
    horizon_years: int | None = None,
) -> bytes:
    try:
        from matplotlib.figure import Figure
    except Exception as e:  # pragma: no cover
        raise RuntimeError("matplotlib is required for chart export. Install with: pip install matplotlib") from e

    window = chart_window(report, horizon_years)
    now = now or datetime.now(timezone.utc)

    # no pyplot: figures are not registered in global state
    fig = Figure(
        figsize=(settings.chart_width_inches, settings.chart_height_inches),
        dpi=settings.chart_dpi,
    )
    ax = fig.subplots()
    fig.patch.set_facecolor("white")

    for line in report.forecasts:
        if not line.is_defined:
            log.info("omitting undefined %s forecast from chart", line.regime.name)
            continue
        xs = [p.x for p in line.points]
        ys = [p.y for p in line.points]
        ax.plot(xs, ys, linestyle=(0, (10, 10)), linewidth=2, color=FORECAST_COLOR, alpha=0.2)
        ax.fill_between(xs, ys, color=FORECAST_COLOR, alpha=0.0333)

    hx, hy = _to_arrays(report.history)
    ax.plot(hx, hy, marker="o", markersize=3, color=LEVEL_COLOR, alpha=0.5)
    ax.fill_between(hx, np.nan_to_num(hy), where=~np.isnan(hy), color=LEVEL_COLOR, alpha=0.5)

    top = max([settings.target_level] + [f.projected.y for f in report.forecasts if f.projected is not None])
    ax.set_ylim(0, top)
    ax.set_yticks(np.linspace(0, top, 7))
    ax.set_ylabel("Level completed", color=LEVEL_COLOR, fontsize=14, fontweight="bold")
    ax.set_xlim(window.start, window.end)
    ax.axvline(now, color=PACE_COLOR, alpha=0.5, linewidth=2)

    ax2 = ax.twinx()
    px, py = _to_arrays(report.pace)
    if len(px):
        ax2.plot(px, py, linewidth=2, color=PACE_COLOR, alpha=0.5)
    ax2.set_ylim(0, settings.chart_pace_max)
    ax2.set_yticks(np.linspace(0, settings.chart_pace_max, 7))
    ax2.set_ylabel("Completion speed (levels per month)", color=PACE_COLOR, fontsize=14, fontweight="bold")
    ax2.grid(False)

    fig.autofmt_xdate(rotation=0, ha="center")
    fig.tight_layout()

    buf = io.BytesIO()
    fig.savefig(buf, format="png", facecolor="white")
    return buf.getvalue()
