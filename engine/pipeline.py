"""
Progress pipeline: builds the level history, forecasts completion from the unsegmented history, then segments the history and derives pace from the segmented series.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence, Tuple

from config import settings
from engine.forecast import default_regimes, forecast_completion
from engine.history import build_history, segment_history
from engine.models import GAP, ProgressRecord, ProgressReport, SmoothingRegime
from engine.pace import estimate_pace

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineOptions:
    start: Optional[datetime] = None
    target_level: int = field(default_factory=lambda: settings.target_level)
    gap_months: int = field(default_factory=lambda: settings.gap_months)
    skip_months: int = field(default_factory=lambda: settings.skip_months)
    low_level_cutoff: int = field(default_factory=lambda: settings.pace_low_level_cutoff)
    regimes: Tuple[SmoothingRegime, ...] = field(default_factory=default_regimes)
    horizon_years: int = field(default_factory=lambda: settings.forecast_horizon_years)


def run_pipeline(
    records: Sequence[ProgressRecord],
    options: Optional[PipelineOptions] = None,
) -> ProgressReport:
    opts = options or PipelineOptions()

    history = build_history(records, start=opts.start)
    forecasts = forecast_completion(
        history,
        target_level=opts.target_level,
        regimes=opts.regimes,
        skip_months=opts.skip_months,
    )
    series = segment_history(history, gap_months=opts.gap_months)
    pace = estimate_pace(series, low_level_cutoff=opts.low_level_cutoff)

    log.info(
        "progress pipeline: %d points, %d gap(s), %d pace sample(s), %d/%d forecast(s) defined",
        len(history),
        series.count(GAP),
        sum(1 for p in pace if p is not GAP),
        sum(1 for f in forecasts if f.is_defined),
        len(forecasts),
    )
    return ProgressReport(history=tuple(series), forecasts=forecasts, pace=tuple(pace))
