"""
Pace estimation over segmented level history: levels per month between consecutive points, mirroring history gaps and ignoring the noisy first levels.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from config import settings
from engine.models import GAP, Gap, PaceItem, PaceSample, Point, SeriesItem
from engine.timeutils import days_between, midpoint

log = logging.getLogger(__name__)


def _rate(prev: Point, cur: Point, month_days: float) -> Optional[PaceSample]:
    days = days_between(prev.x, cur.x)
    if days == 0:
        log.debug("no pace for level %d: unlocked the same day as level %d", cur.y + 1, prev.y + 1)
        return None
    months = days / month_days
    return PaceSample(x=midpoint(prev.x, cur.x), y=(cur.y - prev.y) / months)


def estimate_pace(
    series: Sequence[SeriesItem],
    low_level_cutoff: int | None = None,
    month_days: float | None = None,
) -> List[PaceItem]:
    if low_level_cutoff is None:
        low_level_cutoff = settings.pace_low_level_cutoff
    if month_days is None:
        month_days = settings.pace_month_days

    pace: List[PaceItem] = []
    for prev, cur in zip(series, series[1:]):
        if isinstance(cur, Gap):
            pace.append(GAP)
            continue
        if cur.y < low_level_cutoff:
            continue
        # first point after a break has nothing to measure against
        if isinstance(prev, Gap):
            continue
        sample = _rate(prev, cur, month_days)
        if sample is not None:
            pace.append(sample)
    return pace
