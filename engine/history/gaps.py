"""
Gap segmentation for level history: breaks the line wherever the level drops (account reset) or the learner paused for too long.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from typing import Sequence

from config import settings
from engine.models import GAP, Point, Series
from engine.timeutils import months_between


def is_break(prev: Point, cur: Point, gap_months: int) -> bool:
    if cur.y < prev.y:
        return True
    return months_between(prev.x, cur.x) >= gap_months


def segment_history(history: Sequence[Point], gap_months: int | None = None) -> Series:
    if gap_months is None:
        gap_months = settings.gap_months
    if not history:
        return []

    series: Series = [history[0]]
    for prev, cur in zip(history, history[1:]):
        if is_break(prev, cur, gap_months):
            series.append(GAP)
        series.append(cur)
    return series
