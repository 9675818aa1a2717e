"""
Completion forecasting for level history, smoothing the hours spent per level with one exponential average per regime and projecting each average forward to the target level.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from config import settings
from engine.exceptions import GapInHistoryError, InsufficientHistoryError
from engine.models import ForecastLine, Point, SmoothingRegime
from engine.timeutils import add_hours, hours_between, months_between

log = logging.getLogger(__name__)


def default_regimes() -> Tuple[SmoothingRegime, ...]:
    return tuple(SmoothingRegime(name=name, alpha=alpha) for name, alpha in settings.smoothing_regimes)


def _smooth(old: Optional[float], observed: float, alpha: float) -> float:
    if old is None:
        return float(observed)
    return alpha * observed + (1 - alpha) * old


def smoothed_hours_per_level(
    history: Sequence[Point],
    alphas: Sequence[float],
    skip_months: int,
) -> List[Optional[float]]:
    averages: List[Optional[float]] = [None] * len(alphas)
    for prev, cur in zip(history, history[1:]):
        if months_between(prev.x, cur.x) >= skip_months:
            log.debug("skipping %s -> %s: pause too long to reflect pace", prev.x.isoformat(), cur.x.isoformat())
            continue
        hours = hours_between(prev.x, cur.x)
        averages = [_smooth(old, hours, alpha) for old, alpha in zip(averages, alphas)]
    return averages


def _check_history(history: Sequence[object]) -> None:
    if len(history) < 2:
        raise InsufficientHistoryError(
            f"forecast needs at least 2 history points, got {len(history)}"
        )
    if any(not isinstance(p, Point) for p in history):
        raise GapInHistoryError("forecast must be computed from the history before gap segmentation")


def forecast_completion(
    history: Sequence[Point],
    target_level: int | None = None,
    regimes: Iterable[SmoothingRegime] | None = None,
    skip_months: int | None = None,
) -> Tuple[ForecastLine, ...]:
    if target_level is None:
        target_level = settings.target_level
    if skip_months is None:
        skip_months = settings.skip_months
    regimes = tuple(regimes) if regimes is not None else default_regimes()
    _check_history(history)

    averages = smoothed_hours_per_level(history, [r.alpha for r in regimes], skip_months)

    last = history[-1]
    current = Point(x=last.x, y=last.y)
    levels_to_do = target_level - last.y

    lines: List[ForecastLine] = []
    for regime, avg in zip(regimes, averages):
        if avg is None:
            log.warning("no usable interval for %s forecast; every pause exceeded %d months", regime.name, skip_months)
            lines.append(ForecastLine(regime=regime, current=current, average_hours=None, projected=None))
            continue
        projected = Point(x=add_hours(last.x, avg * levels_to_do), y=target_level)
        lines.append(ForecastLine(regime=regime, current=current, average_hours=avg, projected=projected))
    return tuple(lines)
