"""
Value types shared by the history, forecast and pace stages of the progress engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class ProgressRecord:
    level: int
    unlocked_at: datetime
    passed_at: Optional[datetime] = None


@dataclass(frozen=True)
class Point:
    x: datetime
    y: int


@dataclass(frozen=True)
class Gap:
    """Line break between two real points.

    Carries no time and no level, so it cannot leak into arithmetic.
    """

    def __repr__(self) -> str:
        return "GAP"


GAP = Gap()

SeriesItem = Union[Point, Gap]
Series = List[SeriesItem]


@dataclass(frozen=True)
class PaceSample:
    x: datetime
    y: float


PaceItem = Union[PaceSample, Gap]


@dataclass(frozen=True)
class SmoothingRegime:
    name: str
    alpha: float


@dataclass(frozen=True)
class ForecastLine:
    regime: SmoothingRegime
    current: Point
    average_hours: Optional[float]
    projected: Optional[Point]

    @property
    def is_defined(self) -> bool:
        return self.projected is not None

    @property
    def points(self) -> Tuple[Point, ...]:
        if self.projected is None:
            return (self.current,)
        return (self.current, self.projected)


@dataclass(frozen=True)
class ProgressReport:
    history: Tuple[SeriesItem, ...]
    forecasts: Tuple[ForecastLine, ...]
    pace: Tuple[PaceItem, ...]

    def real_history(self) -> List[Point]:
        return [item for item in self.history if isinstance(item, Point)]
