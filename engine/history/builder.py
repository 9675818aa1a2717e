"""
History building logic that turns ordered level progressions into (unlock time, level index) points, applying an optional start cutoff and appending a course-completion point once the final level has been passed.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import List, Optional, Sequence

from engine.exceptions import EmptyHistoryError
from engine.models import Point, ProgressRecord

log = logging.getLogger(__name__)


def effective_start(history: Sequence[Point], start: Optional[datetime]) -> datetime:
    first = history[0].x
    if start is None or start < first:
        return first
    return start


def build_history(
    records: Sequence[ProgressRecord],
    start: Optional[datetime] = None,
) -> List[Point]:
    if not records:
        raise EmptyHistoryError("no level progressions to build a history from")

    history = [Point(x=r.unlocked_at, y=r.level - 1) for r in records]

    if start is not None:
        cutoff = effective_start(history, start)
        history = [p for p in history if p.x >= cutoff]
        log.debug("start cutoff %s kept %d of %d points", cutoff.isoformat(), len(history), len(records))
        if not history:
            raise EmptyHistoryError(f"no level unlocked on or after {cutoff.isoformat()}")

    last = records[-1]
    if last.passed_at is not None:
        history.append(Point(x=last.passed_at, y=last.level))

    return history
