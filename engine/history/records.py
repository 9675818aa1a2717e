"""
Normalization of WaniKani level progression payloads into progress records, rejecting the whole payload when any record carries a malformed level or timestamp.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Mapping, Optional, Union

from engine.exceptions import MalformedRecordError, MalformedTimestampError
from engine.models import ProgressRecord
from engine.timeutils import parse_timestamp

log = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], Iterable[Any]]


def _fields(item: Any) -> Mapping[str, Any]:
    if isinstance(item, ProgressRecord):
        return {"level": item.level, "unlocked_at": item.unlocked_at, "passed_at": item.passed_at}
    if not isinstance(item, Mapping):
        raise MalformedRecordError(f"level progression must be a mapping, got {type(item).__name__}")
    # API resources wrap their fields in a nested "data" object
    inner = item.get("data")
    if isinstance(inner, Mapping):
        return inner
    return item


def _level(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MalformedRecordError(f"level must be an integer, got {value!r}")
    if value < 1:
        raise MalformedRecordError(f"level must be positive, got {value}")
    return value


def to_record(item: Any) -> ProgressRecord:
    fields = _fields(item)
    level = _level(fields.get("level"))
    try:
        unlocked_at = parse_timestamp(fields.get("unlocked_at"))
        raw_passed = fields.get("passed_at")
        passed_at = parse_timestamp(raw_passed) if raw_passed is not None else None
    except MalformedTimestampError as e:
        raise MalformedTimestampError(f"level {level}: {e}") from e
    return ProgressRecord(level=level, unlocked_at=unlocked_at, passed_at=passed_at)


def normalize_records(payload: Optional[Payload]) -> List[ProgressRecord]:
    if payload is None:
        return []
    items: Any = payload
    if isinstance(payload, Mapping):
        items = payload.get("data", [])
    if not isinstance(items, (list, tuple)):
        raise MalformedRecordError(f"expected a list of level progressions, got {type(items).__name__}")

    records = [to_record(item) for item in items]
    log.debug("normalized %d level progressions", len(records))
    return records

