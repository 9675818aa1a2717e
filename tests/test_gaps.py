"""
Test cases for gap segmentation of level history on resets and long pauses.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import timedelta

from conftest import utc
from engine.history import segment_history
from engine.models import GAP, Gap, Point


def _strip(series):
    return [item for item in series if not isinstance(item, Gap)]


def _monthly(levels, start=utc(2020, 1, 1), step_days=20):
    return [Point(start + timedelta(days=step_days * i), y) for i, y in enumerate(levels)]


def test_monotone_history_has_no_gaps():
    history = _monthly([0, 1, 1, 2, 3, 5, 8])
    series = segment_history(history, gap_months=6)
    assert series == history
    assert GAP not in series


def test_regression_inserts_gap_before_restarted_point():
    history = _monthly([0, 1, 2, 0, 1])
    series = segment_history(history, gap_months=6)
    assert series == history[:3] + [GAP] + history[3:]


def test_long_pause_inserts_gap():
    history = [
        Point(utc(2020, 1, 1), 0),
        Point(utc(2020, 2, 1), 1),
        Point(utc(2020, 8, 1), 2),
        Point(utc(2020, 8, 20), 3),
    ]
    series = segment_history(history, gap_months=6)
    assert series == [history[0], history[1], GAP, history[2], history[3]]


def test_pause_just_under_threshold_is_not_a_gap():
    history = [Point(utc(2020, 2, 1), 0), Point(utc(2020, 7, 31), 1)]
    assert segment_history(history, gap_months=6) == history


def test_first_point_is_always_emitted_and_gaps_never_lead():
    history = _monthly([5, 0, 1])
    series = segment_history(history, gap_months=6)
    assert series[0] == history[0]
    assert series[1] is GAP


def test_removing_gaps_round_trips_input():
    history = [
        Point(utc(2019, 1, 1), 0),
        Point(utc(2019, 1, 9), 1),
        Point(utc(2019, 9, 9), 2),
        Point(utc(2019, 9, 20), 0),
        Point(utc(2019, 10, 1), 1),
        Point(utc(2021, 1, 1), 1),
    ]
    series = segment_history(history, gap_months=6)
    assert _strip(series) == history
    assert len(series) == len(history) + 3
    assert all(not (a is GAP and b is GAP) for a, b in zip(series, series[1:]))


def test_custom_threshold():
    history = [Point(utc(2020, 1, 1), 0), Point(utc(2020, 3, 1), 1)]
    assert segment_history(history, gap_months=2) == [history[0], GAP, history[1]]


def test_empty_history():
    assert segment_history([]) == []
