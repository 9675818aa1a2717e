"""
Test cases for calendar helpers used by the progress engine.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from datetime import datetime, timedelta, timezone

import pytest

from conftest import utc
from engine.exceptions import MalformedTimestampError
from engine.timeutils import (
    add_years,
    days_between,
    end_of_month,
    hours_between,
    midpoint,
    months_between,
    parse_timestamp,
    start_of_month,
)


def test_months_between_counts_full_months_only():
    assert months_between(utc(2021, 1, 15), utc(2021, 7, 14)) == 5
    assert months_between(utc(2021, 1, 15), utc(2021, 7, 15)) == 6
    assert months_between(utc(2021, 1, 15, 12), utc(2021, 7, 15, 11)) == 5


def test_months_between_clamps_to_end_of_month():
    assert months_between(utc(2021, 1, 31), utc(2021, 2, 28)) == 1
    assert months_between(utc(2021, 1, 31), utc(2021, 2, 27)) == 0


def test_months_between_is_signed():
    assert months_between(utc(2021, 7, 15), utc(2021, 1, 15)) == -6


def test_hours_and_days_truncate_toward_zero():
    start = utc(2021, 1, 1)
    assert hours_between(start, start + timedelta(hours=5, minutes=59)) == 5
    assert hours_between(start, start - timedelta(hours=5, minutes=59)) == -5
    assert days_between(start, utc(2021, 2, 1)) == 31
    assert days_between(start, start + timedelta(hours=23)) == 0


def test_midpoint():
    assert midpoint(utc(2021, 1, 1), utc(2021, 1, 3)) == utc(2021, 1, 2)


def test_add_years_handles_leap_day():
    assert add_years(utc(2020, 2, 29), 1) == utc(2021, 2, 28)
    assert add_years(utc(2021, 6, 1), 3) == utc(2024, 6, 1)


def test_month_bounds():
    value = utc(2021, 2, 14, 10, 30)
    assert start_of_month(value) == utc(2021, 2, 1)
    assert end_of_month(value) == utc(2021, 2, 28, 23, 59, 59, 999999)


def test_parse_timestamp_accepts_api_format():
    parsed = parse_timestamp("2017-09-05T09:24:27.254431Z")
    assert parsed == datetime(2017, 9, 5, 9, 24, 27, 254431, tzinfo=timezone.utc)


def test_parse_timestamp_coerces_naive_to_utc():
    assert parse_timestamp(datetime(2021, 1, 1)).tzinfo is timezone.utc
    assert parse_timestamp("2021-01-01T00:00:00") == utc(2021, 1, 1)


@pytest.mark.parametrize(
    "value, micros",
    [("2021-01-01T00:00:00.1Z", 100000), ("2021-01-01T00:00:00.12Z", 120000), ("2021-01-01T00:00:00.1234+00:00", 123400)],
)
def test_parse_timestamp_accepts_any_fraction_length(value, micros):
    assert parse_timestamp(value) == utc(2021, 1, 1, 0, 0, 0, micros)


@pytest.mark.parametrize("value", [None, "", "yesterday", "2021-13-01T00:00:00Z", 1609459200])
def test_parse_timestamp_rejects_malformed(value):
    with pytest.raises(MalformedTimestampError):
        parse_timestamp(value)
