import os
import sys
from datetime import datetime, timezone

import pytest

# ensure workspace root is on sys.path so our application packages can be imported
ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from store.client import _fallback


@pytest.fixture(autouse=True)
def clear_fallback(monkeypatch):
    """Wipe the in-memory redis fallback before and after each test and make
    the store always operate on it, so tests never attempt a redis connection.
    """
    _fallback.clear()

    import store.client as client

    async def no_redis():
        return None

    monkeypatch.setattr(client, "get_redis", no_redis)

    yield

    _fallback.clear()


def utc(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


def resource(level, unlocked_at, passed_at=None) -> dict:
    """Level progression in the shape returned by the WaniKani API."""
    return {
        "id": level,
        "object": "level_progression",
        "data": {
            "level": level,
            "unlocked_at": unlocked_at,
            "passed_at": passed_at,
        },
    }


@pytest.fixture
def payload():
    return {
        "object": "collection",
        "data": [
            resource(1, "2021-01-01T00:00:00.000000Z", "2021-01-08T00:00:00.000000Z"),
            resource(2, "2021-01-08T00:00:00.000000Z", "2021-01-15T00:00:00.000000Z"),
            resource(3, "2021-01-15T00:00:00.000000Z", "2021-01-25T00:00:00.000000Z"),
            resource(4, "2021-01-25T00:00:00.000000Z", "2021-02-04T00:00:00.000000Z"),
            resource(5, "2021-02-04T00:00:00.000000Z", "2021-02-14T00:00:00.000000Z"),
            resource(6, "2021-02-14T00:00:00.000000Z"),
        ],
    }
