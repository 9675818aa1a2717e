"""
Persistence of the learner's API token and of raw level progression payloads.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from config import settings
from store import keys
from store.client import redis_delete, redis_get, redis_set

log = logging.getLogger(__name__)


async def load_api_key() -> Optional[str]:
    return await redis_get(keys.api_key())


async def save_api_key(token: str) -> None:
    await redis_set(keys.api_key(), token)


async def forget_api_key() -> None:
    token = await load_api_key()
    await redis_delete(keys.api_key())
    if token:
        await redis_delete(keys.progressions(token))


async def load_progressions(token: str) -> Optional[Dict[str, Any]]:
    raw = await redis_get(keys.progressions(token))
    if not raw:
        return None
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        log.warning("discarding unreadable cached progressions: %s", exc)
        await redis_delete(keys.progressions(token))
        return None
    return payload if isinstance(payload, dict) else None


async def save_progressions(token: str, payload: Dict[str, Any], ttl: int | None = None) -> None:
    await redis_set(keys.progressions(token), json.dumps(payload), ttl or settings.progressions_ttl)
