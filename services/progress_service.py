"""
Progress service that resolves the learner's API key, fetches (or reads cached) level progressions and runs the progress engine over them.

Copyright (c) 2026 Stefan Kumarasinghe
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from api.requests import ProgressRequest
from api.routes.common import get_provider
from config import settings
from datasources.exceptions import MissingApiKey
from engine import PipelineOptions, ProgressReport, run_pipeline
from engine.history import normalize_records
from engine.timeutils import parse_timestamp
from render import render_chart
from store import progressions as progress_store

log = logging.getLogger(__name__)


async def resolve_api_key(explicit: Optional[str] = None) -> str:
    if explicit:
        return explicit
    stored = await progress_store.load_api_key()
    if stored:
        return stored
    if settings.api_key:
        return settings.api_key
    raise MissingApiKey("no API key supplied and none stored")


async def fetch_progressions(api_key: str, use_cache: bool) -> Dict[str, Any]:
    if use_cache:
        cached = await progress_store.load_progressions(api_key)
        if cached is not None:
            log.debug("using cached level progressions")
            return cached

    payload = await get_provider(api_key).query_progressions()
    if use_cache:
        await progress_store.save_progressions(api_key, payload)
    return payload


def pipeline_options(req: ProgressRequest) -> PipelineOptions:
    overrides: Dict[str, Any] = {}
    if req.start is not None:
        overrides["start"] = parse_timestamp(req.start)
    for name in ("target_level", "gap_months", "skip_months", "low_level_cutoff", "horizon_years"):
        value = getattr(req, name)
        if value is not None:
            overrides[name] = value
    return PipelineOptions(**overrides)


async def build_report(req: ProgressRequest) -> ProgressReport:
    api_key = await resolve_api_key(req.api_key)
    use_cache = settings.cache_progressions if req.use_cache is None else req.use_cache
    payload = await fetch_progressions(api_key, use_cache)

    records = normalize_records(payload)
    report = run_pipeline(records, pipeline_options(req))

    # only a key that produced a chart is worth keeping
    if req.api_key and req.remember_key:
        await progress_store.save_api_key(req.api_key)
    return report


async def render_report(req: ProgressRequest, now: Optional[datetime] = None) -> bytes:
    report = await build_report(req)
    horizon_years = pipeline_options(req).horizon_years
    return await asyncio.to_thread(render_chart, report, now or datetime.now(timezone.utc), horizon_years)


async def register_api_key(api_key: str) -> Dict[str, Any]:
    user = await get_provider(api_key).check_token()
    await progress_store.save_api_key(api_key)
    log.info("API key registered")
    return user


async def forget_api_key() -> None:
    await progress_store.forget_api_key()
    log.info("API key forgotten")
