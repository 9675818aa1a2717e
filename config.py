"""
Constants and configuration for Zenshin.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

import os
from typing import List, Optional, Tuple

from pydantic_settings import BaseSettings


REDIS_URL: str = os.getenv("REDIS_URL", "redis://localhost:6379/0")
PROGRESSIONS_TTL: int = int(os.getenv("PROGRESSIONS_TTL", "3600"))

WANIKANI_BACKEND = "wanikani"

ZENSHIN_BACKEND = os.getenv("ZENSHIN_BACKEND", WANIKANI_BACKEND).lower()
ZENSHIN_WANIKANI_URL = os.getenv("ZENSHIN_WANIKANI_URL", "https://api.wanikani.com/v2").rstrip("/")
ZENSHIN_WANIKANI_REVISION = os.getenv("ZENSHIN_WANIKANI_REVISION", "20170710")
ZENSHIN_CONNECTOR_TIMEOUT = int(os.getenv("ZENSHIN_CONNECTOR_TIMEOUT", "30"))
ZENSHIN_CONNECTOR_RETRIES = int(os.getenv("ZENSHIN_CONNECTOR_RETRIES", "3"))
ZENSHIN_CONNECTOR_MAX_PAGES = int(os.getenv("ZENSHIN_CONNECTOR_MAX_PAGES", "20"))

# curriculum shape
MAX_LEVEL = 60

# smoothing regimes used for the two completion forecasts: (name, alpha)
SMOOTHING_REGIMES: List[Tuple[str, float]] = [
    ("fast", 0.5),
    ("slow", 0.25),
]

CHART_FILENAME = "zenshin.png"


class Settings(BaseSettings):
    backend: str = ZENSHIN_BACKEND
    wanikani_url: str = ZENSHIN_WANIKANI_URL
    wanikani_revision: str = ZENSHIN_WANIKANI_REVISION
    connector_timeout: int = ZENSHIN_CONNECTOR_TIMEOUT
    connector_retries: int = ZENSHIN_CONNECTOR_RETRIES
    connector_max_pages: int = ZENSHIN_CONNECTOR_MAX_PAGES

    # token used when a request carries none; a stored token takes precedence
    api_key: Optional[str] = None

    # history
    target_level: int = MAX_LEVEL
    # a pause of at least this many whole months breaks the history line
    gap_months: int = 6

    # forecast
    # pairs at least this many whole months apart do not feed the averages
    skip_months: int = 3
    smoothing_regimes: List[Tuple[str, float]] = SMOOTHING_REGIMES
    forecast_horizon_years: int = 3

    # pace
    # levels below this index are too early to give a meaningful rate
    pace_low_level_cutoff: int = 3
    pace_month_days: float = 30.0

    # caching of raw level progressions
    cache_progressions: bool = False
    progressions_ttl: int = PROGRESSIONS_TTL

    # chart
    chart_width_inches: float = 12.0
    chart_height_inches: float = 6.0
    chart_dpi: int = 100
    chart_pace_max: float = 6.0

    store_redis_retry_cooldown_seconds: float = 10.0
    store_fallback_max_items: int = 1_000

    model_config = {
        "env_prefix": "ZENSHIN_",
        "extra": "ignore",
    }


settings = Settings()
