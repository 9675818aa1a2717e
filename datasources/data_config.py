"""
Data source settings for the learning-platform connector

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
from config import (
    WANIKANI_BACKEND,
    ZENSHIN_BACKEND,
    ZENSHIN_WANIKANI_URL,
    ZENSHIN_WANIKANI_REVISION,
    ZENSHIN_CONNECTOR_TIMEOUT,
    ZENSHIN_CONNECTOR_RETRIES,
    ZENSHIN_CONNECTOR_MAX_PAGES,
)

class DataSourceSettings(BaseSettings):
    backend: str = ZENSHIN_BACKEND
    wanikani_url: str = ZENSHIN_WANIKANI_URL
    wanikani_revision: str = ZENSHIN_WANIKANI_REVISION
    connector_timeout: int = ZENSHIN_CONNECTOR_TIMEOUT
    connector_retries: int = ZENSHIN_CONNECTOR_RETRIES
    connector_max_pages: int = ZENSHIN_CONNECTOR_MAX_PAGES

    @field_validator("wanikani_url", mode="before")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return str(v).rstrip("/")

    @field_validator("backend", mode="before")
    @classmethod
    def validate_backend(cls, v: str) -> str:
        value = str(v or "").strip().lower()
        if value not in {WANIKANI_BACKEND}:
            raise ValueError(f"Unsupported progress backend: {value!r}")
        return value

    @field_validator("connector_retries", "connector_max_pages", mode="after")
    @classmethod
    def at_least_one(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be at least 1")
        return v

    model_config = {"env_prefix": "ZENSHIN_", "extra": "ignore"}
