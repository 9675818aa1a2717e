from __future__ import annotations

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field


class ProgressRequest(BaseModel):
    api_key: Optional[str] = None
    start: Optional[datetime] = None
    target_level: Optional[int] = Field(default=None, ge=1, le=100)
    gap_months: Optional[int] = Field(default=None, ge=1, le=120)
    skip_months: Optional[int] = Field(default=None, ge=1, le=120)
    low_level_cutoff: Optional[int] = Field(default=None, ge=0, le=100)
    horizon_years: Optional[int] = Field(default=None, ge=1, le=50)
    use_cache: Optional[bool] = None
    remember_key: bool = True


class TokenRequest(BaseModel):
    api_key: str = Field(min_length=1)
