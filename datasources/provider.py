"""
Provider for the progress connector selected by the data source configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from typing import Any, Dict
from .data_config import DataSourceSettings
from .exceptions import MissingApiKey
from .factory import DataSourceFactory

class DataSourceProvider:
    def __init__(self, api_key: str, settings: DataSourceSettings):
        if not api_key:
            raise MissingApiKey("an API key is required to query level progressions")
        self.settings = settings
        self.progress = DataSourceFactory.create_progress(settings, api_key)

    async def query_progressions(self) -> Dict[str, Any]:
        return await self.progress.level_progressions()

    async def check_token(self) -> Dict[str, Any]:
        return await self.progress.check_token()
