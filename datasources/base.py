"""
Base connector for learning-platform data sources

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Optional


class BaseConnector(ABC):
    health_path: str = ""

    def __init__(self, api_key: str, base_url: str, timeout: int = 30, headers: Optional[Dict[str, str]] = None):
        self.api_key = api_key
        self.base_url = str(base_url).rstrip("/")
        self.timeout = timeout
        self.headers = headers or {}

    @property
    def health_url(self) -> str:
        if not self.health_path:
            raise NotImplementedError("connector must define health_path")
        return f"{self.base_url}{self.health_path}"

    def _headers(self) -> Dict[str, str]:
        """Basic header set applied to every outbound request."""
        return {**self.headers, "Authorization": f"Bearer {self.api_key}"}


class ProgressConnector(BaseConnector):
    @abstractmethod
    async def level_progressions(self) -> Dict[str, Any]: ...

    @abstractmethod
    async def check_token(self) -> Dict[str, Any]: ...
