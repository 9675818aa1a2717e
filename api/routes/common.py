"""
Shared utilities and dependencies for API route modules.

Provides a centralized place for creating data source providers and other
helpers used across multiple routers, keeping individual route files thin.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

from datasources.data_config import DataSourceSettings
from datasources.provider import DataSourceProvider


def get_provider(api_key: str) -> DataSourceProvider:
    return DataSourceProvider(api_key=api_key, settings=DataSourceSettings())


def attachment(filename: str) -> dict[str, str]:
    return {"Content-Disposition": f'attachment; filename="{filename}"'}
