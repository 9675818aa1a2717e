"""
Factory for creating progress connectors based on configuration.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from connectors.wanikani import WaniKaniConnector


class DataSourceFactory:

    @staticmethod
    def create_progress(config, api_key):
        from config import WANIKANI_BACKEND
        if config.backend == WANIKANI_BACKEND:
            return WaniKaniConnector(
                config.wanikani_url,
                api_key,
                timeout=config.connector_timeout,
                revision=config.wanikani_revision,
                retries=config.connector_retries,
                max_pages=config.connector_max_pages,
            )
        raise ValueError("Unsupported progress backend")
