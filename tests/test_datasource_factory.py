"""
Tests for datasource settings, factory connector construction and the provider.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from pydantic import ValidationError

from config import WANIKANI_BACKEND
from connectors.wanikani import WaniKaniConnector
from datasources.data_config import DataSourceSettings
from datasources.exceptions import MissingApiKey
from datasources.factory import DataSourceFactory
from datasources.provider import DataSourceProvider


def test_factory_passes_settings_to_connector():
    cfg = SimpleNamespace(
        backend=WANIKANI_BACKEND,
        wanikani_url="https://example.test/v2",
        wanikani_revision="20170710",
        connector_timeout=7,
        connector_retries=2,
        connector_max_pages=4,
    )
    connector = DataSourceFactory.create_progress(cfg, "key")
    assert isinstance(connector, WaniKaniConnector)
    assert connector.base_url == "https://example.test/v2"
    assert connector.timeout == 7
    assert connector.retries == 2
    assert connector.max_pages == 4
    assert connector.health_url == "https://example.test/v2/user"


def test_factory_rejects_unknown_backend():
    with pytest.raises(ValueError):
        DataSourceFactory.create_progress(SimpleNamespace(backend="duolingo"), "key")


def test_settings_normalize_and_validate():
    cfg = DataSourceSettings(wanikani_url="https://example.test/v2/", backend=" WaniKani ")
    assert cfg.wanikani_url == "https://example.test/v2"
    assert cfg.backend == WANIKANI_BACKEND
    with pytest.raises(ValidationError):
        DataSourceSettings(backend="duolingo")
    with pytest.raises(ValidationError):
        DataSourceSettings(connector_retries=0)


def test_provider_requires_api_key():
    with pytest.raises(MissingApiKey):
        DataSourceProvider(api_key="", settings=DataSourceSettings())


@pytest.mark.asyncio
async def test_provider_delegates_to_connector():
    provider = DataSourceProvider(api_key="key", settings=DataSourceSettings())

    class Fake:
        async def level_progressions(self):
            return {"data": ["x"]}

        async def check_token(self):
            return {"data": {"username": "kani"}}

    provider.progress = Fake()
    assert await provider.query_progressions() == {"data": ["x"]}
    assert (await provider.check_token())["data"]["username"] == "kani"
