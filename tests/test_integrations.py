"""Tests for external integration connectivity helpers."""

from __future__ import annotations

from typing import Iterator

import pytest
import pytest_mock

from trailer_studio.config.settings import get_settings
from trailer_studio.integrations.checks import check_aitunnel_images, run_all_checks


@pytest.fixture(autouse=True)
def _setup_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("AITUNNEL_API_KEY", "test-aitunnel")
    monkeypatch.setenv("AITUNNEL_BASE_URL", "https://aitunnel.test")
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.asyncio
async def test_check_aitunnel_images_success(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("trailer_studio.integrations.checks.ImageGeneratorClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=True)
    instance.close = mocker.AsyncMock(return_value=None)

    result = await check_aitunnel_images()

    assert result.success
    instance.ping.assert_awaited_once()
    instance.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_check_aitunnel_images_failure(mocker: pytest_mock.MockerFixture) -> None:
    client_mock = mocker.patch("trailer_studio.integrations.checks.ImageGeneratorClient", autospec=True)
    instance = client_mock.return_value
    instance.ping = mocker.AsyncMock(return_value=False)
    instance.close = mocker.AsyncMock(return_value=None)

    results = await run_all_checks()

    assert len(results) == 1
    assert not results[0].success
    assert "non-success" in results[0].message.lower()


@pytest.mark.asyncio
async def test_check_reports_missing_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AITUNNEL_API_KEY", "")
    get_settings.cache_clear()

    result = await check_aitunnel_images()

    assert not result.success
    assert "not configured" in result.message
