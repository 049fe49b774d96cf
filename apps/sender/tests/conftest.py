"""sender 테스트 공통 Fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from apps.sender.main import app
from apps.sender.setup.config import get_settings
from apps.sender.setup.dependencies import get_message_publisher


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """설정 캐시 초기화."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_publisher() -> AsyncMock:
    """Mock MessagePublisher."""
    publisher = AsyncMock()
    publisher.publish = AsyncMock(return_value=None)
    return publisher


@pytest.fixture
def client(mock_publisher: AsyncMock) -> TestClient:
    """Publisher가 대체된 TestClient (lifespan 미실행)."""
    app.dependency_overrides[get_message_publisher] = lambda: mock_publisher
    yield TestClient(app)
    app.dependency_overrides.clear()
