"""receiver_worker 테스트 공통 Fixtures."""

from __future__ import annotations

import json
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps._shared.messaging import rabbitmq
from apps.receiver_worker.setup.config import get_settings


@pytest.fixture(autouse=True)
def worker_env(monkeypatch: pytest.MonkeyPatch):
    """필수 환경 변수 + 캐시/연결 상태 초기화."""
    monkeypatch.setenv("RABBITMQ_URL", "amqp://localhost:5672")
    get_settings.cache_clear()
    rabbitmq._connection = None
    rabbitmq._channel = None
    yield
    get_settings.cache_clear()
    rabbitmq._connection = None
    rabbitmq._channel = None


@pytest.fixture
def sample_instruction() -> dict[str, Any]:
    """지시 메시지 샘플."""
    return {"message": "Hello from Service A", "id": 1}


def make_message(data: Any) -> MagicMock:
    """RabbitMQ 메시지 Mock 생성."""
    message = MagicMock()
    message.body = json.dumps(data).encode()
    message.ack = AsyncMock()
    message.nack = AsyncMock()
    message.reject = AsyncMock()
    return message


@pytest.fixture
def message_factory():
    """메시지 Mock 팩토리."""
    return make_message
