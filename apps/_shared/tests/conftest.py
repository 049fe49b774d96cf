"""messaging 테스트 공통 Fixtures."""

from __future__ import annotations

import asyncio
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps._shared.messaging import rabbitmq
from apps._shared.messaging.config import get_messaging_settings


class FakeIncomingMessage:
    """브로커가 전달한 메시지 (ack/nack/reject 기록)."""

    def __init__(self, body: bytes) -> None:
        self.body = body
        self.ack = AsyncMock()
        self.nack = AsyncMock()
        self.reject = AsyncMock()


class FakeQueue:
    """메모리 큐. flush()로 등록된 consumer에게 FIFO 전달."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.pending: list[FakeIncomingMessage] = []
        self.delivered: list[FakeIncomingMessage] = []
        self.consumers: dict[str, Any] = {}

    async def consume(self, callback: Any, no_ack: bool = False) -> str:
        assert no_ack is False
        tag = f"ctag.{self.name}.{len(self.consumers) + 1}"
        self.consumers[tag] = callback
        return tag

    async def cancel(self, consumer_tag: str) -> None:
        self.consumers.pop(consumer_tag, None)

    def push_raw(self, body: bytes) -> FakeIncomingMessage:
        message = FakeIncomingMessage(body)
        self.pending.append(message)
        return message

    async def flush(self) -> None:
        callback = next(iter(self.consumers.values()))
        while self.pending:
            message = self.pending.pop(0)
            self.delivered.append(message)
            await callback(message)


class FakeExchange:
    """기본 exchange: routing_key == 큐 이름."""

    def __init__(self, channel: "FakeChannel") -> None:
        self._channel = channel

    async def publish(self, message: Any, routing_key: str) -> None:
        self._channel.queues[routing_key].push_raw(message.body)


class FakeChannel:
    """aio_pika 채널 대역."""

    def __init__(self) -> None:
        self.is_closed = False
        self.queues: dict[str, FakeQueue] = {}
        self.declared: list[str] = []
        self.default_exchange = FakeExchange(self)

    async def declare_queue(self, name: str) -> FakeQueue:
        self.declared.append(name)
        return self.queues.setdefault(name, FakeQueue(name))


@pytest.fixture(autouse=True)
def reset_rabbitmq_state():
    """모듈 전역 연결 상태와 설정 캐시 초기화."""
    rabbitmq._connection = None
    rabbitmq._channel = None
    rabbitmq._publish_lock = asyncio.Lock()
    get_messaging_settings.cache_clear()
    yield
    rabbitmq._connection = None
    rabbitmq._channel = None
    get_messaging_settings.cache_clear()


@pytest.fixture
def rabbitmq_env(monkeypatch: pytest.MonkeyPatch) -> str:
    """RABBITMQ_URL 설정."""
    url = "amqp://localhost:5672"
    monkeypatch.setenv("RABBITMQ_URL", url)
    return url


@pytest.fixture
def mock_channel() -> AsyncMock:
    """Mock aio_pika 채널."""
    channel = AsyncMock()
    channel.is_closed = False
    channel.declare_queue = AsyncMock(return_value=AsyncMock())
    channel.default_exchange = MagicMock()
    channel.default_exchange.publish = AsyncMock()
    return channel


@pytest.fixture
def mock_connection(mock_channel: AsyncMock) -> AsyncMock:
    """Mock aio_pika 연결."""
    connection = AsyncMock()
    connection.is_closed = False
    connection.channel = AsyncMock(return_value=mock_channel)
    return connection


@pytest.fixture
def fake_channel() -> FakeChannel:
    """메모리 브로커 채널."""
    return FakeChannel()


@pytest.fixture
def connected_fake_channel(fake_channel: FakeChannel) -> FakeChannel:
    """connect_rabbitmq() 이후 상태의 메모리 채널."""
    rabbitmq._channel = fake_channel  # type: ignore[assignment]
    return fake_channel


@pytest.fixture
def mock_message() -> MagicMock:
    """Mock RabbitMQ 메시지."""
    message = MagicMock()
    message.ack = AsyncMock()
    message.nack = AsyncMock()
    message.reject = AsyncMock()
    return message
