"""SendMessageCommand 테스트."""

from __future__ import annotations

from unittest.mock import AsyncMock, patch

import pytest

from apps._shared.messaging import NotInitializedError
from apps.sender.application.messages.commands import SendMessageCommand, SendMessageResult
from apps.sender.infrastructure.messaging import RabbitMQMessagePublisher


class TestSendMessageCommand:
    """SendMessageCommand 테스트."""

    @pytest.mark.asyncio
    async def test_execute_publishes_to_queue(self, mock_publisher: AsyncMock) -> None:
        """설정된 큐로 발행."""
        command = SendMessageCommand(mock_publisher, "q1")

        result = await command.execute({"a": 1})

        mock_publisher.publish.assert_awaited_once_with("q1", {"a": 1})
        assert result == SendMessageResult(queue_name="q1")

    @pytest.mark.asyncio
    async def test_execute_propagates_errors(self, mock_publisher: AsyncMock) -> None:
        """발행 실패는 그대로 전파."""
        mock_publisher.publish.side_effect = NotInitializedError()
        command = SendMessageCommand(mock_publisher, "q1")

        with pytest.raises(NotInitializedError):
            await command.execute({"a": 1})


class TestRabbitMQMessagePublisher:
    """RabbitMQMessagePublisher 테스트."""

    @pytest.mark.asyncio
    async def test_publish_delegates_to_shared_core(self) -> None:
        """공유 코어 publish_to_queue 위임."""
        with patch(
            "apps.sender.infrastructure.messaging.message_publisher_rabbitmq.publish_to_queue",
            new_callable=AsyncMock,
        ) as publish:
            await RabbitMQMessagePublisher().publish("q1", {"a": 1})

        publish.assert_awaited_once_with("q1", {"a": 1})
