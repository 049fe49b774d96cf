"""SendMessage Command.

요청 본문을 그대로 큐에 발행하는 유스케이스입니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from apps.sender.application.messages.ports.message_publisher import (
        MessagePublisher,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SendMessageResult:
    """발행 결과."""

    queue_name: str


class SendMessageCommand:
    """메시지 발행 Command.

    발행 실패(MessagingError)는 그대로 전파되어
    HTTP 계층에서 5xx로 변환됩니다.
    """

    def __init__(self, publisher: "MessagePublisher", queue_name: str) -> None:
        """Initialize.

        Args:
            publisher: 메시지 발행자 (DI)
            queue_name: 발행 대상 큐
        """
        self._publisher = publisher
        self._queue_name = queue_name

    async def execute(self, payload: Any) -> SendMessageResult:
        """발행 실행.

        Args:
            payload: 요청 본문 (JSON 값)

        Returns:
            SendMessageResult
        """
        await self._publisher.publish(self._queue_name, payload)
        logger.info("Message sent to queue", extra={"queue": self._queue_name})
        return SendMessageResult(queue_name=self._queue_name)
