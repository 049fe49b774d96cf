"""MessagePublisher Port.

큐 발행을 위한 인터페이스입니다.
"""

from __future__ import annotations

from typing import Any, Protocol


class MessagePublisher(Protocol):
    """메시지 발행 인터페이스.

    구현체:
        - RabbitMQMessagePublisher (infrastructure/messaging/)
    """

    async def publish(self, queue_name: str, payload: Any) -> None:
        """큐에 메시지 발행.

        Args:
            queue_name: 대상 큐 이름
            payload: JSON 직렬화 가능한 값

        Raises:
            MessagingError: 발행 실패
        """
        ...
