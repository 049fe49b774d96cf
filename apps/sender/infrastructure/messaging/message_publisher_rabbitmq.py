"""RabbitMQ Message Publisher.

MessagePublisher 포트의 RabbitMQ 구현체입니다.
프로세스 공유 채널(apps._shared.messaging)을 사용합니다.
"""

from __future__ import annotations

from typing import Any

from apps._shared.messaging import publish_to_queue


class RabbitMQMessagePublisher:
    """RabbitMQ 기반 메시지 발행자.

    채널은 lifespan에서 connect_rabbitmq()로 미리 열려 있어야 합니다.
    """

    async def publish(self, queue_name: str, payload: Any) -> None:
        """큐에 메시지 발행."""
        await publish_to_queue(queue_name, payload)
