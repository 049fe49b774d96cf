"""Messaging Infrastructure.

RabbitMQ 기반 메시지 발행 구현체입니다.
"""

from apps.sender.infrastructure.messaging.message_publisher_rabbitmq import (
    RabbitMQMessagePublisher,
)

__all__ = ["RabbitMQMessagePublisher"]
