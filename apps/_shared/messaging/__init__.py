"""RabbitMQ 메시징 공통 모듈.

sender (HTTP → 큐 발행)와 receiver_worker (큐 구독)가 공유하는
연결/발행/구독 코어입니다.

사용 예시:
    from apps._shared.messaging import connect_rabbitmq, publish_to_queue
    await connect_rabbitmq()
    await publish_to_queue("my_queue", {"message": "hello"})
"""

from apps._shared.messaging.codec import decode_message, encode_message
from apps._shared.messaging.delivery import DeliveryDispatcher, MessageHandler
from apps._shared.messaging.exceptions import (
    BrokerConnectionError,
    ConfigurationError,
    DeserializationError,
    MessagingError,
    NotInitializedError,
    QueueDeclarationError,
    SerializationError,
)
from apps._shared.messaging.rabbitmq import (
    close_rabbitmq,
    connect_rabbitmq,
    consume_from_queue,
    get_channel,
    is_connected,
    publish_to_queue,
)
from apps._shared.messaging.subscription import Subscription

__all__ = [
    "connect_rabbitmq",
    "close_rabbitmq",
    "get_channel",
    "is_connected",
    "publish_to_queue",
    "consume_from_queue",
    "Subscription",
    "DeliveryDispatcher",
    "MessageHandler",
    "encode_message",
    "decode_message",
    "MessagingError",
    "ConfigurationError",
    "BrokerConnectionError",
    "NotInitializedError",
    "QueueDeclarationError",
    "SerializationError",
    "DeserializationError",
]
