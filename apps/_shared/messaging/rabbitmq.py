"""RabbitMQ Connection / Publish / Consume.

프로세스당 하나의 연결과 하나의 채널을 공유합니다.

사용 예시:
    # 기동 시 한 번
    await connect_rabbitmq()

    # Publisher (sender)
    await publish_to_queue("my_queue", {"a": 1})

    # Subscriber (receiver worker)
    subscription = await consume_from_queue("my_queue", handler)

제약:
    - connect_rabbitmq() 이전의 publish/consume 은 NotInitializedError
    - 큐는 매 호출마다 idempotent 하게 선언 (브로커 기본 파라미터)
    - publisher confirm 없음 (전송 핸드오프까지만 보장)
    - 연결/발행/구독에 재시도, 타임아웃 없음
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import urlsplit

import aio_pika
from aio_pika import Message
from aio_pika.exceptions import AMQPError

from apps._shared.messaging.codec import CONTENT_TYPE, encode_message
from apps._shared.messaging.config import get_messaging_settings
from apps._shared.messaging.delivery import DeliveryDispatcher, MessageHandler
from apps._shared.messaging.exceptions import (
    BrokerConnectionError,
    ConfigurationError,
    NotInitializedError,
    QueueDeclarationError,
)
from apps._shared.messaging.subscription import Subscription

if TYPE_CHECKING:
    from aio_pika.abc import AbstractChannel, AbstractQueue, AbstractRobustConnection

logger = logging.getLogger(__name__)

_connection: "AbstractRobustConnection | None" = None
_channel: "AbstractChannel | None" = None

# 같은 채널에 대한 동시 발행 직렬화
_publish_lock = asyncio.Lock()


async def connect_rabbitmq(amqp_url: str | None = None) -> "AbstractChannel":
    """RabbitMQ 연결 및 공유 채널 생성.

    재호출 시 기존 채널을 확인하지 않고 새 연결/채널로 교체합니다.
    교체된 이전 연결은 닫습니다.

    Args:
        amqp_url: 브로커 URL (None이면 RABBITMQ_URL 설정 사용)

    Returns:
        공유 채널

    Raises:
        ConfigurationError: URL 누락 또는 빈 문자열 (네트워크 시도 없음)
        BrokerConnectionError: 연결 거부, DNS 실패, 인증 실패 등
    """
    global _connection, _channel, _publish_lock

    url = amqp_url if amqp_url is not None else get_messaging_settings().rabbitmq_url
    if not url or not url.strip():
        raise ConfigurationError("RABBITMQ_URL environment variable is not set")

    parts = urlsplit(url)
    log_extra = {"host": parts.hostname, "port": parts.port}

    try:
        connection = await aio_pika.connect_robust(url)
    except (AMQPError, OSError) as e:
        logger.error("RabbitMQ connection failed", extra={**log_extra, "error": str(e)})
        raise BrokerConnectionError(f"Failed to connect to RabbitMQ: {e}") from e

    try:
        channel = await connection.channel(publisher_confirms=False)
    except (AMQPError, OSError) as e:
        # 채널 없이 남은 robust 연결은 백그라운드 재연결을 계속함
        await connection.close()
        logger.error("RabbitMQ channel open failed", extra={**log_extra, "error": str(e)})
        raise BrokerConnectionError(f"Failed to open RabbitMQ channel: {e}") from e

    previous = _connection
    _connection = connection
    _channel = channel
    _publish_lock = asyncio.Lock()

    # 프로세스당 물리 연결 하나
    if previous is not None and previous is not connection and not previous.is_closed:
        await previous.close()
        logger.info("Previous RabbitMQ connection closed", extra=log_extra)

    logger.info("RabbitMQ connected", extra=log_extra)
    return channel


def get_channel() -> "AbstractChannel":
    """공유 채널 반환.

    Raises:
        NotInitializedError: connect_rabbitmq() 호출 전
    """
    if _channel is None:
        raise NotInitializedError()
    return _channel


def is_connected() -> bool:
    """열린 채널 존재 여부."""
    return _channel is not None and not _channel.is_closed


async def close_rabbitmq() -> None:
    """연결 종료 (서비스 shutdown 용)."""
    global _connection, _channel

    connection = _connection
    _connection = None
    _channel = None

    if connection is not None and not connection.is_closed:
        await connection.close()
        logger.info("RabbitMQ connection closed")


async def _declare_queue(channel: "AbstractChannel", queue_name: str) -> "AbstractQueue":
    """큐 선언 (ensure-exists)."""
    try:
        return await channel.declare_queue(queue_name)
    except AMQPError as e:
        raise QueueDeclarationError(queue_name, str(e)) from e


def _check_queue_name(queue_name: str) -> None:
    if not queue_name:
        raise ValueError("queue_name must be a non-empty string")


async def publish_to_queue(queue_name: str, payload: Any) -> None:
    """큐에 메시지 발행.

    Args:
        queue_name: 대상 큐 이름
        payload: JSON 직렬화 가능한 값

    Raises:
        NotInitializedError: 채널 없음
        SerializationError: JSON 인코딩 실패 (네트워크 I/O 이전)
        QueueDeclarationError: 큐 선언 실패
    """
    _check_queue_name(queue_name)
    channel = get_channel()
    body = encode_message(payload)

    await _declare_queue(channel, queue_name)

    message = Message(body=body, content_type=CONTENT_TYPE)
    async with _publish_lock:
        await channel.default_exchange.publish(message, routing_key=queue_name)

    logger.debug(
        "Message published",
        extra={"queue": queue_name, "size": len(body)},
    )


async def consume_from_queue(
    queue_name: str,
    handler: MessageHandler,
    *,
    requeue_on_error: bool = False,
) -> Subscription:
    """큐 구독 등록.

    브로커가 consumer 등록을 확인하면 바로 반환합니다 (메시지 대기 안 함).

    Args:
        queue_name: 구독 큐 이름
        handler: 디코딩된 값을 받는 콜백
        requeue_on_error: handler 예외시 nack requeue 여부

    Returns:
        Subscription: 구독 핸들

    Raises:
        NotInitializedError: 채널 없음
        QueueDeclarationError: 큐 선언 실패
    """
    _check_queue_name(queue_name)
    channel = get_channel()

    queue = await _declare_queue(channel, queue_name)

    dispatcher = DeliveryDispatcher(queue_name, handler, requeue_on_error=requeue_on_error)

    # 수동 ack
    consumer_tag = await queue.consume(dispatcher.on_message, no_ack=False)

    logger.info(
        "Started consuming messages",
        extra={"queue": queue_name, "consumer_tag": consumer_tag},
    )
    return Subscription(
        queue_name=queue_name,
        consumer_tag=consumer_tag,
        queue=queue,
        dispatcher=dispatcher,
    )
