"""Delivery Dispatcher.

push 전달된 메시지 하나를 처리하는 프로토콜 어댑터입니다.

RabbitMQ (push delivery)
        │
        │ AbstractIncomingMessage (bytes)
        ▼
DeliveryDispatcher.on_message
        │
        │ JSON decoded value
        ▼
handler (호출자 제공)
        │
        └── ack / nack / reject

ack 정책:
- None 전달 (브로커 consumer cancel): handler 미호출, ack 없음
- 디코딩 실패: reject(requeue=False), ack 하지 않음
- handler 정상 반환: ack
- handler 예외: nack(requeue=requeue_on_error)
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

from apps._shared.messaging.codec import decode_message
from apps._shared.messaging.exceptions import DeserializationError

if TYPE_CHECKING:
    from aio_pika.abc import AbstractIncomingMessage

logger = logging.getLogger(__name__)

MessageHandler = Callable[[Any], Union[Awaitable[None], None]]


class DeliveryDispatcher:
    """구독 하나에 대한 메시지 디스패처.

    전달 순서대로 한 번에 하나씩 handler를 호출합니다.
    예외는 콜백 밖으로 전파되지 않으므로 구독이 종료되지 않습니다.
    """

    def __init__(
        self,
        queue_name: str,
        handler: MessageHandler,
        requeue_on_error: bool = False,
    ) -> None:
        """Initialize.

        Args:
            queue_name: 구독 큐 이름 (로깅용)
            handler: 디코딩된 값을 받는 콜백 (동기/비동기 모두 가능)
            requeue_on_error: handler 예외시 재전달 여부
        """
        self._queue_name = queue_name
        self._handler = handler
        self._requeue_on_error = requeue_on_error
        self._lock = asyncio.Lock()
        self._processed = 0
        self._failed = 0
        self._invalid = 0
        self._cancelled = 0
        self._ack_failed = 0

    async def on_message(self, message: "AbstractIncomingMessage | None") -> None:
        """메시지 처리 콜백.

        Args:
            message: RabbitMQ 메시지 (consumer cancel이면 None)
        """
        if message is None:
            self._cancelled += 1
            logger.warning(
                "Consumer cancelled by broker",
                extra={"queue": self._queue_name},
            )
            return

        async with self._lock:
            await self._dispatch(message)

    async def _dispatch(self, message: "AbstractIncomingMessage") -> None:
        # 1. Decode
        try:
            value = decode_message(message.body)
        except DeserializationError as e:
            await message.reject(requeue=False)
            self._invalid += 1
            logger.error(
                "Invalid JSON message",
                extra={"queue": self._queue_name, "error": e.message},
            )
            return

        # 2. Handler 호출
        try:
            result = self._handler(value)
            if inspect.isawaitable(result):
                await result
        except Exception:
            await message.nack(requeue=self._requeue_on_error)
            self._failed += 1
            logger.exception(
                "Handler failed",
                extra={
                    "queue": self._queue_name,
                    "requeue": self._requeue_on_error,
                },
            )
            return

        # 3. ack
        try:
            await message.ack()
        except Exception:
            # 채널이 닫히면 ack 불가, 브로커가 재전달함
            self._ack_failed += 1
            logger.exception("Ack failed", extra={"queue": self._queue_name})
            return

        self._processed += 1
        logger.debug("Message processed", extra={"queue": self._queue_name})

    @property
    def stats(self) -> dict[str, int]:
        """통계 반환."""
        return {
            "processed": self._processed,
            "failed": self._failed,
            "invalid": self._invalid,
            "cancelled": self._cancelled,
            "ack_failed": self._ack_failed,
        }
