"""Subscription Handle.

consume_from_queue()가 반환하는 구독 핸들입니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aio_pika.abc import AbstractQueue

    from apps._shared.messaging.delivery import DeliveryDispatcher

logger = logging.getLogger(__name__)


@dataclass
class Subscription:
    """활성 구독.

    구독은 프로세스 수명 동안 유지되며, 종료 시에만 cancel() 합니다.
    """

    queue_name: str
    consumer_tag: str
    queue: "AbstractQueue"
    dispatcher: "DeliveryDispatcher"

    @property
    def stats(self) -> dict[str, int]:
        """디스패처 통계."""
        return self.dispatcher.stats

    async def cancel(self) -> None:
        """브로커에서 consumer 해제."""
        await self.queue.cancel(self.consumer_tag)
        logger.info(
            "Subscription cancelled",
            extra={"queue": self.queue_name, "consumer_tag": self.consumer_tag},
        )
