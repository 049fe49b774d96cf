"""Dependency Injection.

워커의 Composition Root입니다.
모든 의존성을 여기서 조립합니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from apps._shared.messaging import close_rabbitmq, connect_rabbitmq, consume_from_queue
from apps.receiver_worker.application.instructions.commands import (
    ProcessInstructionCommand,
)
from apps.receiver_worker.setup.config import get_settings

if TYPE_CHECKING:
    from apps._shared.messaging import MessageHandler, Subscription


class Container:
    """의존성 컨테이너.

    모든 의존성을 생성하고 관리합니다.
    """

    def __init__(self) -> None:
        self._settings = get_settings()
        self._process_command: ProcessInstructionCommand | None = None
        self._subscription: Subscription | None = None

    async def init(self) -> None:
        """의존성 초기화.

        Raises:
            ConfigurationError: RABBITMQ_URL 누락
            BrokerConnectionError: 브로커 연결 실패
        """
        await connect_rabbitmq(self._settings.rabbitmq_url)
        self._process_command = ProcessInstructionCommand()

    async def subscribe(self, handler: "MessageHandler") -> "Subscription":
        """설정된 큐 구독."""
        self._subscription = await consume_from_queue(
            self._settings.queue_name,
            handler,
            requeue_on_error=self._settings.requeue_on_error,
        )
        return self._subscription

    async def close(self) -> None:
        """리소스 정리."""
        try:
            if self._subscription:
                await self._subscription.cancel()
        finally:
            self._subscription = None
            await close_rabbitmq()

    @property
    def process_command(self) -> ProcessInstructionCommand:
        """지시 메시지 처리 Command."""
        if not self._process_command:
            raise RuntimeError("Container not initialized")
        return self._process_command

    @property
    def subscription(self) -> "Subscription | None":
        """활성 구독."""
        return self._subscription
