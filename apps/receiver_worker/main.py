"""Receiver Worker Entry Point.

큐에서 지시 메시지를 소비하여 처리하는 워커입니다.

Architecture:
    RabbitMQ (QUEUE_NAME)
        │
        └── receiver-worker (이 모듈)
                │
                ├── DeliveryDispatcher (decode / ack / nack)
                │
                └── ProcessInstructionCommand

Run:
    python -m apps.receiver_worker.main
"""

from __future__ import annotations

import asyncio
import logging
import signal
from typing import Any

from apps.receiver_worker.setup.config import get_settings
from apps.receiver_worker.setup.dependencies import Container
from apps.receiver_worker.setup.logging import setup_logging

logger = logging.getLogger(__name__)


class ReceiverWorker:
    """Receiver Worker.

    구독은 한 번만 등록하고, 종료 시그널까지 대기합니다.
    """

    def __init__(self) -> None:
        self._container = Container()
        self._shutdown = asyncio.Event()
        self._processed = 0
        self._errors = 0

    async def start(self) -> None:
        """워커 시작."""
        settings = get_settings()
        logger.info(
            "Receiver Worker starting",
            extra={
                "service_name": settings.service_name,
                "service_version": settings.service_version,
                "env": settings.environment,
                "queue": settings.queue_name,
            },
        )

        try:
            # RabbitMQ 연결 (실패시 기동 중단)
            await self._container.init()
            logger.info("Dependencies initialized")

            # 시그널 핸들러 등록
            loop = asyncio.get_running_loop()
            for sig in (signal.SIGTERM, signal.SIGINT):
                loop.add_signal_handler(sig, self._handle_shutdown)

            await self._container.subscribe(self._handle_message)
            await self._shutdown.wait()
        finally:
            await self._cleanup()

    def _handle_shutdown(self) -> None:
        """Graceful shutdown 핸들러."""
        logger.info("Shutdown signal received")
        self._shutdown.set()

    async def _handle_message(self, data: Any) -> None:
        """메시지 핸들러.

        예외는 다시 던져서 DeliveryDispatcher가 nack 하도록 합니다.

        Args:
            data: JSON 디코딩된 메시지
        """
        try:
            await self._container.process_command.execute(data)
            self._processed += 1
        except Exception:
            self._errors += 1
            logger.exception(
                "Error handling message",
                extra={"data": data},
            )
            raise

    async def _cleanup(self) -> None:
        """리소스 정리."""
        subscription = self._container.subscription
        logger.info(
            "Shutting down",
            extra={
                "processed": self._processed,
                "errors": self._errors,
                "delivery": subscription.stats if subscription else {},
            },
        )
        await self._container.close()
        logger.info("Receiver Worker stopped")


async def main() -> None:
    """Entry point."""
    setup_logging()
    worker = ReceiverWorker()
    await worker.start()


if __name__ == "__main__":
    asyncio.run(main())
