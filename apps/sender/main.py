"""Sender API Application Entry Point.

HTTP 요청 본문을 RabbitMQ 큐로 발행하는 서비스입니다.

Architecture:
    POST /send
        │
        └── SendMessageCommand
                │
                └── RabbitMQMessagePublisher
                        │
                        └── RabbitMQ (QUEUE_NAME) → receiver_worker

Run:
    python -m apps.sender.main
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from apps._shared.messaging import close_rabbitmq, connect_rabbitmq
from apps.sender.presentation.http.controllers import health_router, messages_router
from apps.sender.presentation.http.errors import register_exception_handlers
from apps.sender.setup.config import get_settings
from apps.sender.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """애플리케이션 생명주기 관리.

    RabbitMQ 연결 실패시 기동을 중단합니다 (트래픽 수신 전).
    """
    settings = get_settings()
    logger.info(
        "Sender API starting",
        extra={
            "service_name": settings.service_name,
            "service_version": settings.service_version,
            "queue": settings.queue_name,
        },
    )

    await connect_rabbitmq()

    yield

    logger.info("Shutting down Sender API")
    await close_rabbitmq()


def create_app() -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = get_settings()

    setup_logging()

    app = FastAPI(
        title="Sender API",
        description="HTTP → RabbitMQ 메시지 발행 서비스",
        version=settings.service_version,
        lifespan=lifespan,
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(messages_router)

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.sender_host, port=settings.sender_port)
