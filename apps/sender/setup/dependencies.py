"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from fastapi import Depends

from apps.sender.application.messages.commands import SendMessageCommand
from apps.sender.application.messages.ports import MessagePublisher
from apps.sender.infrastructure.messaging import RabbitMQMessagePublisher
from apps.sender.setup.config import Settings, get_settings


def get_message_publisher() -> MessagePublisher:
    """MessagePublisher 제공자."""
    return RabbitMQMessagePublisher()


def get_send_message_command(
    publisher: MessagePublisher = Depends(get_message_publisher),
    settings: Settings = Depends(get_settings),
) -> SendMessageCommand:
    """SendMessageCommand 제공자."""
    return SendMessageCommand(publisher, settings.queue_name)
