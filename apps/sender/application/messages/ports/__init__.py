"""Message Ports."""

from apps.sender.application.messages.ports.message_publisher import MessagePublisher

__all__ = ["MessagePublisher"]
