"""Message Commands."""

from apps.sender.application.messages.commands.send_message import (
    SendMessageCommand,
    SendMessageResult,
)

__all__ = ["SendMessageCommand", "SendMessageResult"]
