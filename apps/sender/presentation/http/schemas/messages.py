"""Message Schemas."""

from __future__ import annotations

from pydantic import BaseModel


class SendMessageResponse(BaseModel):
    """발행 성공 응답."""

    status: str = "Message sent to queue"
    queue: str


class ErrorResponse(BaseModel):
    """발행 실패 응답."""

    error: str
    code: str
