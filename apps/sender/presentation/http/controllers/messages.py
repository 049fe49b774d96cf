"""Messages Controller.

POST /send: 요청 본문을 큐에 발행합니다.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Depends

from apps.sender.application.messages.commands import SendMessageCommand
from apps.sender.presentation.http.schemas import ErrorResponse, SendMessageResponse
from apps.sender.setup.dependencies import get_send_message_command

router = APIRouter(tags=["messages"])


@router.post(
    "/send",
    response_model=SendMessageResponse,
    responses={500: {"model": ErrorResponse}},
)
async def send_message(
    payload: Any = Body(...),
    command: SendMessageCommand = Depends(get_send_message_command),
) -> SendMessageResponse:
    """메시지 발행."""
    result = await command.execute(payload)
    return SendMessageResponse(queue=result.queue_name)
