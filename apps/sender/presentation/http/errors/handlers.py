"""Exception Handlers.

메시징 예외를 HTTP 응답으로 변환합니다.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from apps._shared.messaging import MessagingError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """예외 핸들러 등록."""

    @app.exception_handler(MessagingError)
    async def messaging_error_handler(request: Request, exc: MessagingError):
        logger.error(
            "Error publishing message",
            extra={"path": request.url.path, "code": exc.code, "error": exc.message},
        )
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to publish message", "code": exc.code},
        )
