"""HTTP Schemas."""

from apps.sender.presentation.http.schemas.messages import (
    ErrorResponse,
    SendMessageResponse,
)

__all__ = ["ErrorResponse", "SendMessageResponse"]
