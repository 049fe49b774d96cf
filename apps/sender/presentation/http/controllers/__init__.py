"""HTTP Controllers."""

from apps.sender.presentation.http.controllers.health import router as health_router
from apps.sender.presentation.http.controllers.messages import router as messages_router

__all__ = ["health_router", "messages_router"]
