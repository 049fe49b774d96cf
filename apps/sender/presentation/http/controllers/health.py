"""Health Check Controller."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from apps._shared.messaging import is_connected
from apps.sender.setup.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    """서비스 헬스 체크."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
    }


@router.get("/ready")
async def ready() -> JSONResponse:
    """서비스 준비 상태 체크 (RabbitMQ 채널 존재 여부)."""
    if not is_connected():
        return JSONResponse(status_code=503, content={"status": "not_ready"})
    return JSONResponse(status_code=200, content={"status": "ready"})
