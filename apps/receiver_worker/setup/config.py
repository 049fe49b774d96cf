"""Configuration.

환경 변수 기반 설정입니다.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    """워커 설정.

    환경 변수에서 로드됩니다.
    rabbitmq_url 검증(누락/빈 값)은 connect_rabbitmq()에서 수행합니다.
    """

    # RabbitMQ
    rabbitmq_url: str

    # Queue
    queue_name: str = "my_queue"
    requeue_on_error: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    # Worker
    service_name: str = "receiver-worker"
    service_version: str = "1.0.0"
    environment: str = "dev"


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 반환."""
    return Settings(
        rabbitmq_url=os.getenv("RABBITMQ_URL", ""),
        queue_name=os.getenv("QUEUE_NAME", "my_queue"),
        requeue_on_error=os.getenv("REQUEUE_ON_ERROR", "false").lower() in _TRUTHY,
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        log_format=os.getenv("LOG_FORMAT", "json").lower(),
        service_name=os.getenv("SERVICE_NAME", "receiver-worker"),
        service_version=os.getenv("SERVICE_VERSION", "1.0.0"),
        environment=os.getenv("ENVIRONMENT", "dev"),
    )
