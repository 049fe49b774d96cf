"""Sender Service Configuration.

환경변수 기반 설정입니다.
브로커 URL(RABBITMQ_URL)은 apps._shared.messaging 설정에서 읽습니다.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Sender 서비스 설정."""

    # === Service Identity ===
    service_name: str = Field("sender-api", description="Service name")
    service_version: str = Field("1.0.0", description="Service version")
    environment: str = Field("dev", description="Environment (dev, staging, prod)")

    # === Queue ===
    queue_name: str = Field("my_queue", min_length=1, description="발행 대상 큐")

    # === Logging ===
    log_level: str = Field("INFO", description="Root log level")
    log_format: str = Field("json", description="json (ECS) | text")

    # === Server ===
    sender_host: str = Field("0.0.0.0", description="uvicorn bind host")
    sender_port: int = Field(4000, ge=1, le=65535, description="uvicorn bind port")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """설정 싱글톤 반환."""
    return Settings()
