"""Logging Setup.

워커 로그를 stdout 으로 출력합니다.
LOG_FORMAT=json 이면 ECS JSON, text 면 사람이 읽는 한 줄 포맷입니다.
"""

from __future__ import annotations

import logging
import sys
from typing import Any

import ecs_logging

from apps.receiver_worker.setup.config import Settings, get_settings

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# 메시지마다 로그를 남기는 브로커 클라이언트
QUIET_LOGGERS = ("aio_pika", "aiormq")


def _resolve_level(name: str) -> int:
    """LOG_LEVEL 문자열을 로그 레벨로 변환 (대소문자 무관)."""
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown LOG_LEVEL: {name!r}")
    return level


def _build_formatter(log_format: str) -> logging.Formatter:
    if log_format == "text":
        return logging.Formatter(TEXT_FORMAT)
    return ecs_logging.StdlibFormatter()


def _install_service_metadata(settings: Settings) -> None:
    """LogRecord 에 service 필드 추가 (ECS service.*)."""
    service = {
        "name": settings.service_name,
        "version": settings.service_version,
        "environment": settings.environment,
    }
    base_factory = logging.getLogRecordFactory()

    def record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
        record = base_factory(*args, **kwargs)
        record.service = service
        return record

    logging.setLogRecordFactory(record_factory)


def setup_logging() -> None:
    """워커 로깅 설정.

    Raises:
        ValueError: 알 수 없는 LOG_LEVEL
    """
    settings = get_settings()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_build_formatter(settings.log_format))

    root_logger = logging.getLogger()
    root_logger.setLevel(_resolve_level(settings.log_level))
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)

    _install_service_metadata(settings)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
