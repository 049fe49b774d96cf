"""Messaging Exceptions.

큐 연결/발행/구독 계층의 예외 계층입니다.

| 예외 | 발생 위치 | 성격 |
|------|----------|------|
| ConfigurationError | connect | 치명적 (기동 중단) |
| BrokerConnectionError | connect | 치명적 (재시도는 호출자 책임) |
| NotInitializedError | publish / subscribe | 프로그래밍 오류 |
| QueueDeclarationError | publish / subscribe | 브로커 거부 |
| SerializationError | publish | 해당 호출 실패 |
| DeserializationError | delivery | 메시지 단위 (구독 유지) |
"""

from __future__ import annotations


class MessagingError(Exception):
    """메시징 계층 기본 예외."""

    code = "MESSAGING_ERROR"

    def __init__(self, message: str = "Messaging error occurred") -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(MessagingError):
    """브로커 엔드포인트 설정 누락/오류."""

    code = "CONFIGURATION_ERROR"


class BrokerConnectionError(MessagingError):
    """브로커 연결 또는 채널 생성 실패.

    원인 예외는 ``__cause__``로 연결됩니다.
    """

    code = "BROKER_CONNECTION_ERROR"


class NotInitializedError(MessagingError):
    """connect() 이전에 publish/subscribe 호출."""

    code = "NOT_INITIALIZED"

    def __init__(self, message: str = "RabbitMQ channel not initialized") -> None:
        super().__init__(message)


class QueueDeclarationError(MessagingError):
    """큐 선언 실패 (파라미터 불일치 등)."""

    code = "QUEUE_DECLARATION_ERROR"

    def __init__(self, queue_name: str, reason: str) -> None:
        self.queue_name = queue_name
        super().__init__(f"Failed to declare queue '{queue_name}': {reason}")


class SerializationError(MessagingError):
    """페이로드를 JSON으로 인코딩할 수 없음."""

    code = "SERIALIZATION_ERROR"


class DeserializationError(MessagingError):
    """수신 바이트를 JSON으로 디코딩할 수 없음."""

    code = "DESERIALIZATION_ERROR"
