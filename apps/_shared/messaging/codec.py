"""JSON Codec.

큐 위의 메시지 본문은 envelope 없는 UTF-8 JSON 텍스트입니다.
"""

from __future__ import annotations

import json
from typing import Any

from apps._shared.messaging.exceptions import DeserializationError, SerializationError

CONTENT_TYPE = "application/json"


def encode_message(payload: Any) -> bytes:
    """값을 UTF-8 JSON 바이트로 인코딩.

    NaN/Infinity는 JSON 표현이 아니므로 거부합니다.

    Raises:
        SerializationError: 순환 참조, 지원하지 않는 타입, NaN 등
    """
    try:
        text = json.dumps(payload, ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Payload is not JSON serializable: {e}") from e
    return text.encode("utf-8")


def decode_message(body: bytes) -> Any:
    """UTF-8 JSON 바이트를 값으로 디코딩.

    Raises:
        DeserializationError: UTF-8 또는 JSON 파싱 실패
    """
    try:
        return json.loads(body.decode("utf-8"))
    except (UnicodeDecodeError, json.JSONDecodeError) as e:
        raise DeserializationError(f"Invalid JSON message: {e}") from e
