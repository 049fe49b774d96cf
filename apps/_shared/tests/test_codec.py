"""JSON Codec 테스트."""

from __future__ import annotations

import json

import pytest

from apps._shared.messaging.codec import decode_message, encode_message
from apps._shared.messaging.exceptions import DeserializationError, SerializationError


class TestEncodeMessage:
    """encode_message 테스트."""

    def test_encodes_utf8_json(self) -> None:
        """UTF-8 JSON 바이트 생성."""
        body = encode_message({"text": "안녕하세요", "n": 1})

        assert isinstance(body, bytes)
        assert json.loads(body.decode("utf-8")) == {"text": "안녕하세요", "n": 1}
        assert "안녕하세요".encode("utf-8") in body

    def test_cyclic_structure_raises(self) -> None:
        """순환 참조는 SerializationError."""
        cyclic: list = []
        cyclic.append(cyclic)

        with pytest.raises(SerializationError):
            encode_message(cyclic)

    def test_unsupported_type_raises(self) -> None:
        """JSON 타입이 아니면 SerializationError."""
        with pytest.raises(SerializationError):
            encode_message({"when": object()})

    def test_nan_raises(self) -> None:
        """NaN은 JSON 표현 불가."""
        with pytest.raises(SerializationError):
            encode_message({"value": float("nan")})


class TestDecodeMessage:
    """decode_message 테스트."""

    def test_decodes_json(self) -> None:
        """JSON 바이트 디코딩."""
        assert decode_message(b'{"a": [1, 2, null]}') == {"a": [1, 2, None]}

    def test_invalid_json_raises(self) -> None:
        """JSON이 아니면 DeserializationError."""
        with pytest.raises(DeserializationError, match="Invalid JSON message"):
            decode_message(b"not valid json")

    def test_invalid_utf8_raises(self) -> None:
        """UTF-8이 아니면 DeserializationError."""
        with pytest.raises(DeserializationError):
            decode_message(b"\xff\xfe\x00")

    def test_empty_body_raises(self) -> None:
        """빈 본문도 DeserializationError."""
        with pytest.raises(DeserializationError):
            decode_message(b"")

    @pytest.mark.parametrize(
        "value",
        [
            {"id": "123", "data": {"nested": {"value": "test"}}, "array": [1, 2, 3]},
            [1, "two", 3.5, True, None],
            "plain string",
            42,
            False,
            None,
        ],
    )
    def test_round_trip(self, value: object) -> None:
        """JSON 표현 가능한 값은 손실 없이 왕복."""
        assert decode_message(encode_message(value)) == value
