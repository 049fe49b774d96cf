"""Processed Instruction DTO."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True)
class ProcessedInstruction:
    """처리된 지시 메시지.

    Attributes:
        received: 큐에서 수신한 값 (발행된 값과 동일)
        processed_at: 처리 시각 (UTC)
    """

    received: Any
    processed_at: datetime

    def to_dict(self) -> dict[str, Any]:
        """딕셔너리로 변환."""
        return {
            "received": self.received,
            "processedAt": self.processed_at.isoformat(),
        }
