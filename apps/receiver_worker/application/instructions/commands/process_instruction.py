"""ProcessInstruction Command.

수신한 지시 메시지를 처리하는 유스케이스입니다.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Callable

from apps.receiver_worker.application.instructions.dto import ProcessedInstruction

logger = logging.getLogger(__name__)


class ProcessInstructionCommand:
    """지시 메시지 처리 Command."""

    def __init__(
        self,
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        """Initialize.

        Args:
            clock: 현재 시각 제공자 (테스트용 주입)
        """
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, instruction: Any) -> ProcessedInstruction:
        """처리 실행.

        Args:
            instruction: 큐에서 디코딩된 값

        Returns:
            ProcessedInstruction
        """
        result = ProcessedInstruction(received=instruction, processed_at=self._clock())
        logger.info("Instruction received", extra=result.to_dict())
        return result
