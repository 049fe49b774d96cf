"""Instruction DTOs."""

from apps.receiver_worker.application.instructions.dto.processed_instruction import (
    ProcessedInstruction,
)

__all__ = ["ProcessedInstruction"]
