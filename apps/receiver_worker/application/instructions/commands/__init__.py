"""Instruction Commands."""

from apps.receiver_worker.application.instructions.commands.process_instruction import (
    ProcessInstructionCommand,
)

__all__ = ["ProcessInstructionCommand"]
