"""Use cases."""

from kioku.application.use_cases.handle_message import (
    HandleMessageUseCase,
    PipelineStage,
)
from kioku.application.use_cases.memory_commands import MemoryCommandsUseCase

__all__ = [
    "HandleMessageUseCase",
    "MemoryCommandsUseCase",
    "PipelineStage",
]
