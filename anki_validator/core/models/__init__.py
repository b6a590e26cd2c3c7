"""
Core data models for the Anki field validator.

All models use Pydantic for runtime validation and are immutable once built.
"""

from .note import NoteField, NoteInfo, NoteModel
from .validation_config import ValidationConfig
from .validation_result import ValidationResult

__all__ = [
    "NoteField",
    "NoteInfo",
    "NoteModel",
    "ValidationConfig",
    "ValidationResult",
]
