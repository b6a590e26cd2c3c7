"""
Validation pipeline orchestration.
"""

from .validation_pipeline import ValidationPipeline, build_note_query

__all__ = [
    "ValidationPipeline",
    "build_note_query",
]
