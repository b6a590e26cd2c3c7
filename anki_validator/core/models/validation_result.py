"""
ValidationResult model representing the outcome of one validation run (ephemeral).
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from anki_validator.core.validators import FieldValidator


class ValidationResult(BaseModel):
    """
    Outcome of validating every note of a note type.

    Note: ValidationResult is ephemeral, it is printed and discarded at the
    end of the run.

    Attributes:
        total_note_count: Number of notes examined
        failed_note_count: Number of notes with at least one failing field
        validation_errors: Note id -> (field name -> first rule that failed)
    """

    model_config = ConfigDict(frozen=True)

    total_note_count: int = Field(..., ge=0)
    failed_note_count: int = Field(..., ge=0)
    validation_errors: dict[int, dict[str, FieldValidator]] = Field(default_factory=dict)

    @field_validator("validation_errors")
    @classmethod
    def check_no_empty_entries(cls, v):
        """Validate that every failed note lists at least one failing field."""
        empty = [note_id for note_id, failures in v.items() if not failures]
        if empty:
            raise ValueError(f"Notes listed without failing fields: {empty}")
        return v

    @model_validator(mode="after")
    def check_counts(self) -> "ValidationResult":
        """Validate that the counts agree with the failure map."""
        if self.failed_note_count != len(self.validation_errors):
            raise ValueError(
                f"failed_note_count={self.failed_note_count} but "
                f"{len(self.validation_errors)} notes have validation errors"
            )
        if self.failed_note_count > self.total_note_count:
            raise ValueError("failed_note_count cannot exceed total_note_count")
        return self

    @property
    def passed(self) -> bool:
        return self.failed_note_count == 0

    @property
    def failed_note_ids(self) -> list[int]:
        return list(self.validation_errors)
