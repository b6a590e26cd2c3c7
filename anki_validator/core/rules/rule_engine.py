"""
Rule engine for applying a validation config to notes.

The rule engine evaluates each configured field of each note, keeps the first
failing rule per field, and aggregates the failures into a ValidationResult.
"""

from collections.abc import Sequence
from typing import Any

from anki_validator.core.errors import NoteFieldMismatchError
from anki_validator.core.models import NoteInfo, ValidationConfig, ValidationResult
from anki_validator.core.validators import BaseValidator

FailureMap = dict[int, dict[str, BaseValidator]]


class RuleEngine:
    """
    Applies the rules of a ValidationConfig to notes.

    Rules for a field run in declared order and evaluation of that field stops
    at the first failing rule; later rules for the same field are not reported
    even if they would also fail.
    """

    def __init__(self, config: ValidationConfig, note_type: str | None = None):
        """
        Initialize the rule engine.

        Args:
            config: A config whose fields were reconciled against the note type
            note_type: Resolved note type name used in error messages; defaults
                to the config's selector
        """
        self.config = config
        if note_type is None:
            note_type = config.note_type if config.note_type is not None else str(config.model_id)
        self.note_type = note_type

    def validate_note(self, note: NoteInfo) -> dict[str, BaseValidator]:
        """
        Validate a single note.

        Args:
            note: The note to validate

        Returns:
            Field name -> first failing rule, for failing fields only

        Raises:
            NoteFieldMismatchError: If the note lacks a configured field
        """
        failures: dict[str, BaseValidator] = {}

        for field_name, rules in self.config.field_validations.items():
            value = note.field_value(field_name)
            if value is None:
                raise NoteFieldMismatchError(note.note_id, field_name, self.note_type)

            for rule in rules:
                if not rule.is_valid(value):
                    failures[field_name] = rule
                    break

        return failures

    def validate_notes(self, notes: Sequence[NoteInfo]) -> FailureMap:
        """
        Validate a batch of notes.

        Args:
            notes: Notes of the configured note type

        Returns:
            Note id -> field failures, for notes with at least one failure
        """
        failed_notes: FailureMap = {}
        for note in notes:
            failures = self.validate_note(note)
            if failures:
                failed_notes[note.note_id] = failures
        return failed_notes

    def run(self, notes: Sequence[NoteInfo]) -> ValidationResult:
        """Validate notes and aggregate the outcome."""
        return build_validation_result(len(notes), self.validate_notes(notes))

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of loaded rules.

        Returns:
            Dictionary with field and rule counts
        """
        return {
            "total_fields": len(self.config.field_validations),
            "total_rules": self.config.rule_count(),
            "rules_by_type": self._count_by_type(),
        }

    def _count_by_type(self) -> dict[str, int]:
        """Count rules by rule kind."""
        counts: dict[str, int] = {}
        for rules in self.config.field_validations.values():
            for rule in rules:
                kind = rule.rule_type.value
                counts[kind] = counts.get(kind, 0) + 1
        return counts


def build_validation_result(total_note_count: int, failed_notes: FailureMap) -> ValidationResult:
    """
    Aggregate the failures of a run.

    Args:
        total_note_count: Number of notes examined
        failed_notes: Failure map produced by RuleEngine.validate_notes

    Returns:
        The ValidationResult for the run
    """
    return ValidationResult(
        total_note_count=total_note_count,
        failed_note_count=len(failed_notes),
        validation_errors=failed_notes,
    )
