"""
Fatal error types raised by the validation core.

Rule failures are never exceptions; these cover the conditions that abort a
whole run (bad configuration, a config that does not match the collection,
and notes that do not carry the fields their note type declares).
"""


def quote_names(names) -> str:
    """Render names as a comma separated list of quoted values."""
    return ", ".join(f"'{name}'" for name in names)


class ConfigurationError(ValueError):
    """Raised when the rule-set source or transport settings are unusable."""
    pass


class FieldFilterError(ConfigurationError):
    """Raised when the field filter names fields the config does not declare."""

    def __init__(self, invalid_fields: list[str]):
        self.invalid_fields = list(invalid_fields)
        super().__init__(
            f"The fields filter must specify fields from the config: {quote_names(self.invalid_fields)}"
        )


class ReconciliationError(ValueError):
    """Raised when the config does not match the live note type schema."""

    def __init__(self, message: str, missing_fields: list[str] | None = None):
        self.missing_fields = list(missing_fields or [])
        super().__init__(message)


class NoteFieldMismatchError(RuntimeError):
    """Raised when a fetched note lacks a field that reconciliation accepted."""

    def __init__(self, note_id: int, field_name: str, note_type: str):
        self.note_id = note_id
        self.field_name = field_name
        self.note_type = note_type
        super().__init__(
            f"The field '{field_name}' for note type '{note_type}' does not exist on note {note_id}"
        )
