"""
Note models mirroring the records AnkiConnect returns (read-only).
"""

from pydantic import BaseModel, ConfigDict, Field


class NoteField(BaseModel):
    """A single field value of a note, with its position in the note type."""

    model_config = ConfigDict(frozen=True)

    value: str
    order: int = 0


class NoteInfo(BaseModel):
    """
    A note fetched from the collection.

    Attributes:
        note_id: Unique note identifier
        fields: Field name -> field value and order
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    note_id: int = Field(..., alias="noteId")
    fields: dict[str, NoteField] = Field(default_factory=dict)

    def field_value(self, field_name: str) -> str | None:
        """Return the value of a field, or None if the note has no such field."""
        field = self.fields.get(field_name)
        return field.value if field is not None else None


class NoteModel(BaseModel):
    """A note type resolved against the live collection."""

    model_config = ConfigDict(frozen=True, protected_namespaces=())

    name: str
    model_id: int
