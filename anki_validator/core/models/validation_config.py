"""
ValidationConfig model: the rule set applied to every note of one note type.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from anki_validator.core.validators import FieldValidator, RuleKind


class ValidationConfig(BaseModel):
    """
    Field rules for a single note type.

    Exactly one selector identifies the note type: its name (note_type) or its
    numeric model id (model_id). Field order and rule order are preserved as
    declared; rules for a field are evaluated in that order.
    field_validations is required and unknown top-level keys are rejected.

    Attributes:
        note_type: Name of the note type to validate
        model_id: Numeric id of the note type to validate
        field_validations: Field name -> ordered rules for that field
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        protected_namespaces=(),
        json_schema_extra={
            "example": {
                "note_type": "Basic",
                "field_validations": {
                    "Front": [{"type": "Required"}],
                    "Tags": [{"type": "ValueList", "check": ["grammar", "vocab"]}],
                    "Back": [{"type": "MustNotInclude", "check": "TODO"}],
                },
            }
        },
    )

    note_type: str | None = Field(None, min_length=1)
    model_id: int | None = None
    field_validations: dict[str, tuple[FieldValidator, ...]] = Field(...)

    @model_validator(mode="after")
    def check_single_selector(self) -> "ValidationConfig":
        """Validate that exactly one of note_type / model_id is set."""
        if (self.note_type is None) == (self.model_id is None):
            raise ValueError("Exactly one of 'note_type' or 'model_id' must be given")
        return self

    @property
    def selector_description(self) -> str:
        if self.note_type is not None:
            return f"the name '{self.note_type}'"
        return f"the id {self.model_id}"

    @property
    def field_names(self) -> list[str]:
        return list(self.field_validations)

    def rule_count(self) -> int:
        return sum(len(rules) for rules in self.field_validations.values())

    def rule_kinds(self) -> set[RuleKind]:
        return {rule.rule_type for rules in self.field_validations.values() for rule in rules}
