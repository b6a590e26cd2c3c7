"""
MustNotIncludeValidator - rejects field values containing a forbidden substring.
"""

from typing import Literal

from .base_validator import BaseValidator, RuleKind


class MustNotIncludeValidator(BaseValidator):
    """
    Validates that a field value does not contain a substring.

    Parameters:
    - check: The forbidden substring (matched case-sensitively)
    """

    type: Literal["MustNotInclude"] = "MustNotInclude"
    check: str

    def is_valid(self, value: str) -> bool:
        if not isinstance(value, str):
            return False
        return self.check not in value

    def message(self) -> str:
        return f"Field contains invalid value '{self.check}'"

    @property
    def rule_type(self) -> RuleKind:
        return RuleKind.MUST_NOT_INCLUDE
