"""
RequiredFieldValidator - ensures a field holds something other than whitespace.
"""

from typing import Literal

from .base_validator import BaseValidator, RuleKind


class RequiredFieldValidator(BaseValidator):
    """
    Validates that a field value is not empty.

    Fails if the value is empty or consists only of whitespace.
    """

    type: Literal["Required"] = "Required"

    def is_valid(self, value: str) -> bool:
        if not isinstance(value, str):
            return False
        return value.strip() != ""

    def message(self) -> str:
        return "Missing required value"

    @property
    def rule_type(self) -> RuleKind:
        return RuleKind.REQUIRED
