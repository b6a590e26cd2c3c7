"""
ValueListValidator - restricts a comma separated field to a fixed vocabulary.
"""

from typing import Literal

from .base_validator import BaseValidator, RuleKind


class ValueListValidator(BaseValidator):
    """
    Validates that every comma separated token of a field is an allowed value.

    Parameters:
    - check: The allowed values, in the order they are reported

    Tokens are stripped of surrounding whitespace before the lookup. An empty
    field has no tokens and always passes; combine with Required to reject it.
    Duplicates and ordering of tokens are not checked.
    """

    type: Literal["ValueList"] = "ValueList"
    check: tuple[str, ...]

    def is_valid(self, value: str) -> bool:
        if not isinstance(value, str):
            return False
        if value == "":
            return True
        return all(token.strip() in self.check for token in value.split(","))

    def message(self) -> str:
        return f"Field must only contain valid values: {', '.join(self.check)}"

    @property
    def rule_type(self) -> RuleKind:
        return RuleKind.VALUE_LIST
