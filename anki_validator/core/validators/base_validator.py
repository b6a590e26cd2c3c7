"""
Base validator interface for all field rules.

All rule kinds inherit from BaseValidator and implement is_valid() and message().
"""

from abc import ABC, abstractmethod
from enum import Enum

from pydantic import BaseModel, ConfigDict


class RuleKind(str, Enum):
    """Identifiers of the supported rule kinds, as written in config files."""

    REQUIRED = "Required"
    VALUE_LIST = "ValueList"
    MUST_NOT_INCLUDE = "MustNotInclude"


class BaseValidator(BaseModel, ABC):
    """
    Abstract base class for all field rules.

    A rule is an immutable check applied to a single field value. Rules never
    raise on bad input: anything that is not a string simply fails.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    @abstractmethod
    def is_valid(self, value: str) -> bool:
        """
        Check a field value against this rule.

        Args:
            value: The raw field value taken from the note

        Returns:
            True if the value satisfies the rule
        """
        pass

    @abstractmethod
    def message(self) -> str:
        """Return the human-readable failure message for this rule."""
        pass

    @property
    @abstractmethod
    def rule_type(self) -> RuleKind:
        """Return the rule kind identifier."""
        pass

    def __str__(self) -> str:
        return self.message()
