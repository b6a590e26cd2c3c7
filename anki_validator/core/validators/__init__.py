"""
Field rule implementations.

The rule kinds form a closed set: every RuleKind has exactly one validator
class, and config entries are parsed through a union discriminated on "type".
"""

from typing import Annotated, Union

from pydantic import Field

from .base_validator import BaseValidator, RuleKind
from .must_not_include_validator import MustNotIncludeValidator
from .required_field_validator import RequiredFieldValidator
from .value_list_validator import ValueListValidator

FieldValidator = Annotated[
    Union[RequiredFieldValidator, ValueListValidator, MustNotIncludeValidator],
    Field(discriminator="type"),
]

__all__ = [
    "BaseValidator",
    "FieldValidator",
    "MustNotIncludeValidator",
    "RequiredFieldValidator",
    "RuleKind",
    "ValueListValidator",
]
