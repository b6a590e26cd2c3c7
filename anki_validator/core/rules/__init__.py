"""
Validation rule engine and configuration management.
"""

from .rule_config import (
    RuleConfigBuilder,
    ValidationConfigLoader,
    apply_field_filter,
    apply_validation_filter,
    create_validation_config,
)
from .rule_engine import FailureMap, RuleEngine, build_validation_result

__all__ = [
    "FailureMap",
    "RuleEngine",
    "RuleConfigBuilder",
    "ValidationConfigLoader",
    "apply_field_filter",
    "apply_validation_filter",
    "build_validation_result",
    "create_validation_config",
]
