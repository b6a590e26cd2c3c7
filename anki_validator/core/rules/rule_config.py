"""
Rule configuration management.

Loads validation configs from JSON or YAML files, narrows them with the
command-line filters, and provides a builder for assembling configs in code.
"""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from anki_validator.core.errors import ConfigurationError, FieldFilterError
from anki_validator.core.models import ValidationConfig
from anki_validator.core.validators import (
    BaseValidator,
    MustNotIncludeValidator,
    RequiredFieldValidator,
    RuleKind,
    ValueListValidator,
)
from anki_validator.observability.logger import get_logger

logger = get_logger(__name__)

YAML_SUFFIXES = {".yaml", ".yml"}


class ValidationConfigLoader:
    """
    Loads a validation config from a JSON or YAML file.

    Expected JSON format:
    ```json
    {
      "note_type": "Japanese Vocab",
      "field_validations": {
        "Expression": [{"type": "Required"}],
        "Part of Speech": [
          {"type": "Required"},
          {"type": "ValueList", "check": ["noun", "verb", "adjective"]}
        ],
        "Notes": [{"type": "MustNotInclude", "check": "TODO"}]
      }
    }
    ```

    "model_id" may be given instead of "note_type" to select the note type by id.
    The same structure is accepted as YAML for .yaml/.yml files.
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the config loader.

        Args:
            config_path: Path to the JSON or YAML configuration file
        """
        self.config_path = Path(config_path)

    def load(self) -> ValidationConfig:
        """
        Load and validate the configuration file.

        Returns:
            The parsed ValidationConfig

        Raises:
            ConfigurationError: If the file is missing, unreadable or invalid
        """
        raw = self._read_raw()
        if not isinstance(raw, dict):
            raise self._error("top level must be an object")

        try:
            config = ValidationConfig.model_validate(raw)
        except ValidationError as e:
            raise self._error(str(e)) from e

        logger.info(
            f"Loaded {config.rule_count()} rules for fields {config.field_names} "
            f"from {self.config_path}"
        )
        return config

    def _read_raw(self) -> Any:
        try:
            with open(self.config_path, encoding="utf-8") as f:
                if self.config_path.suffix.lower() in YAML_SUFFIXES:
                    return yaml.safe_load(f)
                return json.load(f)
        except OSError as e:
            raise self._error(e.strerror or str(e)) from e
        except (ValueError, yaml.YAMLError) as e:
            raise self._error(str(e)) from e

    def _error(self, reason: str) -> ConfigurationError:
        return ConfigurationError(f"Failed to read config file from '{self.config_path}': {reason}")


def apply_field_filter(config: ValidationConfig, fields: Iterable[str] | None) -> ValidationConfig:
    """
    Keep only the requested fields of a config.

    Args:
        config: The loaded config
        fields: Field names to keep; empty or None keeps every field

    Returns:
        A new config restricted to the requested fields

    Raises:
        FieldFilterError: If any requested field is not declared in the config,
            listing every such field
    """
    requested = list(dict.fromkeys(fields or []))
    if not requested:
        return config

    invalid_fields = [f for f in requested if f not in config.field_validations]
    if invalid_fields:
        raise FieldFilterError(invalid_fields)

    kept = {
        field_name: rules
        for field_name, rules in config.field_validations.items()
        if field_name in requested
    }
    logger.debug(f"Field filter kept {len(kept)} of {len(config.field_validations)} fields")
    return config.model_copy(update={"field_validations": kept})


def apply_validation_filter(
    config: ValidationConfig,
    validations: Iterable[RuleKind] | None,
) -> ValidationConfig:
    """
    Keep only the rules of the requested kinds.

    Fields whose rule list becomes empty stay in the config with no rules.

    Args:
        config: The (possibly field-filtered) config
        validations: Rule kinds to keep; empty or None keeps every rule

    Returns:
        A new config with the other rule kinds removed
    """
    kinds = {RuleKind(v) for v in validations or []}
    if not kinds:
        return config

    filtered = {
        field_name: tuple(rule for rule in rules if rule.rule_type in kinds)
        for field_name, rules in config.field_validations.items()
    }
    filtered_config = config.model_copy(update={"field_validations": filtered})
    logger.debug(
        f"Rule filter kept {filtered_config.rule_count()} of {config.rule_count()} rules, "
        f"kinds: {sorted(kind.value for kind in filtered_config.rule_kinds())}"
    )
    return filtered_config


def create_validation_config(
    config_path: str | Path,
    fields: Iterable[str] | None = None,
    validations: Iterable[RuleKind] | None = None,
) -> ValidationConfig:
    """Load a config file and apply the field filter, then the rule-kind filter."""
    config = ValidationConfigLoader(config_path).load()
    config = apply_field_filter(config, fields)
    return apply_validation_filter(config, validations)


class RuleConfigBuilder:
    """
    Programmatically build validation configs (for testing or generated rules).
    """

    def __init__(self):
        """Initialize an empty rule set."""
        self.field_validations: dict[str, list[BaseValidator]] = {}

    def add_rule(self, field_name: str, rule: BaseValidator) -> "RuleConfigBuilder":
        """Append a rule to a field's rule list."""
        self.field_validations.setdefault(field_name, []).append(rule)
        return self

    def add_field(self, field_name: str) -> "RuleConfigBuilder":
        """Declare a field without rules."""
        self.field_validations.setdefault(field_name, [])
        return self

    def add_required(self, field_name: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, RequiredFieldValidator())

    def add_value_list(self, field_name: str, values: Iterable[str]) -> "RuleConfigBuilder":
        return self.add_rule(field_name, ValueListValidator(check=tuple(values)))

    def add_must_not_include(self, field_name: str, value: str) -> "RuleConfigBuilder":
        return self.add_rule(field_name, MustNotIncludeValidator(check=value))

    def build(self, note_type: str | None = None, model_id: int | None = None) -> ValidationConfig:
        """Build the config for the given note type selector."""
        return ValidationConfig(
            note_type=note_type,
            model_id=model_id,
            field_validations={
                field_name: tuple(rules) for field_name, rules in self.field_validations.items()
            },
        )
