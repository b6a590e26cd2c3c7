"""
Unit tests for config loading and the command-line filters.
"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from anki_validator.core.errors import ConfigurationError, FieldFilterError
from anki_validator.core.models import ValidationConfig
from anki_validator.core.rules import (
    RuleConfigBuilder,
    ValidationConfigLoader,
    apply_field_filter,
    apply_validation_filter,
    create_validation_config,
)
from anki_validator.core.validators import (
    MustNotIncludeValidator,
    RequiredFieldValidator,
    RuleKind,
    ValueListValidator,
)

YAML_CONFIG = """
note_type: Basic
field_validations:
  Front:
    - type: Required
  Back:
    - type: Required
    - type: MustNotInclude
      check: TODO
  Tags:
    - type: ValueList
      check: [grammar, vocab]
"""


def _type_tag_config() -> ValidationConfig:
    return (
        RuleConfigBuilder()
        .add_required("Type")
        .add_value_list("Tag", ["a", "b"])
        .build(note_type="Basic")
    )


class TestValidationConfigLoader:
    """Tests for ValidationConfigLoader"""

    def test_load_json(self, write_config, basic_config_data):
        config = ValidationConfigLoader(write_config(basic_config_data)).load()

        assert config.note_type == "Basic"
        assert config.field_names == ["Front", "Back", "Tags"]

    def test_load_yaml_matches_json(self, tmp_path, write_config, basic_config_data):
        yaml_path = tmp_path / "config.yaml"
        yaml_path.write_text(YAML_CONFIG, encoding="utf-8")

        from_yaml = ValidationConfigLoader(yaml_path).load()
        from_json = ValidationConfigLoader(write_config(basic_config_data)).load()

        assert from_yaml == from_json

    def test_missing_file(self, tmp_path):
        path = tmp_path / "nope.json"
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationConfigLoader(path).load()
        assert f"Failed to read config file from '{path}'" in str(exc_info.value)

    def test_malformed_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text('{"note_type": "Basic",', encoding="utf-8")
        with pytest.raises(ConfigurationError):
            ValidationConfigLoader(path).load()

    def test_non_object_top_level(self, write_config):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationConfigLoader(write_config(["Basic"])).load()
        assert "object" in str(exc_info.value)

    def test_invalid_rule_reported_as_configuration_error(self, write_config):
        data = {"note_type": "Basic", "field_validations": {"Front": [{"type": "ValueList"}]}}
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationConfigLoader(write_config(data)).load()
        assert "Front" in str(exc_info.value)

    @pytest.mark.parametrize(
        "data",
        [
            {"note_type": "Basic"},
            {"note_type": "Basic", "field_validation": {"Front": [{"type": "Required"}]}},
        ],
        ids=["missing", "misspelled"],
    )
    def test_config_without_field_validations_rejected(self, write_config, data):
        with pytest.raises(ConfigurationError) as exc_info:
            ValidationConfigLoader(write_config(data)).load()
        assert "field_validation" in str(exc_info.value)


class TestFieldFilter:
    """Tests for apply_field_filter"""

    def test_keeps_only_requested_fields(self):
        filtered = apply_field_filter(_type_tag_config(), ["Type"])
        assert filtered.field_names == ["Type"]
        assert filtered.field_validations["Type"] == (RequiredFieldValidator(),)

    def test_unknown_field_rejected(self):
        with pytest.raises(FieldFilterError) as exc_info:
            apply_field_filter(_type_tag_config(), ["Missing"])
        assert "'Missing'" in str(exc_info.value)

    def test_all_unknown_fields_listed(self):
        with pytest.raises(FieldFilterError) as exc_info:
            apply_field_filter(_type_tag_config(), ["Type", "Missing", "Other"])

        assert exc_info.value.invalid_fields == ["Missing", "Other"]
        assert str(exc_info.value) == (
            "The fields filter must specify fields from the config: 'Missing', 'Other'"
        )

    def test_empty_filter_is_noop(self):
        config = _type_tag_config()
        assert apply_field_filter(config, []) is config
        assert apply_field_filter(config, None) is config

    def test_does_not_mutate_input(self):
        config = _type_tag_config()
        apply_field_filter(config, ["Tag"])
        assert config.field_names == ["Type", "Tag"]

    def test_keeps_config_order(self):
        filtered = apply_field_filter(_type_tag_config(), ["Tag", "Type"])
        assert filtered.field_names == ["Type", "Tag"]

    @given(st.lists(st.sampled_from(["Type", "Tag"]), max_size=3))
    def test_property_idempotent(self, fields):
        """Property test: filtering twice with the same fields equals filtering once"""
        once = apply_field_filter(_type_tag_config(), fields)
        twice = apply_field_filter(once, fields)
        assert twice == once


class TestValidationFilter:
    """Tests for apply_validation_filter"""

    def _config(self) -> ValidationConfig:
        return (
            RuleConfigBuilder()
            .add_required("Front")
            .add_must_not_include("Front", "TODO")
            .add_required("Back")
            .add_value_list("Tags", ["x"])
            .build(note_type="Basic")
        )

    def test_keeps_only_selected_kinds_in_order(self):
        filtered = apply_validation_filter(
            self._config(), [RuleKind.MUST_NOT_INCLUDE, RuleKind.REQUIRED]
        )
        assert filtered.field_validations["Front"] == (
            RequiredFieldValidator(),
            MustNotIncludeValidator(check="TODO"),
        )
        assert filtered.field_validations["Tags"] == ()

    def test_fields_with_no_remaining_rules_are_kept(self):
        filtered = apply_validation_filter(self._config(), [RuleKind.VALUE_LIST])
        assert filtered.field_names == ["Front", "Back", "Tags"]
        assert filtered.field_validations["Front"] == ()
        assert filtered.field_validations["Tags"] == (ValueListValidator(check=("x",)),)

    def test_accepts_kind_names(self):
        filtered = apply_validation_filter(self._config(), ["Required"])
        assert filtered.rule_count() == 2

    def test_empty_filter_is_noop(self):
        config = self._config()
        assert apply_validation_filter(config, []) is config


class TestCreateValidationConfig:
    """Tests for create_validation_config"""

    def test_applies_field_then_rule_filter(self, write_config, basic_config_data):
        config = create_validation_config(
            write_config(basic_config_data),
            fields=["Back", "Tags"],
            validations=[RuleKind.MUST_NOT_INCLUDE],
        )
        assert config.field_names == ["Back", "Tags"]
        assert config.field_validations["Back"] == (MustNotIncludeValidator(check="TODO"),)
        assert config.field_validations["Tags"] == ()

    def test_field_filter_error_propagates(self, write_config, basic_config_data):
        with pytest.raises(FieldFilterError):
            create_validation_config(write_config(basic_config_data), fields=["Extra"])


class TestRuleConfigBuilder:
    """Tests for RuleConfigBuilder"""

    def test_build_by_model_id(self):
        config = RuleConfigBuilder().add_field("Front").build(model_id=42)
        assert config.model_id == 42
        assert config.field_validations == {"Front": ()}
