"""
Tests for JSON Schema Contract Validators

Covers:
- Validity of the bundled schema
- Payloads produced by convert_number (valid and invalid)
- Detection of required-field, type and consistency violations
- Loader error paths
"""

from pathlib import Path

import pytest
from jsonschema import Draft202012Validator, ValidationError

from numconv import convert_number
from numconv.core.contracts import (
    ConversionResultValidator,
    SchemaLoader,
    validate_conversion_result,
)


# =============================================================================
# FIXTURES
# =============================================================================


@pytest.fixture
def valid_payload():
    """Payload of an accepted conversion."""
    return convert_number("-1A.F", "hexadecimal", "binary").to_payload()


@pytest.fixture
def rejected_payload():
    """Payload of a rejected conversion."""
    return convert_number("8", "octal", "binary").to_payload()


# =============================================================================
# SCHEMA
# =============================================================================


class TestSchemaLoader:
    """SchemaLoader"""

    def test_schema_is_valid_draft_2020_12(self) -> None:
        schema = SchemaLoader().load_schema("conversion_result")
        Draft202012Validator.check_schema(schema)

    def test_schema_cached(self) -> None:
        loader = SchemaLoader()
        assert loader.load_schema("conversion_result") is loader.load_schema("conversion_result")

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError, match="Schema not found"):
            SchemaLoader().load_schema("market_state")

    def test_missing_directory(self, tmp_path: Path) -> None:
        with pytest.raises(RuntimeError, match="Schema directory not found"):
            SchemaLoader(tmp_path / "absent")

    def test_invalid_schema_file(self, tmp_path: Path) -> None:
        (tmp_path / "broken.json").write_text('{"type": 12}', encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(tmp_path).load_schema("broken")


# =============================================================================
# PAYLOADS FROM THE CONVERTER
# =============================================================================


class TestConverterPayloads:
    """Everything convert_number returns satisfies the contract"""

    @pytest.mark.parametrize(
        "literal,source,target",
        [
            ("11", "decimal", "binary"),
            ("-1a.f", "hexadecimal", "decimal"),
            ("157.24", "octal", "hexadecimal"),
            ("5.0", "decimal", "octal"),
            ("0.1", "decimal", "hexadecimal"),
            ("", "decimal", "binary"),
            ("G", "hexadecimal", "decimal"),
            ("f" * 300, "hexadecimal", "decimal"),
            ("10", "ternary", "binary"),
        ],
    )
    def test_payload_valid(self, literal: str, source: str, target: str) -> None:
        validate_conversion_result(convert_number(literal, source, target).to_payload())

    def test_validator_class(self, valid_payload, rejected_payload) -> None:
        validator = ConversionResultValidator()
        assert validator.is_valid(valid_payload)
        assert validator.is_valid(rejected_payload)


# =============================================================================
# VIOLATIONS
# =============================================================================


class TestViolations:
    """Malformed payloads are detected"""

    def test_missing_required_field(self, valid_payload) -> None:
        del valid_payload["steps"]
        with pytest.raises(ValidationError, match="'steps' is a required property"):
            validate_conversion_result(valid_payload)

    def test_wrong_type(self, valid_payload) -> None:
        valid_payload["is_valid"] = "yes"
        with pytest.raises(ValidationError):
            validate_conversion_result(valid_payload)

    def test_lowercase_letters_rejected(self, valid_payload) -> None:
        valid_payload["result"] = "ff"
        with pytest.raises(ValidationError):
            validate_conversion_result(valid_payload)

    def test_unknown_outcome(self, rejected_payload) -> None:
        rejected_payload["outcome"] = "MAYBE"
        with pytest.raises(ValidationError):
            validate_conversion_result(rejected_payload)

    def test_invalid_with_steps(self, valid_payload, rejected_payload) -> None:
        rejected_payload["steps"] = valid_payload["steps"]
        with pytest.raises(ValidationError):
            validate_conversion_result(rejected_payload)

    def test_valid_with_error(self, valid_payload) -> None:
        valid_payload["error"] = "boom"
        with pytest.raises(ValidationError):
            validate_conversion_result(valid_payload)

    def test_extra_property(self, valid_payload) -> None:
        valid_payload["base"] = 2
        with pytest.raises(ValidationError):
            validate_conversion_result(valid_payload)

    def test_iter_errors_reports_all(self, valid_payload) -> None:
        del valid_payload["steps"]
        valid_payload["is_valid"] = "yes"
        errors = list(ConversionResultValidator().iter_errors(valid_payload))
        assert len(errors) >= 2
