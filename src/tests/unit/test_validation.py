"""Unit tests for tool name and description validation."""

from unittest.mock import Mock

import pytest
from questionary import ValidationError as PromptValidationError

from toolbox.generator.errors import GeneratorError, ValidationError
from toolbox.generator.validation import (
    EMPTY_DESCRIPTION_MESSAGE,
    EMPTY_NAME_MESSAGE,
    INVALID_NAME_MESSAGE,
    DescriptionValidator,
    ToolNameValidator,
    is_valid_tool_name,
    validate_description,
    validate_tool_name,
)


@pytest.mark.unit
class TestToolNameValidation:
    """Test the tool name slug rules."""

    @pytest.mark.parametrize("name", ["file-hasher", "sys99", "a", "9", "-", "json-formatter-2"])
    def test_accepts_slugs(self, name: str) -> None:
        assert is_valid_tool_name(name)
        assert validate_tool_name(name) == name

    @pytest.mark.parametrize(
        "name",
        ["FileHasher", "file hasher", "file_hasher", "tool!", "café", "ab/cd"],
    )
    def test_rejects_non_slugs(self, name: str) -> None:
        assert not is_valid_tool_name(name)
        with pytest.raises(ValidationError) as exc_info:
            validate_tool_name(name)
        assert str(exc_info.value) == INVALID_NAME_MESSAGE
        assert exc_info.value.field == "name"

    @pytest.mark.parametrize("name", ["", "   ", "\t"])
    def test_rejects_empty(self, name: str) -> None:
        with pytest.raises(ValidationError, match=EMPTY_NAME_MESSAGE):
            validate_tool_name(name)

    def test_trims_surrounding_whitespace(self) -> None:
        assert validate_tool_name("  pinger \t") == "pinger"

    def test_trailing_newline_is_rejected_by_check(self) -> None:
        """fullmatch keeps "$" from accepting a trailing newline."""
        assert not is_valid_tool_name("pinger\n")

    def test_validation_error_is_generator_error(self) -> None:
        with pytest.raises(GeneratorError):
            validate_tool_name("")


@pytest.mark.unit
class TestDescriptionValidation:
    """Test description normalization."""

    def test_collapses_whitespace(self) -> None:
        assert validate_description("  Pings\n a   host ") == "Pings a host"

    @pytest.mark.parametrize("description", ["", "   ", "\n\t"])
    def test_rejects_blank(self, description: str) -> None:
        with pytest.raises(ValidationError, match=EMPTY_DESCRIPTION_MESSAGE):
            validate_description(description)

    def test_keeps_punctuation_and_unicode(self) -> None:
        text = 'Says "hi" & [waves] at the café'
        assert validate_description(text) == text


@pytest.mark.unit
class TestPromptValidators:
    """Test the questionary validators used by the generate command."""

    def test_name_validator_accepts_slug(self) -> None:
        ToolNameValidator().validate(Mock(text="pinger"))

    def test_name_validator_rejects_invalid(self) -> None:
        with pytest.raises(PromptValidationError):
            ToolNameValidator().validate(Mock(text="My Tool!"))

    def test_description_validator_rejects_blank(self) -> None:
        with pytest.raises(PromptValidationError):
            DescriptionValidator().validate(Mock(text="  "))

    def test_description_validator_accepts_text(self) -> None:
        DescriptionValidator().validate(Mock(text="Pings a host"))
