"""Tests for domain/exceptions."""

import pytest

from ngreflect.domain.exceptions import (
    ConfigurationError,
    NgReflectError,
    NotSupportedError,
    ParsingError,
    UnknownEmitFormatError,
)
from ngreflect.domain.model.enums import EmitFormat
from ngreflect.domain.model.location import Span


class TestHierarchy:
    """All domain errors share one root."""

    @pytest.mark.parametrize(
        "error",
        [
            ParsingError("a.js", "syntax error"),
            NotSupportedError("op", EmitFormat.WRAPPED_FUNCTIONS, "reason"),
            UnknownEmitFormatError("main"),
            ConfigurationError("field", "reason"),
        ],
    )
    def test_is_ngreflect_error(self, error: Exception) -> None:
        assert isinstance(error, NgReflectError)


class TestParsingError:
    """Tests for ParsingError."""

    def test_message_without_span(self) -> None:
        error = ParsingError("a.js", "file not found")
        assert str(error) == "Failed to parse a.js: file not found"
        assert error.span is None

    def test_message_with_span(self) -> None:
        error = ParsingError("a.js", "syntax error", Span(start=4, end=5, line=2, column=3))
        assert str(error) == "Failed to parse a.js:2:3: syntax error"

    def test_none_path_raises(self) -> None:
        with pytest.raises(TypeError, match="path must not be None"):
            ParsingError(None, "reason")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason must be non-empty"):
            ParsingError("a.js", "")


class TestNotSupportedError:
    """Tests for NotSupportedError."""

    def test_message(self) -> None:
        error = NotSupportedError("get_class_decorators", EmitFormat.WRAPPED_FUNCTIONS, "no")
        assert str(error) == "get_class_decorators is not supported for WRAPPED_FUNCTIONS: no"

    def test_attributes(self) -> None:
        error = NotSupportedError("op", EmitFormat.STATIC_PROPERTIES, "why")
        assert error.operation == "op"
        assert error.emit_format is EmitFormat.STATIC_PROPERTIES
        assert error.reason == "why"

    def test_empty_operation_raises(self) -> None:
        with pytest.raises(ValueError, match="operation must not be empty"):
            NotSupportedError("", EmitFormat.STATIC_PROPERTIES, "why")


class TestUnknownEmitFormatError:
    """Tests for UnknownEmitFormatError."""

    def test_message(self) -> None:
        error = UnknownEmitFormatError("main")
        assert str(error) == "Unknown emit format for entry point 'main'"
        assert error.property_name == "main"


class TestConfigurationError:
    """Tests for ConfigurationError."""

    def test_message(self) -> None:
        error = ConfigurationError("class_name_pattern", "must not be empty")
        assert str(error) == "Invalid configuration 'class_name_pattern': must not be empty"

    def test_empty_field_raises(self) -> None:
        with pytest.raises(ValueError, match="field must not be empty"):
            ConfigurationError("", "reason")
