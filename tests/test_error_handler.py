"""Tests for error handler."""

import logging
import pytest

from container_bridge.error_handler import ErrorHandler
from container_bridge.types import (
    CodecError,
    ErrorType,
    ShapeMismatchError,
    UnregisteredKindError,
)


class TestErrorHandler:
    """Tests for ErrorHandler class."""

    def setup_method(self):
        """Set up test fixtures."""
        self.error_handler = ErrorHandler()

    def test_validate_input_valid_json(self):
        """Test validation of valid JSON input."""
        result = self.error_handler.validate_input('["a", 1, {"class": "jL", "value": []}]')

        assert result.is_valid
        assert len(result.errors) == 0

    def test_validate_input_invalid_json(self):
        """Test validation of invalid JSON input."""
        result = self.error_handler.validate_input('["a", 1')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.SYNTAX

    def test_validate_input_scalar_root(self):
        result = self.error_handler.validate_input('"just text"')

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.STRUCTURE

    @pytest.mark.parametrize("radix", [2, 10, 16, 36])
    def test_validate_numeral_base_valid(self, radix):
        assert self.error_handler.validate_numeral_base(radix).is_valid

    @pytest.mark.parametrize("radix", [0, 1, 37, True, "16"])
    def test_validate_numeral_base_invalid(self, radix):
        result = self.error_handler.validate_numeral_base(radix)

        assert not result.is_valid
        assert result.errors[0].type == ErrorType.CONFIGURATION

    def test_validate_numeral_base_warns_on_non_decimal(self):
        assert self.error_handler.validate_numeral_base(16).warnings
        assert not self.error_handler.validate_numeral_base(10).warnings

    def test_handle_unregistered_kind(self):
        """Test handling of unregistered kind errors."""
        error = UnregisteredKindError("No handler", context={"kind": "ObjectList"})

        response = self.error_handler.handle_codec_error(error)

        assert response.can_recover
        assert "register" in response.suggested_action.lower()
        assert response.details == {"kind": "ObjectList"}

    def test_handle_shape_mismatch(self):
        """Test handling of shape mismatch errors."""
        response = self.error_handler.handle_codec_error(ShapeMismatchError("Expected array"))

        assert not response.can_recover
        assert "kind" in response.suggested_action.lower()

    def test_handle_syntax_error(self):
        """Test handling of syntax errors."""
        response = self.error_handler.handle_codec_error(CodecError("Bad JSON", ErrorType.SYNTAX))

        assert not response.can_recover
        assert "json" in response.suggested_action.lower()

    def test_handle_registration_error(self):
        response = self.error_handler.handle_codec_error(CodecError("Frozen", ErrorType.REGISTRATION))

        assert response.can_recover
        assert "freez" in response.suggested_action.lower()

    def test_handle_configuration_error(self):
        response = self.error_handler.handle_codec_error(CodecError("Bad hint", ErrorType.CONFIGURATION))

        assert response.can_recover
        assert "configuration" in response.suggested_action.lower()

    def test_errors_are_logged(self, caplog):
        with caplog.at_level(logging.ERROR):
            self.error_handler.handle_codec_error(ShapeMismatchError("Expected array"))

        assert "shape-mismatch" in caplog.text
