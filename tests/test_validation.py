"""Tests for validation utilities."""

from container_bridge.utils.validation import MAX_RECOMMENDED_DEPTH, ValidationUtils
from container_bridge.types import ErrorType


class TestValidationUtils:
    """Tests for ValidationUtils class."""

    def test_validate_valid_array(self):
        """Test validation of a serialized sequence."""
        result = ValidationUtils.validate_json_string('["a", "b", 3]')

        assert result.is_valid
        assert len(result.errors) == 0
        assert len(result.warnings) == 0

    def test_validate_null_root(self):
        assert ValidationUtils.validate_json_string("null").is_valid

    def test_validate_object_root(self):
        assert ValidationUtils.validate_json_string('{"class": "jL", "value": []}').is_valid

    def test_validate_empty_json(self):
        """Test validation of empty JSON string."""
        result = ValidationUtils.validate_json_string("   ")

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "empty" in result.errors[0].message.lower()

    def test_validate_invalid_json_syntax(self):
        """Test validation of invalid JSON syntax."""
        result = ValidationUtils.validate_json_string('["a", ')

        assert not result.is_valid
        assert len(result.errors) == 1
        assert result.errors[0].type == ErrorType.SYNTAX
        assert "syntax" in result.errors[0].message.lower()
        assert "line 1" in result.errors[0].location

    def test_validate_unsupported_root_type(self):
        """Test validation of scalar root values."""
        for text in ('"text"', "42", "true"):
            result = ValidationUtils.validate_json_string(text)

            assert not result.is_valid
            assert result.errors[0].type == ErrorType.STRUCTURE
            assert result.errors[0].location == "root"

    def test_deep_nesting_warning(self):
        depth = MAX_RECOMMENDED_DEPTH + 5
        result = ValidationUtils.validate_json_string("[" * depth + "]" * depth)

        assert result.is_valid
        assert len(result.warnings) == 1
        assert "deep nesting" in result.warnings[0].lower()

    def test_shared_subtree_is_not_circular(self):
        shared = ["x"]

        errors, warnings = ValidationUtils.validate_node_tree([shared, shared])

        assert errors == []
        assert warnings == []
