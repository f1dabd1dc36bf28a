"""Validation utilities for serialized node trees."""

import json
from typing import Any, List, Tuple

from ..types import ErrorType, ValidationError, ValidationResult

MAX_RECOMMENDED_DEPTH = 32


class ValidationUtils:
    """Utility class for validating JSON text and node trees before decoding."""

    @staticmethod
    def validate_json_string(json_string: str) -> ValidationResult:
        """
        Validate JSON string syntax and root shape.

        Args:
            json_string: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if not isinstance(json_string, str) or not json_string.strip():
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message="JSON string is empty",
                location="input"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            errors.append(ValidationError(
                type=ErrorType.SYNTAX,
                message=f"Invalid JSON syntax: {e.msg}",
                location=f"line {e.lineno}, column {e.colno}"
            ))
            return ValidationResult(is_valid=False, errors=errors, warnings=warnings)

        node_errors, node_warnings = ValidationUtils.validate_node_tree(data)
        errors.extend(node_errors)
        warnings.extend(node_warnings)

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    @staticmethod
    def validate_node_tree(node: Any) -> Tuple[List[ValidationError], List[str]]:
        """
        Validate the root of a node tree.

        A container node is an array, a tagged object, or null.
        """
        errors = []
        warnings = []

        if node is not None and not isinstance(node, (dict, list)):
            errors.append(ValidationError(
                type=ErrorType.STRUCTURE,
                message=f"Root element must be an array, object or null, got {type(node).__name__}",
                location="root"
            ))
            return errors, warnings

        max_depth = ValidationUtils._calculate_max_depth(node)
        if max_depth > MAX_RECOMMENDED_DEPTH:
            warnings.append(f"Deep nesting detected (depth: {max_depth}). "
                            "Reading will recurse once per level.")

        return errors, warnings

    @staticmethod
    def _calculate_max_depth(data: Any, current_depth: int = 0) -> int:
        if not isinstance(data, (dict, list)):
            return current_depth

        children = data.values() if isinstance(data, dict) else data
        max_child_depth = current_depth
        for child in children:
            max_child_depth = max(max_child_depth,
                                  ValidationUtils._calculate_max_depth(child, current_depth + 1))
        return max_child_depth
