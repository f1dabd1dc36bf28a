"""Error handling implementation for the container bridge."""

import logging
from typing import Optional

from .types import (
    CodecError,
    ErrorHandlerInterface,
    ErrorResponse,
    ErrorType,
    ValidationError,
    ValidationResult,
)
from .utils.validation import ValidationUtils


class ErrorHandler(ErrorHandlerInterface):
    """
    Error handler for codec operations.

    Validates JSON input before it is decoded and turns codec failures into
    recovery suggestions for callers such as the command-line interface.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize the error handler.

        Args:
            logger: Optional logger instance for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def validate_input(self, input_data: str) -> ValidationResult:
        """
        Validate input JSON string.

        Args:
            input_data: JSON string to validate

        Returns:
            ValidationResult with validation details
        """
        try:
            return ValidationUtils.validate_json_string(input_data)
        except RecursionError as e:
            self.logger.error(f"Input nesting too deep to validate: {e}")
            return ValidationResult(
                is_valid=False,
                errors=[ValidationError(
                    type=ErrorType.STRUCTURE,
                    message="Input is nested too deeply to be decoded",
                    location="input"
                )],
                warnings=[]
            )

    def validate_numeral_base(self, radix: int) -> ValidationResult:
        """
        Validate a radix before it is used for integer leaves.

        Args:
            radix: Numeral base to validate

        Returns:
            ValidationResult with validation details
        """
        errors = []
        warnings = []

        if isinstance(radix, bool) or not isinstance(radix, int) or not 2 <= radix <= 36:
            errors.append(ValidationError(
                type=ErrorType.CONFIGURATION,
                message=f"Numeral base must be an integer between 2 and 36, got {radix!r}",
                location="numeral_base"
            ))
        elif radix != 10:
            warnings.append(f"Integers will be written as base-{radix} strings; "
                            "readers must use the same numeral base.")

        return ValidationResult(
            is_valid=len(errors) == 0,
            errors=errors,
            warnings=warnings
        )

    def handle_codec_error(self, error: CodecError) -> ErrorResponse:
        """
        Handle codec errors and provide recovery suggestions.

        Args:
            error: CodecError to handle

        Returns:
            ErrorResponse with recovery information
        """
        self.logger.error(f"Codec error: {error.error_type.value} - {error}")

        if error.error_type == ErrorType.UNREGISTERED_KIND:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Register a handler for the kind or tag before reading or writing "
                                 "(register_kind, register_all or CodecContext.register_type).",
                details=error.context
            )
        elif error.error_type == ErrorType.SHAPE_MISMATCH:
            return ErrorResponse(
                can_recover=False,
                suggested_action="The node does not match the requested kind. Read it as the kind "
                                 "it was written as, or pass matching element shapes.",
                details=error.context
            )
        elif error.error_type in (ErrorType.SYNTAX, ErrorType.STRUCTURE):
            return ErrorResponse(
                can_recover=False,
                suggested_action="Input is not a serialized container. Check that it is valid JSON "
                                 "with an array, tagged object or null at the root.",
                details=None
            )
        elif error.error_type == ErrorType.REGISTRATION:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Register handlers before freezing the context, or build a new "
                                 "context with with_config().",
                details=error.context
            )
        elif error.error_type == ErrorType.CONFIGURATION:
            return ErrorResponse(
                can_recover=True,
                suggested_action="Check the codec configuration and shape hints passed to this call.",
                details=error.context
            )
        else:
            return ErrorResponse(
                can_recover=False,
                suggested_action="Unknown error type. Please check logs and retry.",
                details=None
            )
