"""Utility functions for the container bridge."""

from .validation import ValidationUtils
from . import numeric

__all__ = ["ValidationUtils", "numeric"]
