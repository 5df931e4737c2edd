"""Issue codes reported by benchreg.kernel.validator.

Callers should compare against these members instead of raw strings.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Per-field validation outcome codes."""

    # A required field is absent from the raw record
    MISSING_FIELD = "MISSING_FIELD"
    # Value present but not of the declared primitive type (no coercion)
    TYPE_MISMATCH = "TYPE_MISMATCH"
    # String value not in the declared enum's allowed set
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"

    # Strict mode only: key present in the record but not declared
    UNKNOWN_FIELD = "UNKNOWN_FIELD"
