"""Core domain types for ABIVAL.

These enums are the whole vocabulary of the library:
- Type tags naming which validator to run
- The single failure code a validator can report
"""

from enum import Enum


class TypeTag(str, Enum):
    """Supported value types. Hard fail on unknown."""

    UINT = "uint"
    UINT8 = "uint8"
    UINT16 = "uint16"
    INT = "int"
    INT8 = "int8"
    INT16 = "int16"
    BOOL = "bool"
    ADDRESS = "address"
    LARGE_INTEGER = "large_integer"


class FailureCode(str, Enum):
    """Reasons a candidate value can be rejected."""

    INVALID_FORMAT = "INVALID_FORMAT"  # Bad shape or out of range
