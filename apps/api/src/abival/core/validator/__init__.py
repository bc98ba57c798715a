"""Validator - Shape, range and canonical-form checks per type tag."""

from abival.core.validator.validator import (
    ValidationError,
    ValidationResult,
    Validator,
    match_pattern,
    parse_large_integer,
)

__all__ = [
    "ValidationError",
    "ValidationResult",
    "Validator",
    "match_pattern",
    "parse_large_integer",
]
