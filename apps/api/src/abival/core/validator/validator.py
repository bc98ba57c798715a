"""
Validator - Literal checks for primitive on-chain value types.

Each check takes a candidate string and decides whether it is a valid
literal of one type:
1. Shape - the string matches the type's grammar in full
2. Range - fixed-width integers parse into their closed numeric range
3. Canonical form - uint16 must equal its own decimal re-rendering

Malformed input is an expected outcome, never an exception: every check
returns a ValidationResult carrying an INVALID_FORMAT error on rejection.
"""

import logging
import re
import sys
from dataclasses import dataclass
from typing import Any, Callable, Iterable

from abival.config import Settings, get_settings
from abival.core.models import FailureCode, TypeTag

logger = logging.getLogger(__name__)

UINT_PATTERN = re.compile(r"[0-9]+")
UINT16_PATTERN = re.compile(r"[0-9]{1,5}")
INT_PATTERN = re.compile(r"-?[0-9]+")
BOOL_PATTERN = re.compile(r"true|false")
ADDRESS_PATTERN = re.compile(r"0x[0-9a-fA-F]{40}")

UNSIGNED_SHAPE = "decimal digits only"
SIGNED_SHAPE = "a decimal integer"

# Big integer literals: optional sign, then a decimal or 0x-prefixed hex body
DECIMAL_INTEGER_PATTERN = re.compile(r"(-?)([0-9]+)")
HEX_INTEGER_PATTERN = re.compile(r"(-?)0[xX]([0-9a-fA-F]+)")


def match_pattern(value: Any, pattern: re.Pattern[str]) -> bool:
    """Check that value is a string matched in full by pattern."""
    return isinstance(value, str) and pattern.fullmatch(value) is not None


def parse_large_integer(
    value: str, allow_signed: bool = True, allow_hex: bool = True
) -> int:
    """
    Parse an arbitrary-precision integer literal.

    Args:
        value: Decimal digits, or a 0x/0X-prefixed hex body when allow_hex
        allow_signed: Accept a single leading "-"
        allow_hex: Accept hex literals

    Returns:
        The parsed integer

    Raises:
        ValueError: If the literal cannot be parsed under this policy
    """
    if not isinstance(value, str):
        raise ValueError(f"Expected a string, got: {type(value).__name__}")

    base = 10
    match = DECIMAL_INTEGER_PATTERN.fullmatch(value)
    if match is None and allow_hex:
        base = 16
        match = HEX_INTEGER_PATTERN.fullmatch(value)
    if match is None:
        raise ValueError("Not an integer literal")

    sign, digits = match.groups()
    if sign and not allow_signed:
        raise ValueError("Signed integers are not allowed")

    digits = digits.lstrip("0") or "0"
    number = int(digits, base) if base == 16 else _parse_decimal_digits(digits)
    return -number if sign else number


def _parse_decimal_digits(digits: str) -> int:
    """Parse ASCII decimal digits of any length."""
    limit = sys.get_int_max_str_digits()
    if not limit or len(digits) <= limit:
        return int(digits)

    # int() refuses decimal strings past the interpreter's digit limit
    number = 0
    for start in range(0, len(digits), limit):
        chunk = digits[start:start + limit]
        number = number * 10 ** len(chunk) + int(chunk)
    return number


def _parse_bounded_decimal(value: str, low: int, high: int) -> int | None:
    """Parse a shape-checked decimal string, or None if outside [low, high]."""
    sign = "-" if value.startswith("-") else ""
    digits = value.lstrip("-").lstrip("0") or "0"

    if len(digits) > len(str(max(-low, high))):
        return None

    number = int(sign + digits)
    if not low <= number <= high:
        return None
    return number


@dataclass
class ValidationError:
    """Why a candidate value was rejected."""

    type_tag: TypeTag
    message: str
    code: FailureCode = FailureCode.INVALID_FORMAT


@dataclass
class ValidationResult:
    """Result of validating one candidate value."""

    type_tag: TypeTag
    value: Any
    valid: bool
    error: ValidationError | None = None

    def __bool__(self) -> bool:
        return self.valid


class Validator:
    """
    Validate string literals against primitive on-chain types.

    Enforces:
    - Decimal shapes for uint/int families (no "+", ASCII digits only)
    - Closed numeric ranges for uint8, uint16, int8 and int16
    - Canonical decimal form for uint16
    - Exact "true"/"false" for bool
    - 0x plus 40 hex characters for address
    - Parseability for large integers
    """

    # Closed ranges for fixed-width integer types
    INTEGER_RANGES: dict[TypeTag, tuple[int, int]] = {
        TypeTag.UINT8: (0, 255),
        TypeTag.UINT16: (0, 65535),
        TypeTag.INT8: (-128, 127),
        TypeTag.INT16: (-32768, 32767),
    }

    def __init__(
        self,
        allow_signed_large_integers: bool = True,
        allow_hex_large_integers: bool = True,
    ) -> None:
        self.allow_signed_large_integers = allow_signed_large_integers
        self.allow_hex_large_integers = allow_hex_large_integers

        self._checks: dict[TypeTag, Callable[[Any], ValidationResult]] = {
            TypeTag.UINT: self.validate_uint,
            TypeTag.UINT8: self.validate_uint8,
            TypeTag.UINT16: self.validate_uint16,
            TypeTag.INT: self.validate_int,
            TypeTag.INT8: self.validate_int8,
            TypeTag.INT16: self.validate_int16,
            TypeTag.BOOL: self.validate_bool,
            TypeTag.ADDRESS: self.validate_address,
            TypeTag.LARGE_INTEGER: self.validate_large_integer,
        }

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "Validator":
        """Build a validator using the configured large integer policy."""
        settings = settings or get_settings()
        return cls(
            allow_signed_large_integers=settings.large_integer_allow_signed,
            allow_hex_large_integers=settings.large_integer_allow_hex,
        )

    def validate(self, type_tag: TypeTag | str, value: Any) -> ValidationResult:
        """
        Validate a candidate value against the named type.

        Args:
            type_tag: TypeTag or its string value, e.g. "uint8"
            value: Candidate string

        Returns:
            ValidationResult with an error if the value is rejected

        Raises:
            ValueError: If type_tag names no supported type
        """
        try:
            tag = TypeTag(type_tag)
        except ValueError:
            raise ValueError(
                f"Unknown type tag: {type_tag}. Allowed: {[t.value for t in TypeTag]}"
            ) from None

        return self._checks[tag](value)

    def validate_many(
        self, items: Iterable[tuple[TypeTag | str, Any]]
    ) -> list[ValidationResult]:
        """Validate (type_tag, value) pairs in order."""
        return [self.validate(type_tag, value) for type_tag, value in items]

    def validate_uint(self, value: Any) -> ValidationResult:
        """Unsigned decimal of any length; leading zeros allowed."""
        if not match_pattern(value, UINT_PATTERN):
            return self._invalid(TypeTag.UINT, value, "Expected one or more decimal digits")
        return self._valid(TypeTag.UINT, value)

    def validate_uint8(self, value: Any) -> ValidationResult:
        return self._validate_bounded(TypeTag.UINT8, value, UINT_PATTERN, UNSIGNED_SHAPE)

    def validate_uint16(self, value: Any) -> ValidationResult:
        """Unsigned 16-bit decimal in canonical form."""
        result = self._validate_bounded(
            TypeTag.UINT16, value, UINT16_PATTERN, "at most 5 decimal digits"
        )
        if not result.valid:
            return result

        canonical = str(int(value))
        if canonical != value:
            return self._invalid(
                TypeTag.UINT16,
                value,
                f"Non-canonical decimal form, expected: {canonical}",
            )
        return result

    def validate_int(self, value: Any) -> ValidationResult:
        """Signed decimal of any length; "-0" allowed."""
        if not match_pattern(value, INT_PATTERN):
            return self._invalid(
                TypeTag.INT, value, "Expected an optionally signed decimal integer"
            )
        return self._valid(TypeTag.INT, value)

    def validate_int8(self, value: Any) -> ValidationResult:
        return self._validate_bounded(TypeTag.INT8, value, INT_PATTERN, SIGNED_SHAPE)

    def validate_int16(self, value: Any) -> ValidationResult:
        return self._validate_bounded(TypeTag.INT16, value, INT_PATTERN, SIGNED_SHAPE)

    def validate_bool(self, value: Any) -> ValidationResult:
        """Case-sensitive "true" or "false"."""
        if not match_pattern(value, BOOL_PATTERN):
            return self._invalid(TypeTag.BOOL, value, 'Expected "true" or "false"')
        return self._valid(TypeTag.BOOL, value)

    def validate_address(self, value: Any) -> ValidationResult:
        """20-byte hex address; mixed case is accepted without checksum."""
        if not match_pattern(value, ADDRESS_PATTERN):
            return self._invalid(
                TypeTag.ADDRESS, value, "Expected 0x followed by 40 hex characters"
            )
        return self._valid(TypeTag.ADDRESS, value)

    def validate_large_integer(self, value: Any) -> ValidationResult:
        """Any integer literal the big integer parser accepts."""
        try:
            parse_large_integer(
                value,
                allow_signed=self.allow_signed_large_integers,
                allow_hex=self.allow_hex_large_integers,
            )
        except ValueError as e:
            return self._invalid(TypeTag.LARGE_INTEGER, value, f"Unparseable integer: {e}")
        return self._valid(TypeTag.LARGE_INTEGER, value)

    def _validate_bounded(
        self, type_tag: TypeTag, value: Any, pattern: re.Pattern[str], shape: str
    ) -> ValidationResult:
        """Shape-match, parse, then range-check a fixed-width integer."""
        if not match_pattern(value, pattern):
            return self._invalid(type_tag, value, f"Expected {shape}")

        low, high = self.INTEGER_RANGES[type_tag]
        if _parse_bounded_decimal(value, low, high) is None:
            return self._invalid(
                type_tag, value, f"Value must be between {low} and {high}, got: {value}"
            )
        return self._valid(type_tag, value)

    def _valid(self, type_tag: TypeTag, value: Any) -> ValidationResult:
        return ValidationResult(type_tag=type_tag, value=value, valid=True)

    def _invalid(self, type_tag: TypeTag, value: Any, message: str) -> ValidationResult:
        logger.debug(f"Rejected {type_tag.value} value: {message}")
        return ValidationResult(
            type_tag=type_tag,
            value=value,
            valid=False,
            error=ValidationError(type_tag=type_tag, message=message),
        )
