"""
Sample report - fixed literals replayed through the validators.

One valid sample per type tag, and one invalid sample for every tag with
a meaningful bad case. Used by the /api/samples endpoint as a smoke check.
"""

from dataclasses import dataclass

from abival.core.models import TypeTag
from abival.core.validator import ValidationResult, Validator

# 2**256 - 1, the largest uint256
MAX_UINT256 = "115792089237316195423570985008687907853269984665640564039457584007913129639935"

VALID_SAMPLES: dict[TypeTag, str] = {
    TypeTag.UINT: "1234",
    TypeTag.UINT8: "255",
    TypeTag.UINT16: "42000",
    TypeTag.INT: "-543",
    TypeTag.INT8: "-42",
    TypeTag.INT16: "12345",
    TypeTag.BOOL: "false",
    TypeTag.ADDRESS: "0x0123456789012345678901234567890123456789",
    TypeTag.LARGE_INTEGER: MAX_UINT256,
}

INVALID_SAMPLES: dict[TypeTag, str] = {
    TypeTag.UINT: "123a",  # Non-numeric character
    TypeTag.UINT8: "256",  # Above 255
    TypeTag.UINT16: "65536",  # Above 65535
    TypeTag.INT: "-543a",  # Non-numeric character
    TypeTag.INT8: "-129",  # Below -128
    TypeTag.INT16: "32768",  # Above 32767
    TypeTag.BOOL: "True",  # Wrong case
    TypeTag.ADDRESS: "0x123",  # Too short
}


@dataclass
class SampleOutcome:
    """A sample literal, what it should do, and what it did."""

    type_tag: TypeTag
    value: str
    expected_valid: bool
    result: ValidationResult

    @property
    def matches_expectation(self) -> bool:
        return self.result.valid == self.expected_valid


def run_samples(validator: Validator | None = None) -> list[SampleOutcome]:
    """
    Validate every sample literal.

    Args:
        validator: Validator to use; defaults to one built from settings

    Returns:
        Outcomes for the valid samples followed by the invalid ones
    """
    validator = validator or Validator.from_settings()

    outcomes: list[SampleOutcome] = []
    for samples, expected_valid in ((VALID_SAMPLES, True), (INVALID_SAMPLES, False)):
        for type_tag, value in samples.items():
            outcomes.append(
                SampleOutcome(
                    type_tag=type_tag,
                    value=value,
                    expected_valid=expected_valid,
                    result=validator.validate(type_tag, value),
                )
            )
    return outcomes
