"""Tests for the sample report."""

from abival.core.models import TypeTag
from abival.core.validator import Validator
from abival.samples import INVALID_SAMPLES, VALID_SAMPLES, run_samples


class TestSamples:
    """Test the built-in sample literals."""

    def test_every_type_has_a_valid_sample(self) -> None:
        """Each type tag should have a valid sample."""
        assert set(VALID_SAMPLES) == set(TypeTag)

    def test_large_integer_has_no_invalid_sample(self) -> None:
        """Invalid samples cover the fixed-shape types only."""
        assert TypeTag.LARGE_INTEGER not in INVALID_SAMPLES
        assert len(INVALID_SAMPLES) == len(TypeTag) - 1

    def test_all_samples_match_expectation(self) -> None:
        """Every sample should validate the way it is labelled."""
        outcomes = run_samples(Validator())

        assert len(outcomes) == len(VALID_SAMPLES) + len(INVALID_SAMPLES)
        for outcome in outcomes:
            assert outcome.matches_expectation, (
                f"{outcome.type_tag.value}={outcome.value!r} "
                f"expected valid={outcome.expected_valid}"
            )

    def test_valid_samples_come_first(self) -> None:
        """Outcomes list valid samples before invalid ones."""
        outcomes = run_samples(Validator())
        flags = [o.expected_valid for o in outcomes]

        assert flags == sorted(flags, reverse=True)

    def test_defaults_to_configured_validator(self) -> None:
        """Without an explicit validator, settings drive the policy."""
        outcomes = run_samples()

        assert all(o.matches_expectation for o in outcomes)
