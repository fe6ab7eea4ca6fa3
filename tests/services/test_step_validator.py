# -*- coding: utf-8 -*-
"""
Tests for step validation rules.
"""

import pytest

from services.exceptions import MissingRequiredField, LengthExceeded, NegativeValue
from services.wizard.step_definitions import build_step_definitions
from services.wizard.step_validator import StepValidator


@pytest.fixture
def validator():
    return StepValidator()


def step(steps, number):
    return steps[number - 1]


class TestRequiredFields:
    """Test required-field checks."""

    def test_step1_valid(self, validator, steps):
        result = validator.validate(step(steps, 1), {"hashAlgorithm": "blake2b-256", "authors": "Alice"})
        assert result.is_valid is True
        assert result.first_failure is None
        assert result.errors == []

    def test_first_missing_field_reported(self, validator, steps):
        """Test only the first missing field (declared order) is reported."""
        result = validator.validate(step(steps, 1), {"hashAlgorithm": "", "authors": ""})

        assert result.is_valid is False
        assert isinstance(result.first_failure, MissingRequiredField)
        assert result.field == "hashAlgorithm"
        assert result.first_failure.step == 1

    def test_whitespace_only_is_missing(self, validator, steps):
        result = validator.validate(step(steps, 1), {"hashAlgorithm": "sha256", "authors": "  \n "})
        assert result.field == "authors"
        assert result.first_failure.kind == "MissingRequiredField"

    def test_subject_profile_requires_subject(self, validator):
        subject_steps = build_step_definitions("subject")
        result = validator.validate(subject_steps[0], {"subject": "", "authors": "Alice"})
        assert result.field == "subject"

    def test_optional_steps_always_valid(self, validator, steps):
        for number in (3, 5, 6):
            assert validator.validate(step(steps, number), {}).is_valid is True


class TestSummaryLength:
    """Test the 300 character summary limit."""

    def test_exactly_300_characters_valid(self, validator, steps):
        values = {"summary": "x" * 300, "rationaleStatement": "because"}
        assert validator.validate(step(steps, 2), values).is_valid is True

    def test_301_characters_fails(self, validator, steps):
        values = {"summary": "x" * 301, "rationaleStatement": "because"}
        result = validator.validate(step(steps, 2), values)

        assert result.is_valid is False
        assert isinstance(result.first_failure, LengthExceeded)
        assert result.first_failure.limit == 300
        assert result.first_failure.length == 301

    def test_required_checked_before_length(self, validator, steps):
        """Test constraints only apply once required fields pass."""
        values = {"summary": "x" * 400, "rationaleStatement": ""}
        result = validator.validate(step(steps, 2), values)
        assert isinstance(result.first_failure, MissingRequiredField)
        assert result.field == "rationaleStatement"


class TestVoteTallies:
    """Test non-negative tally constraint."""

    def test_negative_tally_fails(self, validator, steps):
        values = {"internal_constitutional_votes": "3", "internal_abstain_votes": "-1"}
        result = validator.validate(step(steps, 4), values)

        assert isinstance(result.first_failure, NegativeValue)
        assert result.field == "internal_abstain_votes"

    @pytest.mark.parametrize("raw", ["", "abc", "0", "12"])
    def test_empty_or_non_numeric_passes(self, validator, steps, raw):
        values = {"internal_did_not_vote": raw}
        assert validator.validate(step(steps, 4), values).is_valid is True


class TestReporting:
    """Test failure reporting channel and silent mode."""

    def test_failure_reported(self, steps):
        reported = []
        validator = StepValidator(on_failure=reported.append)

        validator.validate(step(steps, 1), {})

        assert len(reported) == 1
        assert reported[0].field == "hashAlgorithm"

    def test_silent_mode_same_result_no_report(self, steps):
        reported = []
        validator = StepValidator(on_failure=reported.append)

        loud = validator.validate(step(steps, 2), {"summary": "x" * 301, "rationaleStatement": "r"})
        silent = validator.validate(step(steps, 2), {"summary": "x" * 301, "rationaleStatement": "r"},
                                    silent=True)

        assert len(reported) == 1
        assert silent.is_valid == loud.is_valid
        assert type(silent.first_failure) is type(loud.first_failure)

    def test_success_not_reported(self, steps):
        reported = []
        validator = StepValidator(on_failure=reported.append)
        validator.validate(step(steps, 3), {})
        assert reported == []
