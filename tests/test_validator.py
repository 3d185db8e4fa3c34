"""Tests for input validator module."""

import pytest

from src.calculator.validator import (
    EXCEEDS_LARGEST_KNOWN_MESSAGE,
    EXCEEDS_SUPPLY_MESSAGE,
    parse_amount,
)
from src.core.types import ValidationStatus


class TestParseAmount:
    """Tests for the amount parser."""

    def test_plain_numbers(self):
        assert parse_amount("1.5") == 1.5
        assert parse_amount("  2 ") == 2.0
        assert parse_amount(".5") == 0.5
        assert parse_amount("3.") == 3.0
        assert parse_amount("+4") == 4.0
        assert parse_amount("1e3") == 1000.0
        assert parse_amount("0") == 0.0

    def test_rejects_non_numbers(self):
        for text in ["abc", "1.5abc", "1,000", "-1", "-0.5", "nan", "inf", "Infinity", ".", "1..2"]:
            assert parse_amount(text) is None, f"'{text}' should not parse"


class TestInputValidator:
    """Tests for InputValidator class."""

    def test_empty_input(self, validator):
        for text in ["", "   ", "\t"]:
            outcome = validator.validate(text)
            assert outcome.status == ValidationStatus.EMPTY
            assert outcome.amount is None
            assert not outcome.is_computable
            assert not outcome.is_error

    def test_not_a_number_has_no_banner(self, validator):
        outcome = validator.validate("abc")

        assert outcome.status == ValidationStatus.NOT_A_NUMBER
        assert outcome.message is None
        assert not outcome.is_error
        assert not outcome.is_computable

    def test_negative_is_not_a_number(self, validator):
        assert validator.validate("-1").status == ValidationStatus.NOT_A_NUMBER

    def test_valid_amount(self, validator):
        outcome = validator.validate("1.5")

        assert outcome.status == ValidationStatus.VALID
        assert outcome.amount == 1.5
        assert outcome.message is None
        assert outcome.is_computable
        assert outcome.raw_text == "1.5"

    def test_largest_known_holding_is_valid(self, validator):
        outcome = validator.validate("1100000")
        assert outcome.status == ValidationStatus.VALID
        assert outcome.amount == 1_100_000

    @pytest.mark.parametrize("text", ["1100000.01", "1500000", "21000000"])
    def test_exceeds_largest_known(self, validator, text):
        outcome = validator.validate(text)

        assert outcome.status == ValidationStatus.EXCEEDS_LARGEST_KNOWN
        assert outcome.message == EXCEEDS_LARGEST_KNOWN_MESSAGE
        assert "1,100,000" in outcome.message
        # Advisory only - calculation still runs
        assert outcome.is_computable
        assert outcome.is_error

    def test_overflowing_amount_exceeds_supply(self, validator):
        outcome = validator.validate("1e999")

        assert outcome.status == ValidationStatus.EXCEEDS_SUPPLY
        assert outcome.amount is None
        assert "21,000,000" in outcome.message

    @pytest.mark.parametrize("text", ["21000001", "21000000.5", "1e9"])
    def test_exceeds_supply(self, validator, text):
        outcome = validator.validate(text)

        assert outcome.status == ValidationStatus.EXCEEDS_SUPPLY
        assert outcome.message == EXCEEDS_SUPPLY_MESSAGE
        assert "21,000,000" in outcome.message
        assert not outcome.is_computable
        assert outcome.is_error
