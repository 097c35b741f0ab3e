"""
Tests for check digit and EAN validation.
"""

import random

import pytest
from gs1_scan.validators import (
    calculate_check_digit_mod10,
    validate_check_digit,
    validate_date,
    is_valid_ean13,
    is_valid_ean14,
)


def _random_digits(rng: random.Random, count: int) -> str:
    return "".join(rng.choice("0123456789") for _ in range(count))


class TestCheckDigit:
    """Tests for Mod10 check digit calculation."""

    def test_mod10_ean13(self):
        """Known EAN-13 bodies."""
        assert calculate_check_digit_mod10("400638133393") == 1
        assert calculate_check_digit_mod10("590123412345") == 7

    def test_sum_multiple_of_ten_gives_zero(self):
        """Outer mod 10 maps a sum already divisible by 10 to 0."""
        assert calculate_check_digit_mod10("100000000003") == 0
        assert calculate_check_digit_mod10("000000000000") == 0

    def test_weights_start_at_one_from_the_left(self):
        """Index 0 has weight 1, index 1 weight 3, for any length."""
        assert calculate_check_digit_mod10("1") == 9
        assert calculate_check_digit_mod10("01") == 7
        assert calculate_check_digit_mod10("1234567890123") == 5

    def test_range_and_determinism(self):
        """Check digit is always 0-9 and depends only on the input."""
        rng = random.Random(1234)
        for _ in range(500):
            digits = _random_digits(rng, 12)
            first = calculate_check_digit_mod10(digits)
            assert 0 <= first <= 9
            assert calculate_check_digit_mod10(digits) == first

    def test_rejects_non_numeric(self):
        with pytest.raises(ValueError):
            calculate_check_digit_mod10("12345A")
        with pytest.raises(ValueError):
            calculate_check_digit_mod10("")

    def test_validate_check_digit_mismatch(self):
        result = validate_check_digit("4006381333932")
        assert not result.valid
        assert result.meta['calculated_check_digit'] == 1
        assert 'check digit mismatch' in result.errors[0].lower()

    def test_validate_check_digit_non_numeric(self):
        """A non-digit check position is a failed validation, not a crash."""
        result = validate_check_digit("400638133393X")
        assert not result.valid


class TestEan13:
    """Tests for EAN-13 scanner output validation."""

    def test_valid(self):
        assert is_valid_ean13("]E04006381333931")

    def test_generated_codes_are_valid(self):
        rng = random.Random(42)
        for _ in range(200):
            body = _random_digits(rng, 12)
            check = calculate_check_digit_mod10(body)
            assert is_valid_ean13(f"]E0{body}{check}")

    def test_tampered_check_digit(self):
        assert not is_valid_ean13("]E04006381333932")

    def test_missing_reader_prefix(self):
        assert not is_valid_ean13("4006381333931")
        assert not is_valid_ean13("]d24006381333931")

    def test_wrong_length(self):
        assert not is_valid_ean13("]E0400638133393")
        assert not is_valid_ean13("]E040063813339310")

    def test_non_numeric_check_position(self):
        assert not is_valid_ean13("]E0400638133393X")

    def test_non_numeric_body(self):
        assert not is_valid_ean13("]E0A006381333931")

    def test_empty(self):
        assert not is_valid_ean13("")


class TestEan14:
    """Tests for EAN-14 scanner output validation."""

    def test_valid(self):
        assert is_valid_ean14("]E012345678901235")

    def test_tampered_check_digit(self):
        assert not is_valid_ean14("]E012345678901234")

    def test_ean13_is_not_ean14(self):
        assert not is_valid_ean14("]E04006381333931")

    def test_missing_reader_prefix(self):
        assert not is_valid_ean14("12345678901235")


class TestDateValidation:
    """Tests for date validation."""

    def test_yymmdd_valid(self):
        result = validate_date("250101")
        assert result.valid
        assert result.meta['iso_date'] == "2025-01-01"
        assert result.meta['date_ddmmyyyy'] == "01/01/2025"

    def test_invalid_month(self):
        result = validate_date("251301")
        assert not result.valid
        assert 'month' in result.errors[0].lower()

    def test_invalid_day(self):
        result = validate_date("250231")
        assert not result.valid

    def test_yymmd0_day_zero(self):
        """Day 00 resolves to the last day of the month."""
        result = validate_date("240200", "YYMMD0")
        assert result.valid
        assert result.meta['day_unspecified']
        assert result.meta['day'] == 29

    def test_day_zero_rejected_for_yymmdd(self):
        assert not validate_date("240200", "YYMMDD").valid

    def test_century_pivot(self):
        assert validate_date("510101", century_pivot=51).meta['year'] == 1951
        assert validate_date("500101", century_pivot=51).meta['year'] == 2050

    def test_unsupported_format(self):
        with pytest.raises(ValueError):
            validate_date("20250101", "YYYYMMDD")
