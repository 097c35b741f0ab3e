"""
Tests for JSON formatter output.

Ensures flat output with:
- Display labels as keys
- Dates formatted as dd/mm/yyyy
- Optional expiry status
"""

import json
from datetime import date

import pytest
from gs1_scan import parse, parse_to_json, result_to_dict, result_to_json
from gs1_scan.formatters import format_date_ddmmyyyy, expiry_status


DATAMATRIX_SCAN = "]d2011234567890123417250101" "10ABC123+"


class TestDataMatrixOutput:
    """Test DataMatrix formatting."""

    def test_basic_json_output(self):
        data = json.loads(parse_to_json(DATAMATRIX_SCAN))

        assert data == {
            "GTIN": "12345678901234",
            "EXPIRY": "01/01/2025",
            "BATCH/LOT": "ABC123",
        }

    def test_production_date(self):
        data = result_to_dict(parse("]d21124060121SN1"))
        assert data["PROD DATE"] == "01/06/2024"
        assert data["SERIAL"] == "SN1"

    def test_unknown_ai_key(self):
        data = result_to_dict(parse("]d299XYZ"))
        assert data == {"AI(99)": "XYZ"}

    def test_repeated_ai(self):
        data = result_to_dict(parse("]d221A+21B+21C"))
        assert data["SERIAL"] == ["A", "B", "C"]

    def test_no_status_by_default(self):
        assert "Expiry Status" not in result_to_dict(parse(DATAMATRIX_SCAN))

    @pytest.mark.parametrize("today,expected", [
        (date(2024, 1, 1), "Valid"),
        (date(2024, 12, 1), "Near Expiry"),
        (date(2025, 1, 1), "Near Expiry"),
        (date(2025, 2, 1), "Expired"),
    ])
    def test_expiry_status(self, today, expected):
        data = result_to_dict(parse(DATAMATRIX_SCAN), near_expiry_months=6, today=today)
        assert data["Expiry Status"] == expected

    def test_json_is_unicode(self):
        output = result_to_json(parse("]Q1café"))
        assert "café" in output


class TestPlainOutput:
    """Test EAN, QR and unrecognised formatting."""

    def test_ean13(self):
        assert result_to_dict(parse("]E04006381333931")) == {
            "Type": "EAN-13",
            "Code": "4006381333931",
        }

    def test_qr(self):
        assert result_to_dict(parse("]Q1hello")) == {"Type": "QR", "Code": "hello"}

    def test_unknown(self):
        assert result_to_dict(parse("plain")) == {"Type": "Unknown", "Code": "plain"}


class TestDateHelpers:
    """Test date formatting helpers."""

    def test_format_date(self):
        assert format_date_ddmmyyyy("250101") == "01/01/2025"

    def test_unknown_day(self):
        assert format_date_ddmmyyyy("250200") == "XX/02/2025"

    def test_invalid_date_unchanged(self):
        assert format_date_ddmmyyyy("251301") == "251301"
        assert format_date_ddmmyyyy("2501") == "2501"

    def test_invalid_expiry_status(self):
        assert expiry_status("251301", 6) == "Unknown"

    def test_day_zero_expires_end_of_month(self):
        assert expiry_status("250200", 0, today=date(2025, 2, 28)) == "Near Expiry"
        assert expiry_status("250200", 0, today=date(2025, 3, 1)) == "Expired"
