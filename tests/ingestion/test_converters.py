"""Tests for FEC cell converters."""

from datetime import date
from decimal import Decimal

import pytest

from fec_ingestion.domain.converters import (
    amount,
    optional_amount,
    optional_date,
    optional_integer,
    optional_string,
    required_date,
    required_string,
)
from fec_kernel.exceptions import (
    InvalidAmountError,
    InvalidDateError,
    InvalidNumberError,
    MissingRequiredFieldError,
    ParseErrorKind,
)


class TestStrings:
    def test_required_string_trimmed(self):
        assert required_string("  VT ", "journal_code", 3) == "VT"

    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_required_string_missing(self, raw):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            required_string(raw, "journal_code", 3)
        err = exc_info.value
        assert err.kind is ParseErrorKind.MISSING_REQUIRED_FIELD
        assert err.line == 3 and err.field == "journal_code"

    @pytest.mark.parametrize("raw", ["", "  ", None])
    def test_optional_string_blank_is_none(self, raw):
        assert optional_string(raw, "tiers_numero") is None

    def test_optional_string_value(self):
        assert optional_string(" 401DUPONT ", "tiers_numero") == "401DUPONT"


class TestOptionalInteger:
    @pytest.mark.parametrize("raw", ["", "   ", None])
    def test_blank_is_none_not_zero(self, raw):
        assert optional_integer(raw, "ecriture_numero", 1) is None

    def test_plain(self):
        assert optional_integer("42", "ecriture_numero", 1) == 42

    def test_internal_whitespace_removed(self):
        assert optional_integer("1 234", "ecriture_numero", 1) == 1234

    @pytest.mark.parametrize("raw", ["ABC", "12abc", "1.5", "1,5"])
    def test_non_numeric(self, raw):
        with pytest.raises(InvalidNumberError) as exc_info:
            optional_integer(raw, "ecriture_numero", 7)
        assert exc_info.value.line == 7
        assert exc_info.value.field == "ecriture_numero"
        assert exc_info.value.value == raw


class TestAmount:
    def test_comma_decimal(self):
        assert amount("1000,50", "debit", 1) == Decimal("1000.5")

    def test_embedded_whitespace(self):
        assert amount("1 000,50", "debit", 1) == Decimal("1000.5")

    def test_no_break_space_thousands(self):
        assert amount("1\u00a0000,50", "debit", 1) == Decimal("1000.5")

    def test_dot_decimal(self):
        assert amount("12.34", "credit", 1) == Decimal("12.34")

    def test_integer(self):
        assert amount("1000", "debit", 1) == Decimal("1000")

    @pytest.mark.parametrize("raw", ["", "  ", None])
    def test_blank_is_zero(self, raw):
        result = amount(raw, "credit", 1)
        assert result == Decimal(0)
        assert isinstance(result, Decimal)

    def test_negative_accepted(self):
        assert amount("-5", "debit", 1) == Decimal("-5")

    @pytest.mark.parametrize("raw", ["abc", "12,34,56", "1.000,50", "NaN", "Infinity", "1e3"])
    def test_invalid(self, raw):
        with pytest.raises(InvalidAmountError) as exc_info:
            amount(raw, "debit", 4)
        assert exc_info.value.kind is ParseErrorKind.INVALID_AMOUNT
        assert exc_info.value.line == 4 and exc_info.value.field == "debit"

    def test_optional_amount_blank_is_none(self):
        assert optional_amount("", "montant_devise", 1) is None

    def test_optional_amount_value(self):
        assert optional_amount("250,75", "montant_devise", 1) == Decimal("250.75")


class TestDates:
    def test_valid(self):
        assert required_date("20240101", "ecriture_date", 1) == date(2024, 1, 1)

    def test_leap_day(self):
        assert required_date("20240229", "ecriture_date", 1) == date(2024, 2, 29)

    @pytest.mark.parametrize(
        "raw",
        ["2024-01-01", "240101", "202401011", "2024O101", "01/01/2024"],
    )
    def test_wrong_pattern(self, raw):
        with pytest.raises(InvalidDateError) as exc_info:
            required_date(raw, "ecriture_date", 2)
        assert exc_info.value.field == "ecriture_date"
        assert exc_info.value.line == 2

    @pytest.mark.parametrize("raw", ["20240230", "20230229", "20240431", "20241301", "20240100", "00000101"])
    def test_not_a_calendar_date(self, raw):
        with pytest.raises(InvalidDateError) as exc_info:
            required_date(raw, "ecriture_date", 2)
        assert exc_info.value.kind is ParseErrorKind.INVALID_DATE

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic digits match \d but are not YYYYMMDD
        with pytest.raises(InvalidDateError):
            required_date("٢٠٢٤٠١٠١", "ecriture_date", 1)

    def test_required_missing(self):
        with pytest.raises(MissingRequiredFieldError):
            required_date("", "ecriture_date", 1)

    def test_optional_blank_is_none(self):
        assert optional_date(None, "piece_date", 1) is None
        assert optional_date("  ", "piece_date", 1) is None

    def test_optional_invalid(self):
        with pytest.raises(InvalidDateError) as exc_info:
            optional_date("20240230", "date_lettrage", 9)
        assert exc_info.value.field == "date_lettrage"
