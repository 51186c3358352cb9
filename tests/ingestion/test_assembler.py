"""Tests for the positional record assembler."""

from datetime import date
from decimal import Decimal

import pytest

from fec_ingestion.domain.assembler import assemble_entry, coerce_fields
from fec_ingestion.domain.types import FEC_LAYOUT, FieldKind
from fec_kernel.exceptions import (
    InvalidAmountError,
    InvalidDateError,
    MissingRequiredFieldError,
)
from tests.fec_samples import make_line


def _cells(*overrides, width=18):
    return make_line(*overrides, width=width).split("\t")


class TestLayout:
    def test_eighteen_columns_in_order(self):
        assert len(FEC_LAYOUT) == 18
        assert [c.index for c in FEC_LAYOUT] == list(range(18))

    def test_wire_names_follow_standard_header(self):
        assert [c.wire_name for c in FEC_LAYOUT] == [
            "JournalCode", "JournalLib", "EcritureNum", "EcritureDate", "CompteNum", "CompteLib",
            "CompAuxNum", "CompAuxLib", "PieceRef", "PieceDate", "EcritureLib", "Debit", "Credit",
            "EcritureLet", "DateLet", "ValidDate", "Montantdevise", "Idevise",
        ]

    def test_column_fifteen_reserved(self):
        assert FEC_LAYOUT[15].kind is FieldKind.RESERVED
        assert FEC_LAYOUT[15].field is None


class TestAssembleEntry:
    def test_full_line(self):
        entry = assemble_entry(_cells((13, "L1"), (16, "10,5"), (17, "EUR")), 1)
        assert entry.journal_code == "VT"
        assert entry.ecriture_date == date(2024, 1, 1)
        assert entry.lettrage == "L1"
        assert entry.ecriture_lettrage == "L1"
        assert entry.montant_devise == Decimal("10.5")
        assert entry.devise == "EUR"

    def test_short_line_trailing_cells_absent(self):
        entry = assemble_entry(_cells(width=13), 1)
        assert entry.lettrage is None
        assert entry.date_lettrage is None
        assert entry.montant_devise is None
        assert entry.devise is None

    def test_reserved_column_ignored(self):
        entry = assemble_entry(_cells((15, "garbage")), 1)
        assert entry.devise is None

    def test_first_failure_left_to_right(self):
        # journal_libelle (col 1) fails before ecriture_date (col 3) and debit (col 11)
        cells = _cells((1, ""), (3, "bad"), (11, "x"))
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            assemble_entry(cells, 8)
        assert exc_info.value.field == "journal_libelle"
        assert exc_info.value.line == 8

    def test_date_before_amount(self):
        with pytest.raises(InvalidDateError) as exc_info:
            assemble_entry(_cells((9, "20241340"), (12, "x")), 2)
        assert exc_info.value.field == "piece_date"

    def test_amount_failure_tagged_with_field(self):
        with pytest.raises(InvalidAmountError) as exc_info:
            assemble_entry(_cells((12, "douze")), 6)
        assert exc_info.value.field == "credit"
        assert exc_info.value.line == 6

    def test_blank_amounts_are_zero(self):
        entry = assemble_entry(_cells((11, ""), (12, "")), 1)
        assert entry.debit == Decimal(0) and entry.credit == Decimal(0)

    def test_required_libelle(self):
        with pytest.raises(MissingRequiredFieldError) as exc_info:
            assemble_entry(_cells((10, "   ")), 1)
        assert exc_info.value.field == "libelle"


class TestCoerceFields:
    def test_text_values_converted(self):
        values = coerce_fields(
            {"ecriture_date": "20240105", "debit": "1 000,50", "ecriture_numero": "42", "libelle": " x "}
        )
        assert values == {
            "ecriture_date": date(2024, 1, 5),
            "debit": Decimal("1000.50"),
            "ecriture_numero": 42,
            "libelle": "x",
        }

    def test_typed_values_kept(self):
        values = coerce_fields({"piece_date": date(2024, 2, 1), "credit": Decimal("10.50"), "ecriture_numero": 7})
        assert values == {"piece_date": date(2024, 2, 1), "credit": Decimal("10.50"), "ecriture_numero": 7}

    def test_seven_digit_date_rejected(self):
        with pytest.raises(InvalidDateError) as exc_info:
            coerce_fields({"ecriture_date": "2024111"})
        assert exc_info.value.field == "ecriture_date"
        assert exc_info.value.line is None

    def test_non_finite_decimal_rejected(self):
        with pytest.raises(InvalidAmountError):
            coerce_fields({"debit": Decimal("NaN")})

    def test_blank_required_rejected(self):
        with pytest.raises(MissingRequiredFieldError):
            coerce_fields({"compte_numero": "  "})

    def test_unknown_field(self):
        with pytest.raises(ValueError, match="valid_date"):
            coerce_fields({"valid_date": "20240101"})
