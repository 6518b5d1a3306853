from datetime import date

import pytest

from eft005 import FileFooter, FileHeader, InvalidRecordLengthError, RecordValidationError
from eft005.constants import MAX_LINE_LENGTH
from eft005.errors import FieldParseError, UnrecognizedRecordTypeError
from samples import FOOTER_LINE, HEADER_LINE


# =============================================================================
# File header
# =============================================================================

class TestFileHeader:
    def test_parse(self):
        header = FileHeader.parse(HEADER_LINE)
        assert header.record_type == "A"
        assert header.record_count == 1
        assert header.originator_id == "0000000610"
        assert header.file_creation_number == 1
        assert header.creation_date == date(2023, 5, 18)
        assert header.destination_data_center == 61210
        assert header.communication_area == "hello"
        assert header.currency_code == "CAD"
        header.validate()

    def test_build(self, header):
        header.record_count = 1
        out = header.build()
        assert len(out) == MAX_LINE_LENGTH
        assert out[:58] == HEADER_LINE
        assert out[58:].strip() == ""

    def test_round_trip(self):
        line = HEADER_LINE.ljust(MAX_LINE_LENGTH)
        assert FileHeader.parse(line).build() == line

    def test_short_line(self):
        with pytest.raises(InvalidRecordLengthError):
            FileHeader.parse("C123")
        with pytest.raises(InvalidRecordLengthError):
            FileHeader.parse(HEADER_LINE[:-1])

    def test_wrong_record_type(self):
        with pytest.raises(UnrecognizedRecordTypeError):
            FileHeader.parse("C" + HEADER_LINE[1:])

    def test_unknown_record_type(self):
        with pytest.raises(UnrecognizedRecordTypeError) as exc:
            FileHeader.parse("Q" + HEADER_LINE[1:])
        assert exc.value.record_type == "Q"

    def test_blank_creation_date(self):
        line = HEADER_LINE[:24] + "      " + HEADER_LINE[30:]
        with pytest.raises(FieldParseError) as exc:
            FileHeader.parse(line)
        assert exc.value.field == "creation_date"

    def test_zero_creation_date_fails_validation(self):
        header = FileHeader.parse(HEADER_LINE[:24] + "000000" + HEADER_LINE[30:])
        assert header.creation_date is None
        with pytest.raises(RecordValidationError) as exc:
            header.validate()
        assert exc.value.fields == ["creation_date"]

    def test_invalid_currency_and_creation_number(self):
        header = FileHeader.parse("A0000000010000000610000002313861210                    AAA")
        with pytest.raises(RecordValidationError) as exc:
            header.validate()
        assert set(exc.value.fields) == {"file_creation_number", "currency_code"}

    def test_missing_originator(self):
        header = FileHeader.parse("A000000001          000102313861210                    CAD")
        with pytest.raises(RecordValidationError) as exc:
            header.validate()
        assert set(exc.value.fields) == {"originator_id"}

    def test_communication_area_is_optional(self, header):
        header.model_copy(update={"communication_area": ""}).validate()


# =============================================================================
# File footer
# =============================================================================

class TestFileFooter:
    def test_parse(self):
        footer = FileFooter.parse(FOOTER_LINE)
        assert footer.record_type == "Z"
        assert footer.record_count == 4
        assert footer.originator_id == "0000000610"
        assert footer.file_creation_number == 1
        assert footer.total_value_debit == 20165
        assert footer.total_count_debit == 5
        assert footer.total_value_credit == 72220
        assert footer.total_count_credit == 6
        assert footer.total_value_credit_reversal == 0
        assert footer.total_count_debit_reversal == 0

    def test_blank_reversal_totals_read_as_zero(self):
        legacy = FOOTER_LINE[:68] + " " * 44
        footer = FileFooter.parse(legacy)
        assert footer.total_value_credit_reversal == 0
        assert footer.total_count_credit_reversal == 0
        assert footer.total_value_debit_reversal == 0
        assert footer.total_count_debit_reversal == 0

    def test_blank_required_totals_fail(self):
        with pytest.raises(FieldParseError) as exc:
            FileFooter.parse(FOOTER_LINE[:24] + " " * 14 + FOOTER_LINE[38:])
        assert exc.value.field == "total_value_debit"

    def test_short_line(self):
        with pytest.raises(InvalidRecordLengthError):
            FileFooter.parse(FOOTER_LINE[:111])

    def test_notice_of_change_type_is_unrecognized(self):
        with pytest.raises(UnrecognizedRecordTypeError):
            FileFooter.parse("V" + FOOTER_LINE[1:])

    def test_build(self):
        footer = FileFooter.parse(FOOTER_LINE)
        out = footer.build()
        assert len(out) == MAX_LINE_LENGTH
        assert out[:112] == FOOTER_LINE
        assert out[112:] == " " * 1352

    def test_from_transactions(self, all_transactions):
        footer = FileFooter.from_transactions(all_transactions, "0000000610", 1, record_count=8)
        # D 12345 + J 125, C 999 + I 250, E 500, F 700
        assert footer.total_value_debit == 12470
        assert footer.total_count_debit == 2
        assert footer.total_value_credit == 1249
        assert footer.total_count_credit == 2
        assert footer.total_value_credit_reversal == 500
        assert footer.total_count_credit_reversal == 1
        assert footer.total_value_debit_reversal == 700
        assert footer.total_count_debit_reversal == 1
        assert footer.record_count == 8
        assert footer.record_type == "Z"

    def test_from_no_transactions(self):
        footer = FileFooter.from_transactions([])
        assert set(footer.totals().values()) == {0}
