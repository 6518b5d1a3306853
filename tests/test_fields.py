from datetime import date

import pytest

from eft005.errors import BuildError, FieldParseError, NormalizationError
from eft005.fields import (
    abbreviate,
    encode_date,
    encode_optional_date,
    format_name,
    is_filler,
    pad_numeric,
    pad_trailing_zeros,
    parse_date,
    parse_num,
    zero_padded,
)
from eft005.normalize import normalize


# =============================================================================
# Normalization
# =============================================================================

class TestNormalize:
    @pytest.mark.parametrize("raw,expected", [
        ("Álfréd", "Alfred"),
        ("śhôrt-ñàmè", "short-name"),
        ("LÖŃG-Ñämė", "LONG-Name"),
        ("plain ascii 123", "plain ascii 123"),
        ("", ""),
    ])
    def test_strips_diacritics(self, raw, expected):
        assert normalize(raw) == expected

    @pytest.mark.parametrize("raw", ["Иван Петров", "東京", "नमस्ते"])
    def test_non_latin_scripts_fail(self, raw):
        with pytest.raises(NormalizationError):
            normalize(raw)


# =============================================================================
# Dates
# =============================================================================

class TestDates:
    def test_encode(self):
        assert encode_date(date(2023, 8, 29)) == "023241"

    def test_encode_pads_year_and_day(self):
        assert encode_date(date(2023, 1, 5)) == "023005"
        assert encode_date(date(2005, 1, 1)) == "005001"

    def test_decode(self):
        assert parse_date("023241", "due_date") == date(2023, 8, 29)
        assert parse_date("023137", "due_date") == date(2023, 5, 17)

    def test_decode_day_of_year(self):
        decoded = parse_date("031241", "due_date")
        assert decoded.timetuple().tm_yday == 241

    def test_round_trip(self):
        for d in (date(2023, 8, 29), date(2024, 12, 31), date(2000, 1, 1)):
            assert parse_date(encode_date(d), "d") == d

    def test_zero_date_is_absent(self):
        assert parse_date("000000", "due_date") is None
        assert encode_optional_date(None) == "000000"

    @pytest.mark.parametrize("raw", ["02324", "0232411", "0aa241", "023000", "023366", "      "])
    def test_invalid(self, raw):
        with pytest.raises(FieldParseError) as exc:
            parse_date(raw, "due_date")
        assert exc.value.field == "due_date"

    def test_leap_year_last_day(self):
        assert parse_date("024366", "d") == date(2024, 12, 31)


# =============================================================================
# Numbers and text
# =============================================================================

class TestNumbers:
    def test_parse_num(self):
        assert parse_num("0000004042", "amount") == 4042

    @pytest.mark.parametrize("raw", ["", "   ", "12a", "-12", "+12", " 12"])
    def test_parse_num_rejects(self, raw):
        with pytest.raises(FieldParseError) as exc:
            parse_num(raw, "amount")
        assert exc.value.field == "amount"
        assert "amount" in str(exc.value)

    def test_zero_padded(self):
        assert zero_padded(12, 5, "n") == "00012"
        assert zero_padded(0, 10, "amount") == "0000000000"

    def test_zero_padded_overflow(self):
        with pytest.raises(BuildError) as exc:
            zero_padded(123456, 5, "destination_data_center")
        assert exc.value.field == "destination_data_center"

    def test_zero_padded_negative(self):
        with pytest.raises(BuildError):
            zero_padded(-1, 5, "n")

    def test_pad_numeric(self):
        assert pad_numeric("123", 9, "institution_id") == "000000123"
        assert pad_numeric("", 3, "txn_type") == "000"
        with pytest.raises(BuildError):
            pad_numeric("1234567890", 9, "institution_id")

    def test_pad_trailing_zeros(self):
        assert pad_trailing_zeros("905", 11, "invalid_data_element_id") == "90500000000"
        assert pad_trailing_zeros("", 11, "invalid_data_element_id") == "0" * 11


class TestText:
    def test_abbreviate_pads(self):
        assert abbreviate("abc", 6) == "abc   "

    def test_abbreviate_truncates(self):
        assert abbreviate("THIS IS TOO LONG", 7) == "THIS IS"

    def test_is_filler(self):
        assert is_filler(" " * 240)
        assert is_filler("")
        assert not is_filler("   0  ")

    def test_format_name(self):
        assert format_name("réçëîvér ńámê", 15, "name") == "receiver name  "

    def test_format_name_wraps_normalization_error(self):
        with pytest.raises(BuildError) as exc:
            format_name("Иван", 30, "payor name")
        assert isinstance(exc.value.__cause__, NormalizationError)
        assert exc.value.field == "payor name"
