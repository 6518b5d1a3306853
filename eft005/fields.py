# =============================================================
# eft005/fields.py
# Field codec utilities: padding, truncation, Julian dates, names
# v1.0 | EFT 005 Codec
# =============================================================

from __future__ import annotations

import calendar
from datetime import date, timedelta
from typing import Tuple

from eft005.errors import BuildError, FieldParseError, NormalizationError
from eft005.normalize import normalize

EMPTY_DATE = "000000"


# -------------------------------------------------------------
# Decode helpers
# -------------------------------------------------------------
def slice_field(line: str, rng: Tuple[int, int]) -> str:
    return line[rng[0]:rng[1]]


def parse_num(raw: str, field: str) -> int:
    """Strict unsigned integer: ASCII digits only, no blanks, no sign."""
    if not raw or not (raw.isascii() and raw.isdigit()):
        raise FieldParseError(field, raw, "not a number")
    return int(raw)


def parse_date(raw: str, field: str) -> date | None:
    """
    Decode a 0YYDDD token. The year is anchored in the 2000s and DDD is the
    day of the year. An all-zero token means "no date".
    """
    if len(raw) != 6:
        raise FieldParseError(field, raw, "date string is not valid length")
    if raw == EMPTY_DATE:
        return None
    if not (raw.isascii() and raw.isdigit()):
        raise FieldParseError(field, raw, "date is not numeric")
    year = 2000 + int(raw[1:3])
    day_of_year = int(raw[3:])
    days_in_year = 366 if calendar.isleap(year) else 365
    if not 1 <= day_of_year <= days_in_year:
        raise FieldParseError(field, raw, f"day {day_of_year} out of range for {year}")
    return date(year, 1, 1) + timedelta(days=day_of_year - 1)


def is_filler(s: str) -> bool:
    return all(ch == " " for ch in s)


# -------------------------------------------------------------
# Encode helpers
# -------------------------------------------------------------
def filler(width: int) -> str:
    return " " * width


def encode_date(value: date) -> str:
    return f"0{value.year % 100:02d}{value.timetuple().tm_yday:03d}"


def encode_optional_date(value: date | None) -> str:
    return encode_date(value) if value is not None else EMPTY_DATE


def zero_padded(value: int, width: int, field: str) -> str:
    """12 -> '00012' for width 5. Values that do not fit are refused, never clipped."""
    if value < 0:
        raise BuildError(f"{field} cannot be negative: {value}", field)
    s = f"{value:0>{width}}"
    if len(s) > width:
        raise BuildError(f"{field} does not fit in {width} digits: {value}", field)
    return s


def pad_numeric(value: str, width: int, field: str) -> str:
    """Left pad a numeric string with zeros."""
    if len(value) > width:
        raise BuildError(f"{field} is longer than {width} characters: {value!r}", field)
    return value.rjust(width, "0")


def pad_trailing_zeros(value: str, width: int, field: str) -> str:
    if len(value) > width:
        raise BuildError(f"{field} is longer than {width} characters: {value!r}", field)
    return value.ljust(width, "0")


def abbreviate(value: str, width: int) -> str:
    """Alphanumeric field: truncated to width, blank padded to the right."""
    return value[:width].ljust(width)


def format_name(value: str, width: int, field: str) -> str:
    try:
        normal = normalize(value)
    except NormalizationError as e:
        raise BuildError(f"failed to format {field}: {e}", field) from e
    return abbreviate(normal, width)
