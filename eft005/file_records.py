# =============================================================
# eft005/file_records.py
# File header (A) and file footer (Z) lines
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# Footer categories:
#   debit            D + J
#   credit           C + I
#   credit reversal  E
#   debit reversal   F
# =============================================================

from __future__ import annotations

import logging
from datetime import date
from typing import Dict, Iterable, Optional, Tuple

from pydantic import Field

from eft005.constants import (
    FOOTER_FILLER_LENGTH,
    FOOTER_MIN_LENGTH,
    HEADER_FILLER_LENGTH,
    HEADER_MIN_LENGTH,
    RecordType,
)
from eft005.errors import InvalidRecordLengthError, UnrecognizedRecordTypeError
from eft005.fields import (
    abbreviate,
    encode_optional_date,
    filler,
    is_filler,
    parse_date,
    parse_num,
    slice_field,
    zero_padded,
)
from eft005.record_header import RecordHeader
from eft005.rules import FileHeaderRules
from eft005.validator import validate_record

logger = logging.getLogger("eft005.file_records")

# -------------------------------------------------------------
# Layouts (0-based slices)
# -------------------------------------------------------------
HEADER_LAYOUT = {
    "creation_date": (24, 30),
    "destination_data_center": (30, 35),
    "communication_area": (35, 55),
    "currency_code": (55, 58),
}

VALUE_WIDTH = 14
COUNT_WIDTH = 8

# (field, slice, optional) in line order
FOOTER_LAYOUT: Tuple[Tuple[str, Tuple[int, int], bool], ...] = (
    ("total_value_debit", (24, 38), False),
    ("total_count_debit", (38, 46), False),
    ("total_value_credit", (46, 60), False),
    ("total_count_credit", (60, 68), False),
    ("total_value_credit_reversal", (68, 82), True),
    ("total_count_credit_reversal", (82, 90), True),
    ("total_value_debit_reversal", (90, 104), True),
    ("total_count_debit_reversal", (104, 112), True),
)

FOOTER_CATEGORIES: Dict[RecordType, str] = {
    RecordType.DEBIT: "debit",
    RecordType.DEBIT_RETURN: "debit",
    RecordType.CREDIT: "credit",
    RecordType.CREDIT_RETURN: "credit",
    RecordType.CREDIT_REVERSE: "credit_reversal",
    RecordType.DEBIT_REVERSE: "debit_reversal",
}


def _expect_type(fields: dict, expected: RecordType) -> None:
    if fields["record_type"] != expected.value:
        raise UnrecognizedRecordTypeError(
            fields["record_type"], f"expected record type {expected.value}, got {fields['record_type']!r}"
        )


# -------------------------------------------------------------
# Header
# -------------------------------------------------------------
class FileHeader(RecordHeader):
    record_type: str = Field(RecordType.HEADER.value, alias="type")
    creation_date: Optional[date] = None
    destination_data_center: int = 0
    communication_area: str = ""
    currency_code: str = ""

    RULES = FileHeaderRules

    @classmethod
    def parse(cls, line: str) -> "FileHeader":
        if len(line) < HEADER_MIN_LENGTH:
            raise InvalidRecordLengthError(
                f"file header requires at least {HEADER_MIN_LENGTH} characters, got {len(line)}"
            )
        fields = RecordHeader.parse_fields(line)
        _expect_type(fields, RecordType.HEADER)
        fields.update(
            creation_date=parse_date(slice_field(line, HEADER_LAYOUT["creation_date"]), "creation_date"),
            destination_data_center=parse_num(
                slice_field(line, HEADER_LAYOUT["destination_data_center"]), "destination_data_center"
            ),
            communication_area=slice_field(line, HEADER_LAYOUT["communication_area"]).strip(),
            currency_code=slice_field(line, HEADER_LAYOUT["currency_code"]).strip(),
        )
        return cls(**fields)

    def build(self) -> str:
        return (
            self.build_record_header()
            + encode_optional_date(self.creation_date)
            + zero_padded(self.destination_data_center, 5, "destination_data_center")
            + abbreviate(self.communication_area, 20)
            + abbreviate(self.currency_code, 3)
            + filler(HEADER_FILLER_LENGTH)
        )

    def validate(self) -> None:  # type: ignore[override]
        validate_record(self, self.RULES, "file header")


# -------------------------------------------------------------
# Footer
# -------------------------------------------------------------
class FileFooter(RecordHeader):
    record_type: str = Field(RecordType.FOOTER.value, alias="type")
    total_value_debit: int = Field(0)
    total_count_debit: int = Field(0)
    total_value_credit: int = Field(0)
    total_count_credit: int = Field(0)
    total_value_credit_reversal: int = Field(0)
    total_count_credit_reversal: int = Field(0)
    total_value_debit_reversal: int = Field(0)
    total_count_debit_reversal: int = Field(0)

    @classmethod
    def parse(cls, line: str) -> "FileFooter":
        """
        The reversal totals are optional: legacy files leave them blank,
        which reads as zero.
        """
        if len(line) < FOOTER_MIN_LENGTH:
            raise InvalidRecordLengthError(
                f"file footer requires at least {FOOTER_MIN_LENGTH} characters, got {len(line)}"
            )
        fields = RecordHeader.parse_fields(line)
        _expect_type(fields, RecordType.FOOTER)
        for name, rng, optional in FOOTER_LAYOUT:
            raw = slice_field(line, rng)
            if optional and is_filler(raw):
                fields[name] = 0
            else:
                fields[name] = parse_num(raw, name)
        return cls(**fields)

    def build(self) -> str:
        out = self.build_record_header()
        for name, (start, end), _optional in FOOTER_LAYOUT:
            out += zero_padded(getattr(self, name), end - start, name)
        return out + filler(FOOTER_FILLER_LENGTH)

    def totals(self) -> Dict[str, int]:
        return {name: getattr(self, name) for name, _rng, _optional in FOOTER_LAYOUT}

    @classmethod
    def from_transactions(
        cls,
        transactions: Iterable,
        originator_id: str = "",
        file_creation_number: int = 0,
        record_count: int = 0,
    ) -> "FileFooter":
        totals = {name: 0 for name, _rng, _optional in FOOTER_LAYOUT}
        for txn in transactions:
            category = FOOTER_CATEGORIES.get(txn.get_type())
            if category is None:
                continue
            totals[f"total_value_{category}"] += txn.get_amount()
            totals[f"total_count_{category}"] += 1
        logger.debug("aggregated footer totals %s", totals)
        return cls(
            originator_id=originator_id,
            file_creation_number=file_creation_number,
            record_count=record_count,
            **totals,
        )
