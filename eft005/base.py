# =============================================================
# eft005/base.py
# Fields and 240 character segment layout shared by D, C, E, F, I, J
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# The six transaction records share one layout. They differ in
#   - which date they carry (due date / date funds available),
#   - payor vs payee account and name,
#   - return vs original institution / account at 169-190,
#   - whether 205-227 holds the original item trace number or filler,
#   - whether 229-240 holds the invalid data element id.
# Each variant declares that mapping through the ClassVars below.
# =============================================================

from __future__ import annotations

import logging
from datetime import date
from typing import Any, ClassVar, Dict, Optional, Type

from pydantic import BaseModel, ConfigDict, Field

from eft005.constants import MAX_AMOUNT, SEGMENT_LENGTH, RecordType
from eft005.errors import BuildError, InvalidRecordLengthError
from eft005.fields import (
    abbreviate,
    encode_optional_date,
    filler,
    format_name,
    pad_numeric,
    pad_trailing_zeros,
    parse_date,
    parse_num,
    slice_field,
    zero_padded,
)
from eft005.rules import TxnRules
from eft005.validator import validate_record

logger = logging.getLogger("eft005.base")

# -------------------------------------------------------------
# Segment layout (0-based slices)
# -------------------------------------------------------------
SEGMENT_LAYOUT = {
    "txn_type": (0, 3),
    "amount": (3, 13),
    "date": (13, 19),
    "institution_id": (19, 28),
    "account_no": (28, 40),
    "item_trace_no": (40, 62),
    "stored_txn_type": (62, 65),
    "short_name": (65, 80),
    "name": (80, 110),
    "long_name": (110, 140),
    "user_id": (140, 150),
    "cross_ref_no": (150, 169),
    "party_institution_id": (169, 178),
    "party_account_no": (178, 190),
    "sundry_info": (190, 205),
    "original_item_trace_no": (205, 227),
    "settlement_code": (227, 229),
    "invalid_data_element_id": (229, 240),
}


def _width(key: str) -> int:
    start, end = SEGMENT_LAYOUT[key]
    return end - start


class BaseTxn(BaseModel):
    """Fields common to every transaction record."""

    model_config = ConfigDict(populate_by_name=True)

    txn_type: str = ""
    amount: int = 0
    item_trace_no: str = ""
    institution_id: str = ""
    stored_txn_type: str = "000"
    short_name: str = ""
    long_name: str = ""
    user_id: str = ""
    cross_ref_no: str = ""
    sundry_info: str = ""
    settlement_code: str = ""
    invalid_data_element_id: str = ""
    record_type: str = Field("", alias="type")

    # variant mapping, see module header
    RECORD_TYPE: ClassVar[RecordType]
    DATE_FIELD: ClassVar[str]
    ACCOUNT_FIELD: ClassVar[str]
    NAME_FIELD: ClassVar[str]
    RETURN_FIELDS: ClassVar[Optional[tuple]] = None
    ORIGINAL_FIELDS: ClassVar[Optional[tuple]] = None
    ORIGINAL_TRACE_FIELD: ClassVar[Optional[str]] = None
    RULES: ClassVar[Type[BaseModel]] = TxnRules

    # ---------------------------------------------------------
    # Decode
    # ---------------------------------------------------------
    @classmethod
    def parse(cls, segment: str) -> "BaseTxn":
        """Decode exactly one 240 character segment into this variant."""
        if len(segment) != SEGMENT_LENGTH:
            raise InvalidRecordLengthError()

        def text(key: str) -> str:
            return slice_field(segment, SEGMENT_LAYOUT[key]).strip()

        party_institution, party_account = cls._party_fields()
        values: Dict[str, Any] = {
            "txn_type": slice_field(segment, SEGMENT_LAYOUT["txn_type"]),
            "amount": parse_num(slice_field(segment, SEGMENT_LAYOUT["amount"]), "amount"),
            cls.DATE_FIELD: parse_date(slice_field(segment, SEGMENT_LAYOUT["date"]), cls.DATE_FIELD),
            "institution_id": slice_field(segment, SEGMENT_LAYOUT["institution_id"]),
            cls.ACCOUNT_FIELD: text("account_no"),
            "item_trace_no": slice_field(segment, SEGMENT_LAYOUT["item_trace_no"]),
            "stored_txn_type": slice_field(segment, SEGMENT_LAYOUT["stored_txn_type"]),
            "short_name": text("short_name"),
            cls.NAME_FIELD: text("name"),
            "long_name": text("long_name"),
            "user_id": text("user_id"),
            "cross_ref_no": text("cross_ref_no"),
            party_institution: text("party_institution_id"),
            party_account: text("party_account_no"),
            "sundry_info": text("sundry_info"),
            "settlement_code": text("settlement_code"),
        }
        if cls.ORIGINAL_TRACE_FIELD:
            values[cls.ORIGINAL_TRACE_FIELD] = text("original_item_trace_no")
            values["invalid_data_element_id"] = text("invalid_data_element_id")
        return cls(**values)

    # ---------------------------------------------------------
    # Encode
    # ---------------------------------------------------------
    def build(self) -> str:
        """
        Serialize into a 240 character segment. Numeric fields are padded
        with zeros on the left, alphanumeric fields with blanks on the
        right, names are normalized to ASCII first.
        """
        party_institution, party_account = self._party_fields()
        if self.amount > MAX_AMOUNT:
            raise BuildError(f"amount does not fit in 10 digits: {self.amount}", "amount")

        parts = [
            pad_numeric(self.txn_type, _width("txn_type"), "txn_type"),
            zero_padded(self.amount, _width("amount"), "amount"),
            encode_optional_date(self.get_date()),
            pad_numeric(self.institution_id, _width("institution_id"), "institution_id"),
            abbreviate(self.get_account_no(), _width("account_no")),
            pad_numeric(self.item_trace_no, _width("item_trace_no"), "item_trace_no"),
            pad_numeric(self.stored_txn_type, _width("stored_txn_type"), "stored_txn_type"),
            format_name(self.short_name, _width("short_name"), "originator short name"),
            format_name(self.get_name(), _width("name"), self.NAME_FIELD.replace("_", " ")),
            format_name(self.long_name, _width("long_name"), "originator long name"),
            abbreviate(self.user_id, _width("user_id")),
            abbreviate(self.cross_ref_no, _width("cross_ref_no")),
            pad_numeric(getattr(self, party_institution), _width("party_institution_id"), party_institution),
            abbreviate(getattr(self, party_account), _width("party_account_no")),
            abbreviate(self.sundry_info, _width("sundry_info")),
        ]
        if self.ORIGINAL_TRACE_FIELD:
            parts.append(
                pad_numeric(
                    getattr(self, self.ORIGINAL_TRACE_FIELD),
                    _width("original_item_trace_no"),
                    self.ORIGINAL_TRACE_FIELD,
                )
            )
        else:
            parts.append(filler(_width("original_item_trace_no")))
        parts.append(abbreviate(self.settlement_code, _width("settlement_code")))
        if self.ORIGINAL_TRACE_FIELD:
            parts.append(
                pad_trailing_zeros(
                    self.invalid_data_element_id,
                    _width("invalid_data_element_id"),
                    "invalid_data_element_id",
                )
            )
        else:
            parts.append("0" * _width("invalid_data_element_id"))

        segment = "".join(parts)
        logger.debug("built %s segment item_trace_no=%s", self.RECORD_TYPE.value, self.item_trace_no)
        return segment

    def validate(self) -> None:  # type: ignore[override]
        validate_record(self, self.RULES, f"{type(self).__name__} ({self.RECORD_TYPE.value})")

    # ---------------------------------------------------------
    # Accessors shared by all variants
    # ---------------------------------------------------------
    @classmethod
    def _party_fields(cls) -> tuple:
        return cls.RETURN_FIELDS or cls.ORIGINAL_FIELDS

    def get_type(self) -> RecordType:
        return self.RECORD_TYPE

    def get_amount(self) -> int:
        return self.amount

    def get_base_txn(self) -> "BaseTxn":
        return BaseTxn.model_construct(**{name: getattr(self, name) for name in BaseTxn.model_fields})

    def get_account_no(self) -> str:
        return getattr(self, self.ACCOUNT_FIELD)

    def get_date(self) -> date | None:
        return getattr(self, self.DATE_FIELD)

    def get_name(self) -> str:
        return getattr(self, self.NAME_FIELD)

    def get_return_institution_id(self) -> str:
        return getattr(self, self.RETURN_FIELDS[0]) if self.RETURN_FIELDS else ""

    def get_return_account_no(self) -> str:
        return getattr(self, self.RETURN_FIELDS[1]) if self.RETURN_FIELDS else ""

    def get_original_institution_id(self) -> str:
        return getattr(self, self.ORIGINAL_FIELDS[0]) if self.ORIGINAL_FIELDS else ""

    def get_original_account_no(self) -> str:
        return getattr(self, self.ORIGINAL_FIELDS[1]) if self.ORIGINAL_FIELDS else ""

    def get_original_item_trace_no(self) -> str:
        return getattr(self, self.ORIGINAL_TRACE_FIELD) if self.ORIGINAL_TRACE_FIELD else ""
