# =============================================================
# eft005/record_header.py
# 24 character prefix of every header / transaction / footer line
# v1.0 | EFT 005 Codec
# =============================================================

from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Type

from pydantic import BaseModel, ConfigDict, Field

from eft005.constants import RECORD_HEADER_LENGTH, RecordType, parse_record_type
from eft005.errors import InvalidRecordLengthError, UnrecognizedRecordTypeError
from eft005.fields import abbreviate, pad_numeric, parse_num, slice_field, zero_padded
from eft005.rules import RecordHeaderRules
from eft005.validator import validate_record

logger = logging.getLogger("eft005.record_header")

# -------------------------------------------------------------
# Layout (0-based slices)
# -------------------------------------------------------------
RECORD_HEADER_LAYOUT = {
    "record_type": (0, 1),
    "record_count": (1, 10),
    "originator_id": (10, 20),
    "file_creation_number": (20, 24),
}


class RecordHeader(BaseModel):
    """
    Record type, line sequence number, originator id and file creation number.
    `record_count` is the line sequence number: it is written into every
    line but is not part of the interchange JSON.
    """

    model_config = ConfigDict(populate_by_name=True)

    record_type: str = Field(RecordType.HEADER.value, alias="type")
    originator_id: str = ""
    file_creation_number: int = 0
    record_count: int = Field(0, exclude=True)

    RULES: ClassVar[Type[BaseModel]] = RecordHeaderRules

    @staticmethod
    def parse_fields(line: str) -> Dict[str, Any]:
        if len(line) < RECORD_HEADER_LENGTH:
            raise InvalidRecordLengthError(f"record header requires {RECORD_HEADER_LENGTH} characters, got {len(line)}")
        try:
            record_type = parse_record_type(slice_field(line, RECORD_HEADER_LAYOUT["record_type"]))
        except UnrecognizedRecordTypeError as e:
            raise UnrecognizedRecordTypeError(e.record_type, f"failed to parse record header: {e}") from e
        return {
            "record_type": record_type.value,
            "record_count": parse_num(slice_field(line, RECORD_HEADER_LAYOUT["record_count"]), "record_count"),
            "originator_id": slice_field(line, RECORD_HEADER_LAYOUT["originator_id"]).strip(),
            "file_creation_number": parse_num(
                slice_field(line, RECORD_HEADER_LAYOUT["file_creation_number"]), "file_creation_number"
            ),
        }

    @classmethod
    def parse(cls, line: str) -> "RecordHeader":
        return RecordHeader(**cls.parse_fields(line))

    def header_fields(self) -> Dict[str, Any]:
        return {
            "record_type": self.record_type,
            "record_count": self.record_count,
            "originator_id": self.originator_id,
            "file_creation_number": self.file_creation_number,
        }

    def build_record_header(self) -> str:
        out = (
            abbreviate(str(self.record_type), 1)
            + zero_padded(self.record_count, 9, "record_count")
            + pad_numeric(self.originator_id, 10, "originator_id")
            + zero_padded(self.file_creation_number, 4, "file_creation_number")
        )
        return out

    def validate(self) -> None:  # type: ignore[override]
        validate_record(self, self.RULES, "record header")
