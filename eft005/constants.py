# =============================================================
# eft005/constants.py
# Record types and line geometry | EFT Standard 005
# v1.0 | EFT 005 Codec
# =============================================================

from enum import Enum

from eft005.errors import UnrecognizedRecordTypeError

# -------------------------------------------------------------
# Line geometry
# -------------------------------------------------------------
MAX_LINE_LENGTH = 1464
RECORD_HEADER_LENGTH = 24
SEGMENT_LENGTH = 240
MAX_TXNS_PER_LINE = 6
HEADER_MIN_LENGTH = 58
FOOTER_MIN_LENGTH = 112
HEADER_FILLER_LENGTH = 1406
FOOTER_FILLER_LENGTH = 1352

MAX_AMOUNT = 9_999_999_999


class RecordType(str, Enum):
    """Logical record types of the 005 standard."""

    HEADER = "A"
    CREDIT = "C"
    DEBIT = "D"
    CREDIT_REVERSE = "E"
    DEBIT_REVERSE = "F"
    CREDIT_RETURN = "I"
    DEBIT_RETURN = "J"
    NOTICE_OF_CHANGE = "S"
    NOTICE_OF_CHANGE_HEADER = "U"
    NOTICE_OF_CHANGE_FOOTER = "V"
    FOOTER = "Z"

    def __str__(self) -> str:
        return self.value


# Order in which transaction blocks are written by the assembler.
TRANSACTION_RECORD_ORDER = (
    RecordType.DEBIT,
    RecordType.CREDIT,
    RecordType.CREDIT_REVERSE,
    RecordType.DEBIT_REVERSE,
    RecordType.CREDIT_RETURN,
    RecordType.DEBIT_RETURN,
)

# Types that have a codec (everything except the notice of change family).
_CODEC_RECORD_TYPES = {
    rt.value: rt
    for rt in (RecordType.HEADER, *TRANSACTION_RECORD_ORDER, RecordType.FOOTER)
}


def parse_record_type(token: str) -> RecordType:
    """Decode a one character record type that this package can parse or build."""
    try:
        return _CODEC_RECORD_TYPES[token]
    except KeyError:
        raise UnrecognizedRecordTypeError(token) from None


def is_txn_record(token: str) -> bool:
    return token in {rt.value for rt in TRANSACTION_RECORD_ORDER}


def is_header_record_type(token: str) -> bool:
    return token in (RecordType.HEADER.value, RecordType.NOTICE_OF_CHANGE_HEADER.value)


def is_footer_record_type(token: str) -> bool:
    return token in (RecordType.FOOTER.value, RecordType.NOTICE_OF_CHANGE_FOOTER.value)
