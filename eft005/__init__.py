# =============================================================
# eft005/__init__.py
# Codec for EFT Standard 005 batch payment files
# v1.0 | EFT 005 Codec
# =============================================================

from eft005.base import BaseTxn
from eft005.constants import RecordType
from eft005.eft_file import EftFile
from eft005.errors import (
    BuildError,
    EftError,
    EndOfStream,
    FieldParseError,
    FileValidationError,
    InterchangeError,
    InvalidRecordLengthError,
    NormalizationError,
    ParseError,
    RecordValidationError,
    ScanParseError,
    UnrecognizedRecordTypeError,
)
from eft005.file_records import FileFooter, FileHeader
from eft005.payments import Credit, Debit
from eft005.reader import Reader, read_file
from eft005.record_header import RecordHeader
from eft005.returns import CreditReturn, DebitReturn
from eft005.reversals import CreditReverse, DebitReverse
from eft005.streamer import FileStreamer, ScanResult, ScanState
from eft005.transactions import TRANSACTION_CLASSES, Transaction, new_transaction, parse_segment

__all__ = [
    "BaseTxn",
    "BuildError",
    "Credit",
    "CreditReturn",
    "CreditReverse",
    "Debit",
    "DebitReturn",
    "DebitReverse",
    "EftError",
    "EftFile",
    "EndOfStream",
    "FieldParseError",
    "FileFooter",
    "FileHeader",
    "FileStreamer",
    "FileValidationError",
    "InterchangeError",
    "InvalidRecordLengthError",
    "NormalizationError",
    "ParseError",
    "Reader",
    "RecordHeader",
    "RecordType",
    "RecordValidationError",
    "ScanParseError",
    "ScanResult",
    "ScanState",
    "TRANSACTION_CLASSES",
    "Transaction",
    "UnrecognizedRecordTypeError",
    "new_transaction",
    "parse_segment",
    "read_file",
]
