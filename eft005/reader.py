# =============================================================
# eft005/reader.py
# Strict whole file decoder
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# Dispatch on the first character of every line:
#   A          -> FileHeader
#   D C E F I J -> transaction splitter (payload / 240 segments)
#   Z          -> FileFooter
# Any error aborts the read; no partial file is returned.
# =============================================================

from __future__ import annotations

import logging
from typing import IO, Iterable, List

from eft005.base import BaseTxn
from eft005.constants import RECORD_HEADER_LENGTH, SEGMENT_LENGTH, RecordType, is_txn_record
from eft005.eft_file import EftFile
from eft005.errors import InvalidRecordLengthError, ParseError, UnrecognizedRecordTypeError
from eft005.fields import is_filler
from eft005.file_records import FileFooter, FileHeader
from eft005.normalize import normalize
from eft005.transactions import parse_segment

logger = logging.getLogger("eft005.reader")


def split_segments(line: str, line_number: int) -> List[BaseTxn]:
    """Decode every non blank 240 character segment following the record header."""
    payload = line[RECORD_HEADER_LENGTH:]
    if len(payload) % SEGMENT_LENGTH != 0:
        raise InvalidRecordLengthError(
            f"line {line_number}: transaction payload of {len(payload)} characters "
            f"is not a multiple of {SEGMENT_LENGTH}"
        )
    record_type = line[0]
    txns = []
    for idx in range(len(payload) // SEGMENT_LENGTH):
        segment = payload[idx * SEGMENT_LENGTH:(idx + 1) * SEGMENT_LENGTH]
        if is_filler(segment):
            continue
        try:
            txns.append(parse_segment(record_type, segment))
        except ParseError as e:
            raise ParseError(f"line {line_number} segment {idx}: {e}") from e
    return txns


class Reader:
    def __init__(self, source: IO[str] | Iterable[str]):
        self.source = source

    def read_file(self) -> EftFile:
        eft_file = EftFile()
        for line_number, raw in enumerate(self.source, start=1):
            line = normalize(raw.rstrip("\r\n"))
            if not line:
                continue
            token = line[0]
            if token == RecordType.HEADER.value:
                eft_file.file_header = FileHeader.parse(line)
            elif is_txn_record(token):
                eft_file.transactions.extend(split_segments(line, line_number))
            elif token == RecordType.FOOTER.value:
                eft_file.file_footer = FileFooter.parse(line)
            else:
                raise UnrecognizedRecordTypeError(token, f"line {line_number}: unrecognized record type {token!r}")
        logger.debug("read %d transaction(s)", len(eft_file.transactions))
        return eft_file


def read_file(source: IO[str] | Iterable[str]) -> EftFile:
    return Reader(source).read_file()
