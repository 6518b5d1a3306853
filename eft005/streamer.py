# =============================================================
# eft005/streamer.py
# Resumable, tolerant transaction scanner
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# States:
#   BEFORE_HEADER  nothing consumed; the next line must be a header
#   BETWEEN_LINES  no transaction line buffered
#   MID_LINE       a line is buffered, segments remain
#   ENDED          footer, empty line or end of input was reached
#
# scan_txn() returns one transaction per call. Errors leave the scanner
# in a state from which the next call continues with the rest of the
# file; ScanParseError marks a single bad segment that can be skipped.
# EndOfStream is raised once the stream is done, and on every call after.
# Single owner only: the cursor is mutable state.
# =============================================================

from __future__ import annotations

import logging
from enum import Enum
from typing import IO, Iterator, NamedTuple, Optional

from eft005.base import BaseTxn
from eft005.constants import (
    RECORD_HEADER_LENGTH,
    SEGMENT_LENGTH,
    RecordType,
    is_footer_record_type,
    is_header_record_type,
    is_txn_record,
)
from eft005.errors import (
    EftError,
    EndOfStream,
    InvalidRecordLengthError,
    ParseError,
    ScanParseError,
    UnrecognizedRecordTypeError,
)
from eft005.fields import is_filler
from eft005.file_records import FileFooter, FileHeader
from eft005.normalize import normalize
from eft005.transactions import parse_segment

logger = logging.getLogger("eft005.streamer")


class ScanState(Enum):
    BEFORE_HEADER = "before_header"
    BETWEEN_LINES = "between_lines"
    MID_LINE = "mid_line"
    ENDED = "ended"


class ScanResult(NamedTuple):
    transaction: Optional[BaseTxn]
    error: Optional[EftError]


class FileStreamer:
    def __init__(self, source: IO[str]):
        self.source = source
        self.state = ScanState.BEFORE_HEADER
        self.line_contents = ""
        self.line_number = 0
        self.segment_index = 0
        self.segments_per_line = 0

    # ---------------------------------------------------------
    # Convenience lookups (cursor is reset to the start afterwards)
    # ---------------------------------------------------------
    def get_header(self) -> FileHeader:
        self.source.seek(0)
        try:
            line = self.source.readline().rstrip("\r\n")
            if not line:
                raise ParseError("file header is empty")
            if line[0] != RecordType.HEADER.value:
                raise ParseError("first record in file is not a header record")
            try:
                return FileHeader.parse(line)
            except ParseError as e:
                raise ParseError(f"failed to parse file header: {e}") from e
        finally:
            self.source.seek(0)

    def get_footer(self) -> FileFooter:
        self.source.seek(0)
        try:
            for raw in self.source:
                line = raw.rstrip("\r\n")
                if line[:1] == RecordType.FOOTER.value:
                    try:
                        return FileFooter.parse(line)
                    except ParseError as e:
                        raise ParseError(f"failed to parse file footer: {e}") from e
            raise ParseError("failed to find footer record")
        finally:
            self.source.seek(0)

    # ---------------------------------------------------------
    # State machine
    # ---------------------------------------------------------
    def _readline(self) -> str:
        raw = self.source.readline()
        if raw == "":
            self.state = ScanState.ENDED
            raise EndOfStream()
        self.line_number += 1
        return raw

    def _reset(self) -> None:
        self.state = ScanState.BETWEEN_LINES
        self.line_contents = ""
        self.segment_index = 0
        self.segments_per_line = 0

    def _consume_header(self) -> None:
        line = self._readline().strip()
        if not line or not is_header_record_type(line[0]):
            raise ParseError(f"first line in file is not a header record (line {self.line_number})")
        self.state = ScanState.BETWEEN_LINES

    def _buffer_line(self) -> None:
        line = normalize(self._readline().rstrip("\r\n"))
        if not line.strip() or is_footer_record_type(line[0]):
            self.state = ScanState.ENDED
            raise EndOfStream()

        payload_length = len(line) - RECORD_HEADER_LENGTH
        if payload_length <= 0 or payload_length % SEGMENT_LENGTH != 0:
            raise InvalidRecordLengthError(f"txn record at line {self.line_number} is not of correct length")

        self.line_contents = line
        self.segment_index = 0
        self.segments_per_line = payload_length // SEGMENT_LENGTH
        self.state = ScanState.MID_LINE

    def _next_segment(self) -> Optional[BaseTxn]:
        """Decode the segment under the cursor; None for a blank filler segment."""
        token = self.line_contents[0]
        if not is_txn_record(token):
            line_number = self.line_number
            self._reset()
            raise UnrecognizedRecordTypeError(token, f"unrecognized record type {token!r} at line {line_number}")

        idx = self.segment_index
        start = RECORD_HEADER_LENGTH + idx * SEGMENT_LENGTH
        segment = self.line_contents[start:start + SEGMENT_LENGTH]
        line_number = self.line_number
        if idx == self.segments_per_line - 1:
            self._reset()
        else:
            self.segment_index += 1

        if is_filler(segment):
            return None
        try:
            return parse_segment(token, segment)
        except ParseError as e:
            logger.warning("skipping %s segment %d at line %d: %s", token, idx, line_number, e)
            raise ScanParseError(token, idx, line_number, str(e)) from e

    def scan_txn(self) -> BaseTxn:
        """
        Return the next transaction. Raises ScanParseError for a bad
        segment, other EftErrors for bad lines, EndOfStream when done.
        """
        while True:
            if self.state is ScanState.ENDED:
                raise EndOfStream()
            if self.state is ScanState.BEFORE_HEADER:
                self._consume_header()
            if self.state is ScanState.BETWEEN_LINES:
                self._buffer_line()
            txn = self._next_segment()
            if txn is not None:
                return txn

    def __iter__(self) -> Iterator[ScanResult]:
        while True:
            try:
                yield ScanResult(self.scan_txn(), None)
            except EndOfStream:
                return
            except EftError as e:
                yield ScanResult(None, e)
