# =============================================================
# eft005/errors.py
# Exception hierarchy for parsing, building and validating
# v1.0 | EFT 005 Codec
# =============================================================

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from eft005.validator import FieldViolation


class EftError(Exception):
    """Root of every error raised by the codec."""


# -------------------------------------------------------------
# Decode
# -------------------------------------------------------------
class ParseError(EftError):
    """A record or line could not be decoded."""


class InvalidRecordLengthError(ParseError):
    def __init__(self, message: str = "transaction record is not 240 characters"):
        super().__init__(message)


class FieldParseError(ParseError):
    def __init__(self, field: str, raw: str, reason: str = ""):
        self.field = field
        self.raw = raw
        message = f"failed to parse {field}: {raw!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class UnrecognizedRecordTypeError(ParseError):
    def __init__(self, record_type: str, message: str = ""):
        self.record_type = record_type
        super().__init__(message or f"unrecognized record type: {record_type!r}")


class ScanParseError(ParseError):
    """A single transaction segment failed while streaming; the caller may skip it."""

    def __init__(self, record_type: str, segment_index: int, line_number: int, reason: str = ""):
        self.record_type = record_type
        self.segment_index = segment_index
        self.line_number = line_number
        message = f"parse error for record {record_type} number {segment_index} line {line_number}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


# -------------------------------------------------------------
# Encode
# -------------------------------------------------------------
class NormalizationError(EftError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"failed to normalize character {char!r}")


class BuildError(EftError):
    def __init__(self, message: str, field: str | None = None):
        self.field = field
        super().__init__(message)


# -------------------------------------------------------------
# Validation
# -------------------------------------------------------------
class RecordValidationError(EftError):
    """Every rule violation of a single record."""

    def __init__(self, record: str, violations: list[FieldViolation]):
        self.record = record
        self.violations = list(violations)
        details = "; ".join(v.message for v in self.violations)
        super().__init__(f"{record} failed validation: {details}")

    @property
    def fields(self) -> list[str]:
        return [v.field for v in self.violations]


class FileValidationError(EftError):
    """Aggregate of the validation failures of a header and all transactions."""

    def __init__(self, errors: list[EftError]):
        self.errors = list(errors)
        lines = "\n".join(f"  * {e}" for e in self.errors)
        super().__init__(f"{len(self.errors)} error(s) occurred:\n{lines}")

    @property
    def violations(self) -> list[FieldViolation]:
        out = []
        for err in self.errors:
            out.extend(getattr(err, "violations", []))
        return out


class InterchangeError(EftError):
    """Interchange JSON could not be mapped onto the file model."""


# -------------------------------------------------------------
# Streaming
# -------------------------------------------------------------
class EndOfStream(Exception):
    """No more transactions: input exhausted or footer reached. Not an EftError."""
