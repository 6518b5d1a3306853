# =============================================================
# eft005/eft_file.py
# Whole file model: assembler, file level validation, JSON interchange
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# Output line order:
#   1. file header (sequence 1)
#   2. one block per record type in TRANSACTION_RECORD_ORDER,
#      six segments per line, lines blank padded to 1464
#   3. file footer (sequence = number of lines)
# =============================================================

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from eft005.base import BaseTxn
from eft005.constants import MAX_LINE_LENGTH, MAX_TXNS_PER_LINE, TRANSACTION_RECORD_ORDER, RecordType
from eft005.errors import (
    BuildError,
    EftError,
    FileValidationError,
    InterchangeError,
    RecordValidationError,
)
from eft005.file_records import FileFooter, FileHeader
from eft005.payments import Credit, Debit
from eft005.record_header import RecordHeader
from eft005.returns import CreditReturn, DebitReturn
from eft005.reversals import CreditReverse, DebitReverse
from eft005.transactions import Transaction
from eft005.validator import FieldViolation

logger = logging.getLogger("eft005.eft_file")

LINE_SEPARATOR = "\n"


class EftFile(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_header: Optional[FileHeader] = None
    transactions: List[Transaction] = Field(default_factory=list)
    file_footer: Optional[FileFooter] = None

    # ---------------------------------------------------------
    # Encode
    # ---------------------------------------------------------
    def _buckets(self) -> Dict[RecordType, List[BaseTxn]]:
        buckets: Dict[RecordType, List[BaseTxn]] = {rt: [] for rt in TRANSACTION_RECORD_ORDER}
        for idx, txn in enumerate(self.transactions):
            record_type = txn.get_type() if isinstance(txn, BaseTxn) else None
            if record_type not in buckets:
                raise BuildError(f"unexpected record type in transaction {idx}: {record_type}", "type")
            buckets[record_type].append(txn)
        return buckets

    def create(self) -> str:
        """
        Serialize the whole file. When no footer was supplied one is
        synthesized from the transactions; either way the footer written
        is stored back on `file_footer`.
        """
        if self.file_header is None:
            raise BuildError("file header is required to create a file", "file_header")

        header = self.file_header.model_copy(update={"record_count": 1})
        buckets = self._buckets()
        lines = [header.build()]
        seq = 1

        for record_type in TRANSACTION_RECORD_ORDER:
            txns = buckets[record_type]
            for start in range(0, len(txns), MAX_TXNS_PER_LINE):
                seq += 1
                record_header = RecordHeader(
                    record_type=record_type.value,
                    record_count=seq,
                    originator_id=header.originator_id,
                    file_creation_number=header.file_creation_number,
                )
                line = record_header.build_record_header()
                for offset, txn in enumerate(txns[start:start + MAX_TXNS_PER_LINE]):
                    try:
                        line += txn.build()
                    except EftError as e:
                        raise BuildError(
                            f"failed to build {record_type.value} transaction {start + offset}: {e}",
                            getattr(e, "field", None),
                        ) from e
                lines.append(line.ljust(MAX_LINE_LENGTH))
            if txns:
                logger.debug("wrote %d %s transaction(s)", len(txns), record_type.value)

        seq += 1
        if self.file_footer is not None:
            footer = self.file_footer.model_copy(update={"record_count": seq})
        else:
            footer = FileFooter.from_transactions(
                self.transactions,
                originator_id=header.originator_id,
                file_creation_number=header.file_creation_number,
                record_count=seq,
            )
        self.file_footer = footer
        lines.append(footer.build())
        return LINE_SEPARATOR.join(lines)

    # ---------------------------------------------------------
    # Validation
    # ---------------------------------------------------------
    def validate(self) -> None:  # type: ignore[override]
        """Validate the header and every transaction, raising one aggregate error."""
        errors: List[EftError] = []
        if self.file_header is None:
            missing = FieldViolation("file_header", "missing", None, "a file header is required")
            errors.append(RecordValidationError("file header", [missing]))
        else:
            try:
                self.file_header.validate()
            except RecordValidationError as e:
                errors.append(e)

        for idx, txn in enumerate(self.transactions):
            try:
                txn.validate()
            except RecordValidationError as e:
                errors.append(RecordValidationError(f"transaction {idx} {e.record}", e.violations))

        if errors:
            raise FileValidationError(errors)

    # ---------------------------------------------------------
    # Getters
    # ---------------------------------------------------------
    def _all(self, cls: Type[BaseTxn]) -> list:
        return [txn for txn in self.transactions if isinstance(txn, cls)]

    def get_all_debits(self) -> List[Debit]:
        return self._all(Debit)

    def get_all_credits(self) -> List[Credit]:
        return self._all(Credit)

    def get_all_credit_reversals(self) -> List[CreditReverse]:
        return self._all(CreditReverse)

    def get_all_debit_reversals(self) -> List[DebitReverse]:
        return self._all(DebitReverse)

    def get_all_credit_returns(self) -> List[CreditReturn]:
        return self._all(CreditReturn)

    def get_all_debit_returns(self) -> List[DebitReturn]:
        return self._all(DebitReturn)

    def footer_mismatches(self) -> Dict[str, Tuple[int, int]]:
        """{field: (footer value, value aggregated from transactions)} for every total that differs."""
        if self.file_footer is None:
            return {}
        expected = FileFooter.from_transactions(self.transactions).totals()
        actual = self.file_footer.totals()
        return {name: (actual[name], expected[name]) for name in actual if actual[name] != expected[name]}

    # ---------------------------------------------------------
    # JSON interchange
    # ---------------------------------------------------------
    def to_json(self, indent: int | None = 2) -> str:
        return self.model_dump_json(by_alias=True, indent=indent)

    @classmethod
    def from_json(cls, data: str | bytes) -> "EftFile":
        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise InterchangeError(f"invalid interchange JSON: {e}") from e
