# =============================================================
# eft005/transactions.py
# Closed union of the six transaction variants and their dispatch
# v1.0 | EFT 005 Codec
# =============================================================

from __future__ import annotations

import logging
from datetime import date
from typing import Annotated, Any, Dict, Optional, Type, Union

from pydantic import Field, TypeAdapter

from eft005.base import BaseTxn
from eft005.constants import RecordType
from eft005.errors import BuildError, UnrecognizedRecordTypeError
from eft005.payments import Credit, Debit
from eft005.returns import CreditReturn, DebitReturn
from eft005.reversals import CreditReverse, DebitReverse

logger = logging.getLogger("eft005.transactions")

Transaction = Annotated[
    Union[Debit, Credit, CreditReverse, DebitReverse, CreditReturn, DebitReturn],
    Field(discriminator="record_type"),
]

TRANSACTION_CLASSES: Dict[RecordType, Type[BaseTxn]] = {
    RecordType.DEBIT: Debit,
    RecordType.CREDIT: Credit,
    RecordType.CREDIT_REVERSE: CreditReverse,
    RecordType.DEBIT_REVERSE: DebitReverse,
    RecordType.CREDIT_RETURN: CreditReturn,
    RecordType.DEBIT_RETURN: DebitReturn,
}

transaction_adapter: TypeAdapter = TypeAdapter(Transaction)


def transaction_class(record_type: RecordType | str) -> Type[BaseTxn]:
    try:
        return TRANSACTION_CLASSES[RecordType(record_type)]
    except (KeyError, ValueError):
        raise UnrecognizedRecordTypeError(str(record_type)) from None


def parse_segment(record_type: RecordType | str, segment: str) -> BaseTxn:
    """Decode one 240 character segment as the variant selected by the line's record type."""
    return transaction_class(record_type).parse(segment)


def new_transaction(
    record_type: RecordType | str,
    txn_type: str,
    amount: int,
    txn_date: Optional[date],
    institution_id: str,
    account_no: str,
    item_trace_no: str,
    short_name: str,
    name: str,
    long_name: str,
    party_institution_id: str = "",
    party_account_no: str = "",
    original_item_trace_no: str = "",
    **options: Any,
) -> BaseTxn:
    """
    Build the variant matching `record_type` from the generic argument list.

    `party_institution_id` / `party_account_no` land in the return fields of
    D, C, E and F and in the original fields of I and J.
    `original_item_trace_no` is ignored by D and C.
    Optional base fields (user_id, cross_ref_no, sundry_info,
    settlement_code, stored_txn_type, invalid_data_element_id) go in
    `options`.
    """
    try:
        cls = transaction_class(record_type)
    except UnrecognizedRecordTypeError as e:
        raise BuildError(f"cannot create a transaction of type {record_type}: {e}", "type") from e

    party_institution, party_account = cls._party_fields()
    values: Dict[str, Any] = {
        "txn_type": txn_type,
        "amount": amount,
        cls.DATE_FIELD: txn_date,
        "institution_id": institution_id,
        cls.ACCOUNT_FIELD: account_no,
        "item_trace_no": item_trace_no,
        "short_name": short_name,
        cls.NAME_FIELD: name,
        "long_name": long_name,
        party_institution: party_institution_id,
        party_account: party_account_no,
    }
    if cls.ORIGINAL_TRACE_FIELD:
        values[cls.ORIGINAL_TRACE_FIELD] = original_item_trace_no
    values.update(options)
    return cls(**values)
