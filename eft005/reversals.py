# =============================================================
# eft005/reversals.py
# Corrections of settled payments: CreditReverse (E), DebitReverse (F)
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# Both carry the return institution / account like a forward payment
# and reference the reversed item through original_item_trace_no.
# =============================================================

from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from eft005.base import BaseTxn
from eft005.constants import RecordType
from eft005.rules import CreditReverseRules, DebitReverseRules


class CreditReverse(BaseTxn):
    record_type: Literal["E"] = Field("E", alias="type")
    date_funds_available: Optional[date] = None
    payee_account_no: str = ""
    payee_name: str = ""
    return_institution_id: str = ""
    return_account_no: str = ""
    original_item_trace_no: str = ""

    RECORD_TYPE = RecordType.CREDIT_REVERSE
    RULES = CreditReverseRules
    DATE_FIELD = "date_funds_available"
    ACCOUNT_FIELD = "payee_account_no"
    NAME_FIELD = "payee_name"
    RETURN_FIELDS = ("return_institution_id", "return_account_no")
    ORIGINAL_TRACE_FIELD = "original_item_trace_no"


class DebitReverse(BaseTxn):
    record_type: Literal["F"] = Field("F", alias="type")
    due_date: Optional[date] = None
    payor_account_no: str = ""
    payor_name: str = ""
    return_institution_id: str = ""
    return_account_no: str = ""
    original_item_trace_no: str = ""

    RECORD_TYPE = RecordType.DEBIT_REVERSE
    RULES = DebitReverseRules
    DATE_FIELD = "due_date"
    ACCOUNT_FIELD = "payor_account_no"
    NAME_FIELD = "payor_name"
    RETURN_FIELDS = ("return_institution_id", "return_account_no")
    ORIGINAL_TRACE_FIELD = "original_item_trace_no"
