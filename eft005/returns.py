# =============================================================
# eft005/returns.py
# Rejected payments: CreditReturn (I), DebitReturn (J)
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# Positions 169-190 hold the original institution / account of the
# returned item. invalid_data_element_id flags the defective field.
# =============================================================

from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from eft005.base import BaseTxn
from eft005.constants import RecordType
from eft005.rules import CreditReturnRules, DebitReturnRules


class CreditReturn(BaseTxn):
    record_type: Literal["I"] = Field("I", alias="type")
    date_funds_available: Optional[date] = None
    payee_account_no: str = ""
    payee_name: str = ""
    original_institution_id: str = ""
    original_account_no: str = ""
    original_item_trace_no: str = ""

    RECORD_TYPE = RecordType.CREDIT_RETURN
    RULES = CreditReturnRules
    DATE_FIELD = "date_funds_available"
    ACCOUNT_FIELD = "payee_account_no"
    NAME_FIELD = "payee_name"
    ORIGINAL_FIELDS = ("original_institution_id", "original_account_no")
    ORIGINAL_TRACE_FIELD = "original_item_trace_no"


class DebitReturn(BaseTxn):
    record_type: Literal["J"] = Field("J", alias="type")
    due_date: Optional[date] = None
    payor_account_no: str = ""
    payor_name: str = ""
    original_institution_id: str = ""
    original_account_no: str = ""
    original_item_trace_no: str = ""

    RECORD_TYPE = RecordType.DEBIT_RETURN
    RULES = DebitReturnRules
    DATE_FIELD = "due_date"
    ACCOUNT_FIELD = "payor_account_no"
    NAME_FIELD = "payor_name"
    ORIGINAL_FIELDS = ("original_institution_id", "original_account_no")
    ORIGINAL_TRACE_FIELD = "original_item_trace_no"
