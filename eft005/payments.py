# =============================================================
# eft005/payments.py
# Forward payments: Debit (D) and Credit (C)
# v1.0 | EFT 005 Codec
# =============================================================

from __future__ import annotations

from datetime import date
from typing import Literal, Optional

from pydantic import Field

from eft005.base import BaseTxn
from eft005.constants import RecordType
from eft005.rules import CreditRules, DebitRules


class Debit(BaseTxn):
    """Payor side of a pre-authorized debit, charged on the due date."""

    record_type: Literal["D"] = Field("D", alias="type")
    due_date: Optional[date] = None
    payor_account_no: str = ""
    payor_name: str = ""
    return_institution_id: str = ""
    return_account_no: str = ""

    RECORD_TYPE = RecordType.DEBIT
    RULES = DebitRules
    DATE_FIELD = "due_date"
    ACCOUNT_FIELD = "payor_account_no"
    NAME_FIELD = "payor_name"
    RETURN_FIELDS = ("return_institution_id", "return_account_no")


class Credit(BaseTxn):
    record_type: Literal["C"] = Field("C", alias="type")
    date_funds_available: Optional[date] = None
    payee_account_no: str = ""
    payee_name: str = ""
    return_institution_id: str = ""
    return_account_no: str = ""

    RECORD_TYPE = RecordType.CREDIT
    RULES = CreditRules
    DATE_FIELD = "date_funds_available"
    ACCOUNT_FIELD = "payee_account_no"
    NAME_FIELD = "payee_name"
    RETURN_FIELDS = ("return_institution_id", "return_account_no")
