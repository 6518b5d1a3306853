# =============================================================
# eft005/rules.py
# Field rules of every record, as pydantic constraint models
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# The record models only enforce Python types so that incomplete
# records can be built and then validated. The models below carry
# the actual rules and are run by validator.validate_record:
#   required      min_length=1 / gt=0 / non-optional date
#   numeric       digits only, empty values pass unless required
#   alphanumeric  word characters, hyphen and whitespace
# =============================================================

from datetime import date
from typing import Annotated, Literal

from pydantic import BaseModel, Field, StringConstraints

from eft005.constants import MAX_AMOUNT, RecordType

NUMERIC_PATTERN = r"^[0-9]*$"
ALPHANUMERIC_PATTERN = r"^[A-Za-z0-9_\s-]*$"


def digits(max_length, required=False):
    return Annotated[str, StringConstraints(min_length=int(required), max_length=max_length, pattern=NUMERIC_PATTERN)]


def alphanumeric(max_length, required=False):
    return Annotated[
        str, StringConstraints(min_length=int(required), max_length=max_length, pattern=ALPHANUMERIC_PATTERN)
    ]


def text(max_length, required=False):
    return Annotated[str, StringConstraints(min_length=int(required), max_length=max_length)]


Currency = Literal["CAD", "USD"]


# -------------------------------------------------------------
# Header / footer
# -------------------------------------------------------------
class RecordHeaderRules(BaseModel):
    record_type: RecordType
    originator_id: Annotated[str, StringConstraints(min_length=10, max_length=10, pattern=ALPHANUMERIC_PATTERN)]
    file_creation_number: Annotated[int, Field(gt=0, le=9999)]


class FileHeaderRules(RecordHeaderRules):
    record_type: Literal["A"]
    creation_date: date
    destination_data_center: Annotated[int, Field(ge=0, le=99999)]
    communication_area: text(20)
    currency_code: Currency


# -------------------------------------------------------------
# Transactions
# -------------------------------------------------------------
class TxnRules(BaseModel):
    txn_type: digits(3, required=True)
    amount: Annotated[int, Field(gt=0, le=MAX_AMOUNT)]
    item_trace_no: digits(22)
    institution_id: digits(9, required=True)
    stored_txn_type: digits(3)
    short_name: text(15)
    long_name: text(30, required=True)
    user_id: alphanumeric(10)
    cross_ref_no: alphanumeric(19)
    sundry_info: alphanumeric(15)
    settlement_code: alphanumeric(2)
    invalid_data_element_id: digits(11)


class PayorRules(TxnRules):
    due_date: date
    payor_account_no: digits(12, required=True)
    payor_name: text(30, required=True)


class PayeeRules(TxnRules):
    date_funds_available: date
    payee_account_no: digits(12, required=True)
    payee_name: text(30, required=True)


class ReturnPartyRules(BaseModel):
    return_institution_id: digits(9, required=True)
    return_account_no: alphanumeric(12, required=True)


class OriginalPartyRules(BaseModel):
    original_institution_id: digits(9, required=True)
    original_account_no: alphanumeric(12, required=True)
    original_item_trace_no: digits(22, required=True)


class DebitRules(PayorRules, ReturnPartyRules):
    record_type: Literal["D"]


class CreditRules(PayeeRules, ReturnPartyRules):
    record_type: Literal["C"]


class CreditReverseRules(PayeeRules, ReturnPartyRules):
    record_type: Literal["E"]
    original_item_trace_no: digits(22, required=True)


class DebitReverseRules(PayorRules, ReturnPartyRules):
    record_type: Literal["F"]
    original_item_trace_no: digits(22, required=True)


class CreditReturnRules(PayeeRules, OriginalPartyRules):
    record_type: Literal["I"]


class DebitReturnRules(PayorRules, OriginalPartyRules):
    record_type: Literal["J"]
