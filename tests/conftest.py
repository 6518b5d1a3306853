"""
Pytest configuration and fixtures for the EFT 005 codec tests.
"""

from datetime import date

import pytest

import config
from eft005 import (
    Credit,
    CreditReturn,
    CreditReverse,
    Debit,
    DebitReturn,
    DebitReverse,
    EftFile,
    FileHeader,
)

from samples import TXN_DATE


# =============================================================================
# Record Fixtures
# =============================================================================

@pytest.fixture
def header():
    return FileHeader(
        originator_id="0000000610",
        file_creation_number=1,
        creation_date=date(2023, 5, 18),
        destination_data_center=61210,
        communication_area="hello",
        currency_code="CAD",
    )


@pytest.fixture
def debit():
    return Debit(
        txn_type="450",
        amount=12345,
        due_date=TXN_DATE,
        institution_id="123456789",
        payor_account_no="123456789012",
        item_trace_no="1234567890123456789012",
        short_name="SHORT-NAME",
        payor_name="PAYOR NAME",
        long_name="LONG-NAME",
        return_institution_id="987654321",
        return_account_no="210987654321",
    )


@pytest.fixture
def credit():
    return Credit(
        txn_type="400",
        amount=999,
        date_funds_available=TXN_DATE,
        institution_id="123456789",
        payee_account_no="123456789012",
        item_trace_no="2222222222222222222222",
        short_name="SHORT-NAME",
        payee_name="RECEIVER NAME",
        long_name="LONG-NAME",
        return_institution_id="987654321",
        return_account_no="210987654321",
        user_id="54321",
        cross_ref_no="123",
    )


@pytest.fixture
def credit_reverse():
    return CreditReverse(
        txn_type="400",
        amount=500,
        date_funds_available=TXN_DATE,
        institution_id="123456789",
        payee_account_no="123456789012",
        item_trace_no="3333333333333333333333",
        short_name="SHORT-NAME",
        payee_name="RECEIVER NAME",
        long_name="LONG-NAME",
        return_institution_id="987654321",
        return_account_no="210987654321",
        original_item_trace_no="2222222222222222222222",
    )


@pytest.fixture
def debit_reverse():
    return DebitReverse(
        txn_type="450",
        amount=700,
        due_date=TXN_DATE,
        institution_id="123456789",
        payor_account_no="123456789012",
        item_trace_no="4444444444444444444444",
        short_name="SHORT-NAME",
        payor_name="PAYOR NAME",
        long_name="LONG-NAME",
        return_institution_id="987654321",
        return_account_no="210987654321",
        original_item_trace_no="1234567890123456789012",
    )


@pytest.fixture
def credit_return():
    return CreditReturn(
        txn_type="400",
        amount=250,
        date_funds_available=TXN_DATE,
        institution_id="123456789",
        payee_account_no="123456789012",
        item_trace_no="5555555555555555555555",
        short_name="SHORT-NAME",
        payee_name="RECEIVER NAME",
        long_name="LONG-NAME",
        original_institution_id="111222333",
        original_account_no="ACCT-0042",
        original_item_trace_no="2222222222222222222222",
        invalid_data_element_id="905",
    )


@pytest.fixture
def debit_return():
    return DebitReturn(
        txn_type="450",
        amount=125,
        due_date=TXN_DATE,
        institution_id="123456789",
        payor_account_no="123456789012",
        item_trace_no="6666666666666666666666",
        short_name="SHORT-NAME",
        payor_name="PAYOR NAME",
        long_name="LONG-NAME",
        original_institution_id="111222333",
        original_account_no="ACCT-0042",
        original_item_trace_no="1234567890123456789012",
    )


@pytest.fixture
def all_transactions(debit, credit, credit_reverse, debit_reverse, credit_return, debit_return):
    return [debit, credit, credit_reverse, debit_reverse, credit_return, debit_return]


@pytest.fixture
def eft_file(header, all_transactions):
    return EftFile(file_header=header, transactions=all_transactions)


@pytest.fixture
def built_file(eft_file):
    """Serialized file with one line per record type."""
    return eft_file.create()


# =============================================================================
# Environment Fixtures
# =============================================================================

@pytest.fixture
def base_dirs(tmp_path, monkeypatch):
    """Points every configured directory at a temporary tree."""
    dirs = {
        "INPUT_DIR": tmp_path / "input",
        "OUTPUT_DIR": tmp_path / "output",
        "ERROR_DIR": tmp_path / "error",
        "LOG_DIR": tmp_path / "logs",
    }
    for name, path in dirs.items():
        path.mkdir()
        monkeypatch.setattr(config, name, str(path))
    return dirs


@pytest.fixture
def input_file(base_dirs, built_file):
    path = base_dirs["INPUT_DIR"] / "EFT005_0000000610_0001.txt"
    path.write_text(built_file, encoding="utf-8")
    return path
