import pytest
from pydantic import BaseModel, ValidationError

from eft005 import Debit, RecordValidationError
from eft005.rules import FileHeaderRules, TxnRules, alphanumeric, digits, text
from eft005.validator import validate_record, violations_from


class Sample(BaseModel):
    code: digits(3, required=True)
    trace: digits(22)
    account: alphanumeric(12)
    name: text(30, required=True)


def _sample(**overrides):
    values = {"code": "450", "trace": "", "account": "", "name": "PAYOR"}
    values.update(overrides)
    return values


class TestRules:
    @pytest.mark.parametrize("overrides,ok", [
        ({}, True),
        ({"code": ""}, False),
        ({"code": "45a"}, False),
        ({"code": "4500"}, False),
        ({"trace": ""}, True),
        ({"trace": "1" * 23}, False),
        ({"account": "ACCT-0042 X"}, True),
        ({"account": "ACCT#42"}, False),
        ({"name": ""}, False),
        ({"name": "N" * 31}, False),
    ])
    def test_constraints(self, overrides, ok):
        try:
            Sample.model_validate(_sample(**overrides))
        except ValidationError:
            assert not ok
        else:
            assert ok

    def test_every_failing_field_is_reported(self):
        with pytest.raises(ValidationError) as exc:
            Sample.model_validate(_sample(code="", account="ACCT#42", name=""))
        violations = violations_from(exc.value)
        assert [v.field for v in violations] == ["code", "account", "name"]
        assert violations[0].rule == "string_too_short"
        assert violations[1].rule == "string_pattern_mismatch"
        assert violations[1].value == "ACCT#42"

    @pytest.mark.parametrize("currency,ok", [("CAD", True), ("USD", True), ("EUR", False), ("", False)])
    def test_currency(self, header, currency, ok):
        data = header.model_copy(update={"currency_code": currency}).model_dump()
        try:
            FileHeaderRules.model_validate(data)
        except ValidationError:
            assert not ok
        else:
            assert ok

    def test_amount_bounds(self, debit):
        data = debit.model_dump(include=set(TxnRules.model_fields))
        TxnRules.model_validate({**data, "amount": 9_999_999_999})
        with pytest.raises(ValidationError):
            TxnRules.model_validate({**data, "amount": 0})


class TestRecordValidation:
    def test_valid_record(self, debit):
        debit.validate()
        validate_record(debit, Debit.RULES)

    def test_construction_does_not_validate(self):
        txn = Debit(payor_account_no="not digits", amount=0)
        assert txn.payor_account_no == "not digits"

    def test_missing_name_and_account_reported_together(self, debit):
        incomplete = debit.model_copy(update={"payor_name": "", "payor_account_no": ""})
        with pytest.raises(RecordValidationError) as exc:
            incomplete.validate()
        assert "payor_name" in exc.value.fields
        assert "payor_account_no" in exc.value.fields
        assert "payor_name" in str(exc.value)

    def test_empty_record_lists_every_required_field(self):
        with pytest.raises(RecordValidationError) as exc:
            Debit().validate()
        fields = set(exc.value.fields)
        assert {
            "txn_type",
            "amount",
            "institution_id",
            "long_name",
            "due_date",
            "payor_account_no",
            "payor_name",
            "return_institution_id",
            "return_account_no",
        } <= fields
        assert "user_id" not in fields

    def test_amount_too_large(self, debit):
        with pytest.raises(RecordValidationError) as exc:
            debit.model_copy(update={"amount": 99999999999}).validate()
        assert exc.value.fields == ["amount"]

    def test_wrong_record_type(self, debit):
        with pytest.raises(RecordValidationError) as exc:
            debit.model_copy(update={"record_type": "C"}).validate()
        assert exc.value.violations[0].rule == "literal_error"

    def test_header_label(self, header):
        with pytest.raises(RecordValidationError) as exc:
            header.model_copy(update={"originator_id": "061"}).validate()
        assert exc.value.record == "file header"
        assert exc.value.fields == ["originator_id"]
