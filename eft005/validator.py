# =============================================================
# eft005/validator.py
# Runs a record through its rules model and collects violations
# v1.0 | EFT 005 Codec
# -------------------------------------------------------------
# pydantic checks every field of the rules model and reports all
# failures in one ValidationError; each failure becomes a
# FieldViolation named after the pydantic error type
# (string_too_short, string_pattern_mismatch, literal_error, ...).
# =============================================================

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Type

from pydantic import BaseModel, ValidationError

from eft005.errors import RecordValidationError


@dataclass(frozen=True)
class FieldViolation:
    field: str
    rule: str
    value: Any
    reason: str = ""

    @property
    def message(self) -> str:
        message = f"{self.field} failed rule '{self.rule}' (value={self.value!r})"
        return f"{message}: {self.reason}" if self.reason else message


def violations_from(error: ValidationError) -> List[FieldViolation]:
    return [
        FieldViolation(
            field=".".join(str(part) for part in err["loc"]),
            rule=err["type"],
            value=err.get("input"),
            reason=err["msg"],
        )
        for err in error.errors()
    ]


def validate_record(model: BaseModel, rules: Type[BaseModel], label: str | None = None) -> None:
    """Raise RecordValidationError listing every field of `model` that breaks `rules`."""
    data = model.model_dump(include=set(rules.model_fields))
    try:
        rules.model_validate(data)
    except ValidationError as e:
        raise RecordValidationError(label or type(model).__name__, violations_from(e)) from e
