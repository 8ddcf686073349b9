"""Tests for BigInt used as a pydantic model field."""

from __future__ import annotations

from typing import Optional

import pytest
from pydantic import BaseModel, ValidationError

from bigx.models.bigint import BigInt


class Ledger(BaseModel):
    account: str
    balance: Optional[BigInt] = None


def test_validates_decimal_string():
    ledger = Ledger.model_validate_json('{"account": "a", "balance": "123456789012345678901234567890"}')
    assert ledger.balance == BigInt(123456789012345678901234567890)


def test_validates_int_and_instance():
    assert Ledger(account="a", balance=5).balance == BigInt(5)
    assert Ledger(account="a", balance=BigInt(-5)).balance == BigInt(-5)


def test_null_and_empty_string_are_absent():
    assert Ledger.model_validate_json('{"account": "a", "balance": null}').balance is None
    assert Ledger.model_validate_json('{"account": "a", "balance": ""}').balance is None


def test_rejects_malformed():
    with pytest.raises(ValidationError):
        Ledger.model_validate_json('{"account": "a", "balance": "12x"}')
    with pytest.raises(ValidationError):
        Ledger(account="a", balance=1.5)


def test_json_dump_uses_quoted_string():
    assert Ledger(account="a", balance=BigInt(3)).model_dump_json() == '{"account":"a","balance":"3"}'
    assert Ledger(account="a").model_dump_json() == '{"account":"a","balance":null}'


def test_python_dump_keeps_instance():
    assert Ledger(account="a", balance=BigInt(3)).model_dump()["balance"] == BigInt(3)


def test_json_schema_is_string():
    schema = Ledger.model_json_schema()
    balance = schema["properties"]["balance"]
    assert {"type": "string", "pattern": "^[+-]?[0-9]+$"} in balance["anyOf"]


class Transfer(BaseModel):
    amount: BigInt


def test_required_field_empty_string_dumps_null_and_reloads():
    transfer = Transfer.model_validate_json('{"amount": ""}')
    assert transfer.amount is None
    dumped = transfer.model_dump_json()
    assert dumped == '{"amount":null}'
    assert Transfer.model_validate_json(dumped).amount is None


def test_required_field_roundtrip_past_digit_limit():
    transfer = Transfer(amount=BigInt(10**5000))
    assert Transfer.model_validate_json(transfer.model_dump_json()).amount == BigInt(10**5000)
