#!/usr/bin/env python3

from __future__ import annotations

from dataclasses import dataclass
from re import Pattern
from typing import Literal

FieldType = Literal[
    "account-id",
    "currency-code",
    "bic",
    "sequence-id",
    "date",
    "amount",
    "free-text",
]


@dataclass(frozen=True)
class FieldSpec:
    index: int
    name: str
    type: FieldType
    max_length: int
    pattern: Pattern | None = None


@dataclass(frozen=True)
class TXN:
    owner_iban: str
    currency: str
    owner_bic: str
    sequence_number: str
    booking_date: str
    value_date: str
    amount: str
    balance: str
    payee_iban: str
    payee_name: str
    ultimate_name: str
    initiating_name: str
    payee_bic: str
    code: str
    batch_id: str
    transaction_reference: str
    mandate_reference: str
    creditor_id: str
    payment_reference: str
    description_1: str
    description_2: str
    description_3: str
    return_reason: str
    original_amount: str
    original_currency: str
    exchange_rate: str
