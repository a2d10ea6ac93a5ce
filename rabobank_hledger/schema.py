#!/usr/bin/env python3

"""Column layout of the Rabobank SEPA CSV export (2018 format).

https://www.rabobank.nl/images/formaatbeschrijving-csv-extensie_29933458.pdf
"""

import re
from collections.abc import Sequence

from rabobank_hledger.models import FieldSpec

DATE_REGEX = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
BBAN_REGEX = re.compile(r"P?[0-9]+", flags=re.IGNORECASE)
IBAN_REGEX = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{4,}", flags=re.IGNORECASE)
AMOUNT_REGEX = re.compile(r"[+-][0-9]+,?[0-9]*")

# Account ids and dates may be left empty.
ACCOUNT_ID_REGEX = re.compile(
    rf"|{BBAN_REGEX.pattern}|{IBAN_REGEX.pattern}", flags=re.IGNORECASE
)
OPTIONAL_DATE_REGEX = re.compile(rf"|{DATE_REGEX.pattern}")

# (name, type, max length) in column order
_COLUMNS = (
    ("IBAN/BBAN", "account-id", 34),
    ("Munt", "currency-code", 4),
    ("BIC", "bic", 11),
    ("Volgnr", "sequence-id", 18),
    ("Datum", "date", 10),
    ("Rentedatum", "date", 10),
    ("Bedrag", "amount", 18),
    ("Saldo na trn", "amount", 18),
    ("Tegenrekening IBAN/BBAN", "account-id", 34),
    ("Naam tegenpartij", "free-text", 70),
    ("Naam uiteindelijke partij", "free-text", 70),
    ("Naam initiërende partij", "free-text", 70),
    ("BIC tegenpartij", "bic", 15),
    ("Code", "free-text", 4),
    ("Batch ID", "free-text", 35),
    ("Transactiereferentie", "free-text", 35),
    ("Machtigingskenmerk", "free-text", 35),
    ("Incassant ID", "free-text", 35),
    ("Betalingskenmerk", "free-text", 35),
    ("Omschrijving-1", "free-text", 140),
    ("Omschrijving-2", "free-text", 140),
    ("Omschrijving-3", "free-text", 140),
    ("Reden retour", "free-text", 75),
    ("Oorspr bedrag", "free-text", 18),
    ("Oorspr munt", "free-text", 11),
    ("Koers", "free-text", 11),
)

_PATTERNS = {
    "account-id": ACCOUNT_ID_REGEX,
    "date": OPTIONAL_DATE_REGEX,
    "amount": AMOUNT_REGEX,
}

FIELD_SCHEMA: tuple[FieldSpec, ...] = tuple(
    FieldSpec(
        index=i,
        name=name,
        type=field_type,  # type: ignore
        max_length=max_length,
        pattern=_PATTERNS.get(field_type),
    )
    for i, (name, field_type, max_length) in enumerate(_COLUMNS)
)

FIELD_NAMES: tuple[str, ...] = tuple(spec.name for spec in FIELD_SCHEMA)


def matches(spec: FieldSpec, value: str) -> bool:
    """Checks `value` against the format of its column."""
    return spec.pattern is None or spec.pattern.fullmatch(value) is not None


def validate(columns: Sequence[str]) -> list[str]:
    """Returns every schema violation found in `columns`, empty if none."""
    violations = []
    if len(columns) != len(FIELD_SCHEMA):
        violations.append(
            f"expected {len(FIELD_SCHEMA)} fields, found {len(columns)}"
        )
    for spec, value in zip(FIELD_SCHEMA, columns):
        if len(value) > spec.max_length:
            violations.append(
                f"field {spec.index + 1} ({spec.name}) is {len(value)} characters, "
                f"at most {spec.max_length} allowed: {value!r}"
            )
        if not matches(spec, value):
            violations.append(
                f"field {spec.index + 1} ({spec.name}) is not a valid {spec.type}: "
                f"{value!r}"
            )
    return violations
