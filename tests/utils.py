#!/usr/bin/env python3

import random
import string

from rabobank_hledger.schema import FIELD_NAMES


def random_string(size: int, letters: bool = False, digits: bool = False):
    population = ""
    if letters:
        population += string.ascii_uppercase
    if digits:
        population += string.digits
    return "".join(random.choices(population=population, k=size))


def fake_iban():
    return "NL" + random_string(size=2, digits=True) + "RABO" + random_string(
        size=10, digits=True
    )


def make_columns(kwargs: dict[str, str]) -> list[str]:
    """Returns 26 columns, all blank except the amounts and the given ones."""
    csv_row = dict.fromkeys(FIELD_NAMES, "")
    csv_row["Bedrag"] = "+0,00"
    csv_row["Saldo na trn"] = "+0,00"
    csv_row.update(kwargs)
    return list(csv_row.values())


def columns_to_str(columns) -> str:
    return ",".join([f'"{column}"' for column in columns])


def header() -> str:
    return columns_to_str(FIELD_NAMES)
