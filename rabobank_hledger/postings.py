#!/usr/bin/env python3

from __future__ import annotations

import logging
import re
from decimal import Decimal

from beancount.core.data import Amount, Posting

from rabobank_hledger.config import Config
from rabobank_hledger.models import TXN
from rabobank_hledger.utils import convert_date, full_format, is_blank, soft_format

logger = logging.getLogger(__name__)

SEPARATOR_PAYEE = " | "
POSTING_INDENT = "  "
ACCOUNT_SEPARATOR = "  "

_NUMBER_REGEX = re.compile(r"[+-]?[0-9]+(\.[0-9]*)?")


class AmountError(ValueError):
    """Raised when the amount column of a record is not a number."""


def normalize_amount(amount: str) -> str:
    """Converts the decimal comma to a point and checks the result is a number."""
    normalized = amount.strip().replace(",", ".")
    if not _NUMBER_REGEX.fullmatch(normalized):
        raise AmountError(f"Could not parse amount {amount!r}")
    return normalized


def parse_amount(amount: str) -> Decimal:
    return Decimal(normalize_amount(amount))


def _formatted(s: str, formatter) -> str:
    return "" if is_blank(s) else formatter(s)


def describe(txn: TXN) -> str:
    """Builds the memo from the description, reference and mandate columns.

    The result still has to go through `soft_format`.
    """
    description = (txn.description_1 + txn.description_2 + txn.description_3).strip()
    extra = " ".join(
        part.strip()
        for part in (txn.mandate_reference, txn.creditor_id)
        if not is_blank(part)
    ).strip()

    memo = description
    if extra:
        memo = f"{memo} {extra}"
    if not is_blank(txn.payment_reference):
        memo = f"{txn.payment_reference} {memo}"
    if not is_blank(txn.payee_iban):
        memo = f"[{txn.payee_iban}] {memo}"
    return memo


def make_header(txn: TXN, config: Config) -> str:
    payee = _formatted(txn.payee_name, soft_format)
    narration = _formatted(describe(txn), soft_format)

    header = f"{convert_date(txn.booking_date)} {config.flag} "
    if not is_blank(txn.sequence_number):
        header += f"({txn.sequence_number}) "
    if payee and narration:
        header += payee + SEPARATOR_PAYEE + narration
    else:
        header += payee + narration
    return header.rstrip()


def make_postings(txn: TXN, config: Config) -> list[Posting]:
    """Returns the balanced asset and import postings of a transaction.

    The asset posting keeps the amount as written in the export under the
    `amount_text` meta key, so an explicit `+` survives formatting.
    """
    amount_text = normalize_amount(txn.amount)
    amount = Decimal(amount_text)
    code = _formatted(txn.code, full_format)
    return [
        Posting(
            account=config.asset_account,
            units=Amount(number=amount, currency=config.currency),  # type: ignore
            cost=None,
            price=None,
            flag=None,
            meta={"amount_text": amount_text},
        ),
        Posting(
            account=f"{config.import_account}:{code}",
            units=Amount(number=-amount, currency=config.currency),  # type: ignore
            cost=None,
            price=None,
            flag=None,
            meta=None,
        ),
    ]


def format_posting(posting: Posting) -> str:
    number = (posting.meta or {}).get(
        "amount_text", format(posting.units.number, "f")
    )
    return (
        f"{POSTING_INDENT}{posting.account}{ACCOUNT_SEPARATOR}"
        f"{posting.units.currency} {number}"
    )


def make_entry(txn: TXN, config: Config | None = None) -> str:
    """Renders one transaction as an hledger journal entry.

    Raises:
      AmountError: if the amount of the transaction is not a number.
    """
    config = config or Config()
    postings = make_postings(txn, config)
    lines = [make_header(txn, config)]
    lines.extend(format_posting(posting) for posting in postings)
    entry = "\n".join(lines) + "\n\n"
    logger.debug(f"Converted {txn=} to {entry=}")
    return entry
