#!/usr/bin/env python3

import logging
import re
from collections.abc import Sequence

from rabobank_hledger.models import TXN
from rabobank_hledger.schema import FIELD_SCHEMA, validate

logger = logging.getLogger(__name__)

# Nested quotes are not allowed in the export, so a field is simply
# everything between two quotes.
_COLUMN_REGEX = re.compile(r'"([^"]*)"')


def get_columns(csv_line: str) -> list[str]:
    """Returns the quoted fields of `csv_line` with the quotes removed."""
    return _COLUMN_REGEX.findall(csv_line)


def parse_line(csv_line: str, lineno: int | None = None) -> list[str]:
    """Extracts the fields of a line and logs any schema violations.

    The fields are returned as found, even when they do not fit the schema.
    """
    columns = get_columns(csv_line)
    violations = validate(columns)
    if violations:
        where = f"line {lineno}" if lineno is not None else "record"
        logger.warning(
            f"{where} does not match the SEPA CSV schema:\n\t"
            + "\n\t".join(violations)
        )
    return columns


def columns_to_txn(columns: Sequence[str]) -> TXN:
    """Maps fields onto a TXN, filling missing trailing fields with ''."""
    padded = list(columns[: len(FIELD_SCHEMA)])
    padded += [""] * (len(FIELD_SCHEMA) - len(padded))
    (
        owner_iban,
        currency,
        owner_bic,
        sequence_number,
        booking_date,
        value_date,
        amount,
        balance,
        payee_iban,
        payee_name,
        ultimate_name,
        initiating_name,
        payee_bic,
        code,
        batch_id,
        transaction_reference,
        mandate_reference,
        creditor_id,
        payment_reference,
        description_1,
        description_2,
        description_3,
        return_reason,
        original_amount,
        original_currency,
        exchange_rate,
    ) = padded
    return TXN(
        owner_iban=owner_iban,
        currency=currency,
        owner_bic=owner_bic,
        sequence_number=sequence_number,
        booking_date=booking_date,
        value_date=value_date,
        amount=amount,
        balance=balance,
        payee_iban=payee_iban,
        payee_name=payee_name,
        ultimate_name=ultimate_name,
        initiating_name=initiating_name,
        payee_bic=payee_bic,
        code=code,
        batch_id=batch_id,
        transaction_reference=transaction_reference,
        mandate_reference=mandate_reference,
        creditor_id=creditor_id,
        payment_reference=payment_reference,
        description_1=description_1,
        description_2=description_2,
        description_3=description_3,
        return_reason=return_reason,
        original_amount=original_amount,
        original_currency=original_currency,
        exchange_rate=exchange_rate,
    )
