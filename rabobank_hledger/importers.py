#!/usr/bin/env python3

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from rabobank_hledger.config import Config
from rabobank_hledger.models import TXN
from rabobank_hledger.output import RunContext, basename
from rabobank_hledger.parser import columns_to_txn, parse_line
from rabobank_hledger.postings import make_entry
from rabobank_hledger.schema import FIELD_NAMES

logger = logging.getLogger(__name__)


@dataclass
class RabobankCsvImporter:
    """Converts CSV exports of the Dutch Rabobank into hledger journals."""

    config: Config = field(default_factory=Config)
    fields: tuple[str, ...] = FIELD_NAMES
    delimiter: str = ","
    quotechar: str = '"'

    @property
    def expected_header(self) -> str:
        return self.delimiter.join(
            [f"{self.quotechar}{field}{self.quotechar}" for field in self.fields]
        )

    def extract(self, fname: str) -> Iterator[TXN]:
        """Yields one TXN per record, skipping the header and blank lines."""
        with open(fname, encoding=self.config.file_encoding) as f:
            header = f.readline().strip().lstrip("\ufeff")
            if header != self.expected_header:
                logger.info(f"Unexpected header in {fname}: {header!r}")

            for i, line in enumerate(f, start=2):
                if not line.strip():
                    logger.debug(f"Skipping blank line {i} of {fname}")
                    continue
                logger.debug(f"Parsing {line=}")
                yield columns_to_txn(parse_line(line, lineno=i))

    def convert(self, fname: str, context: RunContext) -> list[str]:
        """Appends every record of `fname` to the journal of its account.

        Returns the account of each record, in file order.
        """
        base = basename(fname)
        accounts = []
        for txn in self.extract(fname):
            entry = make_entry(txn, self.config)
            accounts.append(
                context.route(
                    base=base,
                    account=txn.owner_iban,
                    entry=entry,
                    extension=self.config.extension,
                )
            )
        logger.info(f"Converted {len(accounts)} records from {fname}")
        return accounts


def distinct(accounts: Iterable[str]) -> list[str]:
    """Removes duplicates, keeping the first occurrence of each account."""
    return list(dict.fromkeys(accounts))
