#!/usr/bin/env python3

import logging
import os
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

EXTENSION_HLEDGER = ".journal"


def basename(fname: str) -> str:
    """Returns `fname` without its file extension."""
    return os.path.splitext(fname)[0]


def output_path(base: str, account: str, extension: str = EXTENSION_HLEDGER) -> str:
    return f"{base}#{account}{extension}"


@dataclass
class RunContext:
    """Output files already truncated during the current run.

    Share one instance across every input file of a run, so an account that
    shows up in several inputs still has its journal deleted only once.
    """

    truncated: set[str] = field(default_factory=set)
    file_encoding: str = "utf-8"

    def route(
        self,
        base: str,
        account: str,
        entry: str,
        extension: str = EXTENSION_HLEDGER,
    ) -> str:
        """Appends `entry` to the journal of `account` and returns `account`.

        The first time a journal is seen in this run any existing file at that
        path is deleted. OSErrors are not caught.
        """
        path = output_path(base, account, extension)
        if path not in self.truncated:
            if os.path.exists(path):
                logger.info(f"Deleting existing journal {path}")
                os.remove(path)
            self.truncated.add(path)

        with open(path, "a", encoding=self.file_encoding) as f:
            f.write(entry)
        return account
