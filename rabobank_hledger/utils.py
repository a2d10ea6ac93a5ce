#!/usr/bin/env python3

import re

SEPARATOR_NEWLINE = " => "

_DATE_REGEX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")
_SPECIAL_CHARACTERS = re.compile(r"[:;|\[\]]")
_WHITESPACE = re.compile(r"\s+")


def is_blank(s: str | None) -> bool:
    return s is None or not s.strip()


def convert_date(s: str | None) -> str | None:
    """Converts Rabobank's yyyy-mm-dd into hledger's yyyy/mm/dd."""
    if is_blank(s):
        return s
    return _DATE_REGEX.sub(r"\1/\2/\3", s)  # type: ignore


def _sanitize(s: str) -> str:
    s = s.replace("\n", SEPARATOR_NEWLINE)
    s = _SPECIAL_CHARACTERS.sub(" ", s)
    return _WHITESPACE.sub(" ", s.strip())


def soft_format(unformatted: str | None) -> str | None:
    """Somewhat escapes a string for hledger, keeping its case."""
    if is_blank(unformatted):
        return unformatted
    return _sanitize(unformatted)  # type: ignore


def full_format(unformatted: str | None) -> str | None:
    """Escapes a string for use in an hledger account name."""
    if is_blank(unformatted):
        return unformatted
    return _sanitize(unformatted.lower())  # type: ignore
