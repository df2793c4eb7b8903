# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Converts raw fragment text into findpay value types.

Each function takes the text exactly as the tokenizer produced it, checks for the
empty case first, then delegates format rules to the value type and translates its
`ValueError` into the matching `ParseError`.

Functions:
- parse_index: Convert an index token into an `Index`.
- parse_amount: Convert `a/` text into an `Amount`.
- parse_date: Convert `d/` text into a strict, non-future `date`.
- parse_remark: Strip `r/` text and reject blanks.
"""
from __future__ import annotations

import string
from datetime import date

from findpay.exceptions import (
    EmptyAmountError,
    EmptyDateError,
    EmptyRemarkError,
    InvalidAmountError,
    InvalidDateError,
)
from findpay.models.amount import Amount
from findpay.models.index import INDEX_MAX, Index
from findpay.models.strict_date import parse_strict_date


def is_non_zero_unsigned_integer(text: str, maximum: int = INDEX_MAX) -> bool:
    """Return True if `text` is plain ASCII digits with a value in 1..maximum."""
    if not text.isascii() or not text.isdigit():
        return False
    return 0 < int(text) <= maximum


def parse_index(token: str, maximum: int = INDEX_MAX) -> Index:
    """
    Parse a one-based index token.

    Raises:
        ValueError: If `token` is not a positive integer no larger than `maximum`.
    """
    token = token.strip(string.whitespace)
    if not is_non_zero_unsigned_integer(token, maximum):
        raise ValueError(f"Index is not a non-zero unsigned integer: '{token}'")
    return Index.from_one_based(int(token))


def parse_amount(text: str) -> Amount:
    if not text.strip():
        raise EmptyAmountError()
    try:
        return Amount.parse(text)
    except ValueError as error:
        raise InvalidAmountError() from error


def parse_remark(text: str) -> str:
    remark = text.strip()
    if not remark:
        raise EmptyRemarkError()
    return remark


def parse_date(text: str, today: date | None = None) -> date:
    if not text.strip():
        raise EmptyDateError()
    try:
        return parse_strict_date(text, today=today)
    except ValueError as error:
        raise InvalidDateError() from error
