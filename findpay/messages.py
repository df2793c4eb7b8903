# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""User-facing message strings shared by the findpay parser and its errors."""
from __future__ import annotations

from typing import Iterable

MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_DUPLICATE_FIELDS = (
    "Multiple values specified for the following single-valued field(s): "
)

MESSAGE_MISSING_FILTER = "Please provide one filter: a/AMOUNT, d/DATE or r/REMARK"
MESSAGE_TOO_MANY_FILTERS = "Please specify only one filter at a time."
MESSAGE_INVALID_AMOUNT = "Invalid amount: must be positive and ≤ 2 decimal places."
MESSAGE_INVALID_DATE = (
    "Invalid date. Please use the strict format YYYY-MM-DD "
    "and ensure it is not in the future."
)
MESSAGE_EMPTY_REMARK = "Remark cannot be empty."
MESSAGE_EMPTY_AMOUNT = "Amount cannot be empty."
MESSAGE_EMPTY_DATE = "Date cannot be empty."


def invalid_command_format(usage: str) -> str:
    """Wrap a command usage string in the generic invalid-format message."""
    return MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage)


def duplicate_fields(prefixes: Iterable[str]) -> str:
    """Name every marker that was given more than once."""
    return MESSAGE_DUPLICATE_FIELDS + " ".join(prefixes)
