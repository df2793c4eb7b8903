# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by findpay.

Every parse failure is a `ParseError` carrying a fixed, user-facing message and an
`ErrorKind` tag, so a caller can either show `str(error)` to the user or branch on
`error.kind` without matching message text.

Exception Hierarchy:
- FindPayError
    ├── ConfigError
    └── ParseError
        ├── MalformedCommandError
        ├── MissingFilterError
        ├── TooManyFiltersError
        ├── DuplicateFilterError
        ├── EmptyAmountError
        ├── EmptyDateError
        ├── EmptyRemarkError
        ├── InvalidAmountError
        └── InvalidDateError

Parse errors are raised at the first failing stage and are never fatal; the shell
that owns the input loop catches `ParseError` and reports the message.
"""
from __future__ import annotations

from enum import Enum

from findpay.messages import (
    MESSAGE_EMPTY_AMOUNT,
    MESSAGE_EMPTY_DATE,
    MESSAGE_EMPTY_REMARK,
    MESSAGE_INVALID_AMOUNT,
    MESSAGE_INVALID_DATE,
    MESSAGE_MISSING_FILTER,
    MESSAGE_TOO_MANY_FILTERS,
)


class ErrorKind(Enum):
    """Tag identifying which rule a parse attempt broke."""

    MALFORMED_COMMAND = "malformed_command"
    MISSING_FILTER = "missing_filter"
    TOO_MANY_FILTERS = "too_many_filters"
    DUPLICATE_FILTER = "duplicate_filter"
    EMPTY_AMOUNT = "empty_amount"
    EMPTY_DATE = "empty_date"
    EMPTY_REMARK = "empty_remark"
    INVALID_AMOUNT = "invalid_amount"
    INVALID_DATE = "invalid_date"


class FindPayError(Exception):
    """Base exception for findpay."""


class ConfigError(FindPayError):
    """Exception raised when a configuration file cannot be loaded or validated."""


class ParseError(FindPayError):
    """Exception raised when command arguments do not form a valid request."""

    kind: ErrorKind
    default_message: str = ""

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MalformedCommandError(ParseError):
    """Exception raised when the index is missing, repeated, or not a positive integer."""

    kind = ErrorKind.MALFORMED_COMMAND


class MissingFilterError(ParseError):
    """Exception raised when no filter marker is present."""

    kind = ErrorKind.MISSING_FILTER
    default_message = MESSAGE_MISSING_FILTER


class TooManyFiltersError(ParseError):
    """Exception raised when more than one distinct filter marker is present."""

    kind = ErrorKind.TOO_MANY_FILTERS
    default_message = MESSAGE_TOO_MANY_FILTERS


class DuplicateFilterError(ParseError):
    """Exception raised when the same filter marker is given more than once."""

    kind = ErrorKind.DUPLICATE_FILTER


class EmptyAmountError(ParseError):
    kind = ErrorKind.EMPTY_AMOUNT
    default_message = MESSAGE_EMPTY_AMOUNT


class EmptyDateError(ParseError):
    kind = ErrorKind.EMPTY_DATE
    default_message = MESSAGE_EMPTY_DATE


class EmptyRemarkError(ParseError):
    kind = ErrorKind.EMPTY_REMARK
    default_message = MESSAGE_EMPTY_REMARK


class InvalidAmountError(ParseError):
    """Exception raised when an amount is not a number with at most two decimals."""

    kind = ErrorKind.INVALID_AMOUNT
    default_message = MESSAGE_INVALID_AMOUNT


class InvalidDateError(ParseError):
    """Exception raised when a date is not strict YYYY-MM-DD or lies in the future."""

    kind = ErrorKind.INVALID_DATE
    default_message = MESSAGE_INVALID_DATE
