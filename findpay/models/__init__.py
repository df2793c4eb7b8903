"""
findpay

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .amount import Amount
from .filters import AmountFilter, DateFilter, FilterKind, FindFilter, RemarkFilter
from .index import INDEX_MAX, Index
from .strict_date import parse_strict_date, today_in

__all__ = [
    "Amount",
    "AmountFilter",
    "DateFilter",
    "FilterKind",
    "FindFilter",
    "INDEX_MAX",
    "Index",
    "RemarkFilter",
    "parse_strict_date",
    "today_in",
]
