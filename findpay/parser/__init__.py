"""
findpay

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .find_payment_parser import FindPaymentCommandParser, ParseOutcome
from .tokenizer import ArgumentMultimap, ArgumentTokenizer

__all__ = [
    "ArgumentMultimap",
    "ArgumentTokenizer",
    "FindPaymentCommandParser",
    "ParseOutcome",
]
