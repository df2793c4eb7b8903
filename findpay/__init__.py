"""
findpay

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command import FindPaymentCommand
from .config import FindPayConfig, load_config
from .exceptions import ErrorKind, FindPayError, ParseError
from .logger import logger
from .parser import FindPaymentCommandParser, ParseOutcome

__all__ = [
    "ErrorKind",
    "FindPayConfig",
    "FindPayError",
    "FindPaymentCommand",
    "FindPaymentCommandParser",
    "ParseError",
    "ParseOutcome",
    "load_config",
    "logger",
]
