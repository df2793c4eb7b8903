# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Prefix`, the closed set of label markers recognized in command arguments.

Each member maps to the literal token a user types in front of a value. The
`PREAMBLE` member has an empty marker and stands for the unlabeled text that
precedes the first recognized label.

Example:
    Prefix("a/") → Prefix.AMOUNT
    Prefix.DATE.marker → "d/"
"""
from __future__ import annotations

from enum import Enum


class Prefix(Enum):
    """
    Label markers accepted by the find-payment command.

    Members:
        PREAMBLE: Unlabeled leading text (holds the index).
        AMOUNT: `a/AMOUNT`
        DATE: `d/DATE`
        REMARK: `r/REMARK`
    """

    PREAMBLE = ""
    AMOUNT = "a/"
    DATE = "d/"
    REMARK = "r/"

    @property
    def marker(self) -> str:
        return self.value

    @classmethod
    def filters(cls) -> tuple[Prefix, ...]:
        """Return the labeled prefixes in dispatch order."""
        return (cls.AMOUNT, cls.REMARK, cls.DATE)

    def __str__(self) -> str:
        return self.value
