# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Filter variants for the find-payment command.

`FindFilter` is a tagged union: a request carries exactly one of `AmountFilter`,
`DateFilter` or `RemarkFilter`, and `kind` tells them apart without isinstance
chains.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import ClassVar, Union

from findpay.models.amount import Amount
from findpay.cli_syntax import Prefix


class FilterKind(Enum):
    """Which criterion a filter narrows on, keyed to its label marker."""

    AMOUNT = Prefix.AMOUNT
    DATE = Prefix.DATE
    REMARK = Prefix.REMARK

    @property
    def prefix(self) -> Prefix:
        return self.value

    @classmethod
    def from_prefix(cls, prefix: Prefix) -> FilterKind:
        return cls(prefix)


@dataclass(frozen=True)
class AmountFilter:
    kind: ClassVar[FilterKind] = FilterKind.AMOUNT
    amount: Amount

    def __str__(self) -> str:
        return f"{self.kind.prefix}{self.amount}"


@dataclass(frozen=True)
class DateFilter:
    kind: ClassVar[FilterKind] = FilterKind.DATE
    date: date

    def __str__(self) -> str:
        return f"{self.kind.prefix}{self.date.isoformat()}"


@dataclass(frozen=True)
class RemarkFilter:
    kind: ClassVar[FilterKind] = FilterKind.REMARK
    remark: str

    def __post_init__(self) -> None:
        if not self.remark.strip():
            raise ValueError("Remark cannot be blank")

    def __str__(self) -> str:
        return f"{self.kind.prefix}{self.remark}"


FindFilter = Union[AmountFilter, DateFilter, RemarkFilter]
