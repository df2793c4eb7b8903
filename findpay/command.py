# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FindPaymentCommand`, the validated request produced by the parser.

A command pairs the index of the member whose payments are searched with exactly
one filter. It is immutable and holds nothing from the raw input; whatever executes
it against stored payments lives outside this package.
"""
from __future__ import annotations

from dataclasses import dataclass

from findpay.models.filters import AmountFilter, DateFilter, FindFilter, RemarkFilter
from findpay.models.index import Index

COMMAND_WORD = "findpayment"

MESSAGE_USAGE = (
    f"{COMMAND_WORD}: Finds payments of the member at INDEX that match one filter.\n"
    f"Parameters: INDEX [a/AMOUNT | d/DATE | r/REMARK]\n"
    f"Examples: {COMMAND_WORD} 1 a/23.50, "
    f"{COMMAND_WORD} 3 d/2023-12-30, "
    f"{COMMAND_WORD} 4 r/cca shirt"
)


@dataclass(frozen=True)
class FindPaymentCommand:
    """Index of the target member plus the single filter to apply."""

    index: Index
    filter: FindFilter

    def __post_init__(self) -> None:
        if not isinstance(self.filter, (AmountFilter, DateFilter, RemarkFilter)):
            raise TypeError(
                f"filter must be a FindFilter, got {type(self.filter).__name__}"
            )

    def __str__(self) -> str:
        return f"{COMMAND_WORD} {self.index} {self.filter}"
