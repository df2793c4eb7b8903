# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""Monetary amount with at most two decimal places."""
from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, localcontext

AMOUNT_PATTERN = re.compile(r"\d+(?:\.\d{1,2})?", re.ASCII)
CENTS = Decimal("0.01")


def _to_cents(value: Decimal) -> Decimal:
    """Quantize `value` to cents without running out of context precision."""
    _, digits, exponent = value.as_tuple()
    with localcontext() as context:
        context.prec = max(context.prec, len(digits) + max(exponent, 0) + 2)
        return value.quantize(CENTS)


@dataclass(frozen=True, order=True)
class Amount:
    """A non-negative amount, always held at two decimal places."""

    value: Decimal

    def __post_init__(self) -> None:
        if not isinstance(self.value, Decimal):
            raise TypeError("Amount value must be a Decimal")
        if not self.value.is_finite() or self.value < 0:
            raise ValueError(f"Amount must be a non-negative number, got {self.value}")
        cents = _to_cents(self.value)
        if cents != self.value:
            raise ValueError(f"Amount has more than two decimal places: {self.value}")
        object.__setattr__(self, "value", cents)

    @classmethod
    def parse(cls, text: str) -> Amount:
        """
        Parse `text` such as "23.5" or "10" into an Amount.

        Only ASCII digits are accepted. Signs, exponents, thousands separators
        and more than two fractional digits are rejected.

        Raises:
            ValueError: If `text` is not a plain non-negative decimal.
        """
        text = text.strip()
        if not AMOUNT_PATTERN.fullmatch(text):
            raise ValueError(f"'{text}' is not a valid amount")
        try:
            return cls(Decimal(text))
        except InvalidOperation as error:
            raise ValueError(f"'{text}' is not a valid amount") from error

    def __str__(self) -> str:
        return str(self.value)
