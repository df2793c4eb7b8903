# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""Position of an entity in the displayed list."""
from __future__ import annotations

from dataclasses import dataclass

INDEX_MAX = 2**31 - 1


@dataclass(frozen=True, order=True)
class Index:
    """
    A 1-based display position.

    Users type one-based positions; code that indexes into a Python list should
    use `zero_based`.
    """

    one_based: int

    def __post_init__(self) -> None:
        if isinstance(self.one_based, bool) or not isinstance(self.one_based, int):
            raise TypeError("Index must be an int")
        if self.one_based < 1:
            raise ValueError(f"Index must be positive, got {self.one_based}")

    @classmethod
    def from_one_based(cls, value: int) -> Index:
        return cls(value)

    @classmethod
    def from_zero_based(cls, value: int) -> Index:
        return cls(value + 1)

    @property
    def zero_based(self) -> int:
        return self.one_based - 1

    def __str__(self) -> str:
        return str(self.one_based)
