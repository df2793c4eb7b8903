# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Splits a raw argument string into a preamble and labeled fragments.

`ArgumentTokenizer.tokenize()` is purely structural: it finds every occurrence of the
requested markers and slices the text between them. It never judges what a value
contains. Repeated markers are all kept, in input order, so the caller can report
duplicates instead of silently picking one.

A marker only counts when it starts the string or follows ASCII whitespace, so the `a/`
inside `shirta/b` stays part of the surrounding text.

Example:
    argmap = ArgumentTokenizer.tokenize("1 a/23.50 r/lunch", Prefix.AMOUNT, Prefix.REMARK)
    argmap.get_preamble()            # "1"
    argmap.get_value(Prefix.AMOUNT)  # "23.50"
"""
from __future__ import annotations

import re
from collections import defaultdict
from dataclasses import dataclass

from findpay.cli_syntax import Prefix
from findpay.exceptions import DuplicateFilterError
from findpay.messages import duplicate_fields


@dataclass(frozen=True)
class PrefixPosition:
    """Where a marker starts in the argument string."""

    prefix: Prefix
    start: int

    @property
    def value_start(self) -> int:
        return self.start + len(self.prefix.marker)


class ArgumentMultimap:
    """
    Maps each prefix to every value given for it, in input order.

    The preamble is stored under `Prefix.PREAMBLE` exactly as it appeared in the
    input. Labeled values are stripped of surrounding whitespace.
    """

    def __init__(self) -> None:
        self._values: dict[Prefix, list[str]] = defaultdict(list)

    def put(self, prefix: Prefix, value: str) -> None:
        self._values[prefix].append(value)

    def get_value(self, prefix: Prefix) -> str | None:
        """Return the last value recorded for `prefix`, or None if it never appeared."""
        values = self._values.get(prefix)
        if not values:
            return None
        return values[-1]

    def get_all_values(self, prefix: Prefix) -> list[str]:
        return list(self._values.get(prefix, []))

    def get_preamble(self) -> str:
        return self.get_value(Prefix.PREAMBLE) or ""

    def is_present(self, prefix: Prefix) -> bool:
        return bool(self._values.get(prefix))

    def verify_no_duplicate_prefixes_for(self, *prefixes: Prefix) -> None:
        """
        Raise if any of `prefixes` was given more than once.

        Raises:
            DuplicateFilterError: Names every repeated marker.
        """
        duplicated = [
            prefix.marker
            for prefix in dict.fromkeys(prefixes)
            if len(self._values.get(prefix, [])) > 1
        ]
        if duplicated:
            raise DuplicateFilterError(duplicate_fields(duplicated))

    def __repr__(self) -> str:
        values = {prefix.name: list(vals) for prefix, vals in self._values.items()}
        return f"ArgumentMultimap({values})"


class ArgumentTokenizer:
    """Tokenizes argument strings of the form `preamble <prefix>value <prefix>value ...`."""

    @staticmethod
    def tokenize(args: str, *prefixes: Prefix) -> ArgumentMultimap:
        """
        Split `args` on the given prefixes.

        Args:
            args (str): Raw text following the command keyword.
            *prefixes (Prefix): Markers to recognize. Any other text, including
                markers not listed here, stays inside the surrounding fragment.

        Returns:
            ArgumentMultimap: The preamble plus every labeled value.
        """
        positions = ArgumentTokenizer._find_all_prefix_positions(args, prefixes)
        return ArgumentTokenizer._extract_arguments(args, positions)

    @staticmethod
    def _find_all_prefix_positions(
        args: str, prefixes: tuple[Prefix, ...]
    ) -> list[PrefixPosition]:
        positions: list[PrefixPosition] = []
        for prefix in dict.fromkeys(prefixes):
            if prefix is Prefix.PREAMBLE:
                continue
            pattern = re.compile(
                rf"(?:^|(?<=\s)){re.escape(prefix.marker)}", re.ASCII
            )
            positions.extend(
                PrefixPosition(prefix, match.start()) for match in pattern.finditer(args)
            )
        positions.sort(key=lambda position: position.start)
        return positions

    @staticmethod
    def _extract_arguments(
        args: str, positions: list[PrefixPosition]
    ) -> ArgumentMultimap:
        argmap = ArgumentMultimap()
        first_start = positions[0].start if positions else len(args)
        argmap.put(Prefix.PREAMBLE, args[:first_start])

        for current, following in zip(positions, positions[1:] + [None]):
            end = following.start if following else len(args)
            argmap.put(current.prefix, args[current.value_start : end].strip())
        return argmap
