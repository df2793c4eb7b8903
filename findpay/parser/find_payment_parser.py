# findpay — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Implements `FindPaymentCommandParser`, which turns the argument text of a
`findpayment` command into a `FindPaymentCommand`.

Expected format:
    findpayment INDEX [a/AMOUNT | d/DATE | r/REMARK]

Examples:
    findpayment 1 a/23.50
    findpayment 3 d/2023-12-30
    findpayment 4 r/cca shirt

Parsing is a straight pipeline with no recovery:
    tokenize → index → filter cardinality → filter value → command

The first failing stage raises a `ParseError` subclass and nothing after it runs.
The parser keeps no state between calls, so one instance can be shared freely.
"""
from __future__ import annotations

import re
import string
from dataclasses import dataclass
from datetime import date

from findpay.cli_syntax import Prefix
from findpay.command import MESSAGE_USAGE, FindPaymentCommand
from findpay.config import FindPayConfig
from findpay.exceptions import (
    MalformedCommandError,
    MissingFilterError,
    ParseError,
    TooManyFiltersError,
)
from findpay.logger import logger
from findpay.messages import invalid_command_format
from findpay.models.filters import AmountFilter, DateFilter, FindFilter, RemarkFilter
from findpay.models.index import Index
from findpay.parser.parser_utils import (
    parse_amount,
    parse_date,
    parse_index,
    parse_remark,
)
from findpay.parser.tokenizer import ArgumentMultimap, ArgumentTokenizer

FILTER_PREFIXES: tuple[Prefix, ...] = Prefix.filters()
WHITESPACE = re.compile(r"\s+", re.ASCII)


@dataclass(frozen=True)
class ParseOutcome:
    """Result of `FindPaymentCommandParser.try_parse()`: a command or an error."""

    command: FindPaymentCommand | None = None
    error: ParseError | None = None

    def __post_init__(self) -> None:
        if (self.command is None) == (self.error is None):
            raise ValueError("ParseOutcome needs exactly one of command or error")

    @property
    def ok(self) -> bool:
        return self.command is not None


class FindPaymentCommandParser:
    """
    Parses `findpayment` arguments into a `FindPaymentCommand`.

    Args:
        config (FindPayConfig | None): Index bound and time zone for "today".
        today (date | None): Fixed reference date for the not-in-the-future rule.
            When omitted, the current date in the configured zone is read on every
            parse.
    """

    def __init__(
        self,
        config: FindPayConfig | None = None,
        today: date | None = None,
    ) -> None:
        self.config: FindPayConfig = config or FindPayConfig()
        self._today: date | None = today

    def parse(self, args: str) -> FindPaymentCommand:
        """
        Parse the text following the command word.

        Raises:
            MalformedCommandError: Missing, repeated, or invalid index.
            DuplicateFilterError: A filter marker was given more than once.
            MissingFilterError: No filter marker was given.
            TooManyFiltersError: More than one distinct filter marker was given.
            EmptyAmountError, InvalidAmountError: Bad `a/` value.
            EmptyDateError, InvalidDateError: Bad `d/` value.
            EmptyRemarkError: Blank `r/` value.
        """
        argmap = ArgumentTokenizer.tokenize(args, *FILTER_PREFIXES)
        logger.debug("Tokenized findpayment args %r -> %r", args, argmap)
        try:
            index = self._parse_index(argmap)
            self._validate_prefix_usage(argmap)
            command = self._build_command(argmap, index)
        except ParseError as error:
            logger.debug("findpayment %r rejected (%s)", args, error.kind.value)
            raise
        logger.debug("Parsed findpayment command: %s", command)
        return command

    def try_parse(self, args: str) -> ParseOutcome:
        """Parse like `parse()`, but return the error instead of raising it."""
        try:
            return ParseOutcome(command=self.parse(args))
        except ParseError as error:
            return ParseOutcome(error=error)

    def today(self) -> date:
        return self._today or self.config.today()

    def _parse_index(self, argmap: ArgumentMultimap) -> Index:
        preamble = argmap.get_preamble().strip(string.whitespace)
        if not preamble:
            raise MalformedCommandError(invalid_command_format(MESSAGE_USAGE))

        tokens = WHITESPACE.split(preamble)
        if len(tokens) != 1:
            raise MalformedCommandError(invalid_command_format(MESSAGE_USAGE))

        try:
            return parse_index(tokens[0], maximum=self.config.max_index)
        except ValueError as error:
            raise MalformedCommandError(
                invalid_command_format(MESSAGE_USAGE)
            ) from error

    def _validate_prefix_usage(self, argmap: ArgumentMultimap) -> None:
        argmap.verify_no_duplicate_prefixes_for(*FILTER_PREFIXES)

        filters_used = sum(argmap.is_present(prefix) for prefix in FILTER_PREFIXES)
        if filters_used == 0:
            raise MissingFilterError()
        if filters_used > 1:
            raise TooManyFiltersError()

    def _build_command(self, argmap: ArgumentMultimap, index: Index) -> FindPaymentCommand:
        for prefix in FILTER_PREFIXES:
            value = argmap.get_value(prefix)
            if value is not None:
                return FindPaymentCommand(index, self._parse_filter(prefix, value))
        raise MissingFilterError()

    def _parse_filter(self, prefix: Prefix, value: str) -> FindFilter:
        if prefix is Prefix.AMOUNT:
            return AmountFilter(parse_amount(value))
        elif prefix is Prefix.REMARK:
            return RemarkFilter(parse_remark(value))
        elif prefix is Prefix.DATE:
            return DateFilter(parse_date(value, today=self.today()))
        raise ValueError(f"Not a filter prefix: {prefix!r}")
