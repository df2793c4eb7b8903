import dataclasses
from datetime import date

import pytest

from findpay.command import COMMAND_WORD, MESSAGE_USAGE, FindPaymentCommand
from findpay.models.filters import DateFilter, RemarkFilter
from findpay.models.index import Index


def test_command_str():
    command = FindPaymentCommand(Index(3), DateFilter(date(2023, 12, 30)))
    assert str(command) == "findpayment 3 d/2023-12-30"


def test_command_is_immutable():
    command = FindPaymentCommand(Index(1), RemarkFilter("x"))
    with pytest.raises(dataclasses.FrozenInstanceError):
        command.index = Index(2)


def test_command_requires_a_filter_variant():
    with pytest.raises(TypeError):
        FindPaymentCommand(Index(1), "r/x")


def test_usage_mentions_format_and_examples():
    assert MESSAGE_USAGE.startswith(COMMAND_WORD)
    assert "INDEX [a/AMOUNT | d/DATE | r/REMARK]" in MESSAGE_USAGE
    assert "findpayment 4 r/cca shirt" in MESSAGE_USAGE
