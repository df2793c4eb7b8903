import pytest

from findpay.cli_syntax import Prefix
from findpay.exceptions import DuplicateFilterError, ErrorKind
from findpay.parser.tokenizer import ArgumentTokenizer

ALL = (Prefix.AMOUNT, Prefix.DATE, Prefix.REMARK)


def test_tokenize_empty_string():
    argmap = ArgumentTokenizer.tokenize("", *ALL)
    assert argmap.get_preamble() == ""
    for prefix in ALL:
        assert argmap.get_value(prefix) is None
        assert argmap.get_all_values(prefix) == []


def test_tokenize_preamble_only_is_left_untouched():
    argmap = ArgumentTokenizer.tokenize("  1 2  ", *ALL)
    assert argmap.get_preamble() == "  1 2  "
    assert not any(argmap.is_present(prefix) for prefix in ALL)


def test_tokenize_single_prefix():
    argmap = ArgumentTokenizer.tokenize("1 a/23.50", *ALL)
    assert argmap.get_preamble() == "1 "
    assert argmap.get_value(Prefix.AMOUNT) == "23.50"
    assert argmap.get_value(Prefix.DATE) is None


def test_tokenize_value_keeps_inner_spaces():
    argmap = ArgumentTokenizer.tokenize("4 r/  cca shirt  ", *ALL)
    assert argmap.get_value(Prefix.REMARK) == "cca shirt"


def test_tokenize_multiple_prefixes_in_any_order():
    argmap = ArgumentTokenizer.tokenize("2 d/2023-01-01 a/10 r/food", *ALL)
    assert argmap.get_preamble() == "2 "
    assert argmap.get_value(Prefix.AMOUNT) == "10"
    assert argmap.get_value(Prefix.DATE) == "2023-01-01"
    assert argmap.get_value(Prefix.REMARK) == "food"


def test_tokenize_repeated_prefix_keeps_all_values_in_order():
    argmap = ArgumentTokenizer.tokenize("1 a/5 a/6 a/7", *ALL)
    assert argmap.get_all_values(Prefix.AMOUNT) == ["5", "6", "7"]
    assert argmap.get_value(Prefix.AMOUNT) == "7"


def test_tokenize_prefix_must_follow_whitespace():
    argmap = ArgumentTokenizer.tokenize("1 r/shirta/b", *ALL)
    assert argmap.get_value(Prefix.REMARK) == "shirta/b"
    assert argmap.get_value(Prefix.AMOUNT) is None


def test_tokenize_prefix_at_start_of_string():
    argmap = ArgumentTokenizer.tokenize("a/10", *ALL)
    assert argmap.get_preamble() == ""
    assert argmap.get_value(Prefix.AMOUNT) == "10"


def test_tokenize_empty_value():
    argmap = ArgumentTokenizer.tokenize("1 d/ ", *ALL)
    assert argmap.is_present(Prefix.DATE)
    assert argmap.get_value(Prefix.DATE) == ""


def test_tokenize_ignores_prefixes_not_requested():
    argmap = ArgumentTokenizer.tokenize("1 a/10 r/x", Prefix.AMOUNT)
    assert argmap.get_value(Prefix.AMOUNT) == "10 r/x"
    assert argmap.get_value(Prefix.REMARK) is None


def test_tokenize_unknown_marker_stays_in_preamble():
    argmap = ArgumentTokenizer.tokenize("1 x/10", *ALL)
    assert argmap.get_preamble() == "1 x/10"


def test_verify_no_duplicates_passes_for_single_values():
    argmap = ArgumentTokenizer.tokenize("1 a/5 d/2020-01-01", *ALL)
    argmap.verify_no_duplicate_prefixes_for(*ALL)


def test_verify_no_duplicates_names_repeated_prefixes():
    argmap = ArgumentTokenizer.tokenize("1 a/5 r/x a/5 r/y", *ALL)
    with pytest.raises(DuplicateFilterError) as excinfo:
        argmap.verify_no_duplicate_prefixes_for(*ALL)
    assert excinfo.value.kind is ErrorKind.DUPLICATE_FILTER
    assert str(excinfo.value) == (
        "Multiple values specified for the following single-valued field(s): a/ r/"
    )


def test_tokenize_prefix_after_non_ascii_space_is_not_a_marker():
    argmap = ArgumentTokenizer.tokenize("1\u00a0a/10", *ALL)
    assert argmap.get_preamble() == "1\u00a0a/10"
    assert argmap.get_value(Prefix.AMOUNT) is None


def test_tokenize_prefix_after_tab():
    argmap = ArgumentTokenizer.tokenize("1\ta/10", *ALL)
    assert argmap.get_value(Prefix.AMOUNT) == "10"
