import pytest

from osdsctl.exceptions import InputFormatError, UsageError
from osdsctl.validators import check_args_num, parse_non_negative, parse_size


def test_check_args_num_accepts_exact_count():
    assert check_args_num(["a", "b"], 2) == ["a", "b"]
    assert check_args_num(None, 0) == []


@pytest.mark.parametrize("args,expected", [([], 1), (["a", "b"], 1), (["a"], 0), (["a"], 2)])
def test_check_args_num_rejects_mismatch(args, expected):
    with pytest.raises(UsageError) as exc:
        check_args_num(args, expected)
    assert exc.value.expected == expected
    assert exc.value.got == len(args)


def test_parse_size():
    assert parse_size("100") == 100


@pytest.mark.parametrize("value", ["abc", "1.5", "", "0", "-3"])
def test_parse_size_rejects_bad_input(value):
    with pytest.raises(InputFormatError):
        parse_size(value)


def test_parse_size_names_the_argument():
    with pytest.raises(InputFormatError, match="new size"):
        parse_size("xyz", "new size")


def test_parse_non_negative_returns_text_unchanged():
    assert parse_non_negative("10", "limit") == "10"
    assert parse_non_negative("0", "offset") == "0"


@pytest.mark.parametrize("value", ["-1", "ten", ""])
def test_parse_non_negative_rejects_bad_input(value):
    with pytest.raises(InputFormatError, match="--limit"):
        parse_non_negative(value, "limit")


@pytest.mark.parametrize("value", ["1_000", " 7 ", "7\n", "١٢", "²"])
def test_parse_size_rejects_non_ascii_integer_forms(value):
    with pytest.raises(InputFormatError):
        parse_size(value)


def test_parse_size_accepts_explicit_plus_sign():
    assert parse_size("+5") == 5


@pytest.mark.parametrize("value", ["²", "١٢", "1_0", " 10", "+10"])
def test_parse_non_negative_rejects_non_ascii_integer_forms(value):
    with pytest.raises(InputFormatError):
        parse_non_negative(value, "limit")
