import pytest

from triewebkit.parameter_parser import parse, validate

EMAIL_PATTERN = r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$"


def test_parse_int():
    assert parse("123", int) == 123


def test_parse_float():
    assert parse("3.14", float) == pytest.approx(3.14)


def test_parse_str_is_identity():
    assert parse("hello", str) == "hello"


def test_parse_int_reads_leading_digits():
    assert parse("12abc", int) == 12


def test_parse_int_rejects_non_numeric():
    with pytest.raises(ValueError):
        parse("abc", int)


def test_parse_float_rejects_non_numeric():
    with pytest.raises(ValueError):
        parse("x1.5", float)


def test_parse_int_out_of_range():
    with pytest.raises(OverflowError):
        parse("99999999999", int)


def test_parse_unsupported_kind():
    with pytest.raises(TypeError):
        parse("1", list)


def test_validate_email():
    assert validate("test@example.com", EMAIL_PATTERN)
    assert not validate("not-an-email", EMAIL_PATTERN)


def test_validate_requires_full_match():
    assert validate("123", r"\d+")
    assert not validate("123a", r"\d+")