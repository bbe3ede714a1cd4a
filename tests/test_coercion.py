import pytest

from nodeedit.coercion import coerce
from nodeedit.rows import value_to_text


def test_keywords():
    assert coerce("null") is None
    assert coerce("true") is True
    assert coerce("false") is False


def test_keywords_are_case_sensitive():
    assert coerce("True") == "True"
    assert coerce("NULL") == "NULL"


def test_numbers():
    assert coerce("42") == 42 and isinstance(coerce("42"), int)
    assert coerce("-3") == -3
    assert coerce("1.5") == 1.5
    assert coerce("0") == 0


@pytest.mark.parametrize(
    "raw",
    ["042", "007", "1.", ".5", "1e3", " 5", "5 ", "+5", "-0", "1_000", "Infinity", "inf", "nan", "NaN", ""],
)
def test_lossy_numbers_stay_strings(raw):
    assert coerce(raw) == raw
    assert isinstance(coerce(raw), str)


def test_plain_strings():
    assert coerce("abc") == "abc"
    assert coerce("Bob Smith") == "Bob Smith"


@pytest.mark.parametrize("value", [None, True, False, 0, 31, -7, 1.5, "Bob", "42 apples"])
def test_scalar_text_round_trip(value):
    assert coerce(value_to_text(value)) == value
