import math

import pytest

from engine import run
from errors import EmptyInputError, InvalidCapacityError, VisualizerError
from references import parse_capacity, parse_references, to_token


# --- Reference parsing ---

@pytest.mark.parametrize("raw, expected", [
    ("1 2 3", (1, 2, 3)),
    ("1,2,3", (1, 2, 3)),
    ("  1, 2,,3\t\n4 ,  ", (1, 2, 3, 4)),
    (",,,7", (7,)),
    ("a b a", ("a", "b", "a")),
    ("1 a 2 b", (1, "a", 2, "b")),
])
def test_parse_references_splits_on_whitespace_and_commas(raw, expected):
    assert parse_references(raw) == expected


def test_numeric_tokens_become_numbers():
    refs = parse_references("1 -3 1.5 007 1.0 1e3")
    assert refs == (1, -3, 1.5, 7, 1, 1000)
    assert all(isinstance(r, (int, float)) for r in refs)
    assert isinstance(refs[4], int)


def test_non_numeric_tokens_stay_verbatim():
    assert parse_references("A a 1a nan inf -0x10 0x1g 0b2") == (
        "A", "a", "1a", "nan", "inf", "-0x10", "0x1g", "0b2",
    )


@pytest.mark.parametrize("text, expected", [
    ("0x10", 16),
    ("0XfF", 255),
    ("0o7", 7),
    ("0b11", 3),
])
def test_prefixed_integers_become_numbers(text, expected):
    assert to_token(text) == expected
    assert isinstance(to_token(text), int)


def test_hex_and_decimal_name_the_same_page():
    assert parse_references("0x10 16") == (16, 16)
    steps, totals = run(parse_references("0x10 16"), 2)
    assert totals.hits == 1


def test_number_and_string_are_distinct_pages():
    refs = parse_references("1 x")
    assert refs[0] == 1
    assert refs[0] != "1"


@pytest.mark.parametrize("text, expected", [
    ("Infinity", math.inf),
    ("+Infinity", math.inf),
    ("-Infinity", -math.inf),
    ("1e400", math.inf),
    ("-1e400", -math.inf),
])
def test_infinite_literals_become_infinity(text, expected):
    assert to_token(text) == expected


def test_large_integers_are_exact():
    assert to_token("123456789012345678901234567890") == 123456789012345678901234567890


@pytest.mark.parametrize("raw", ["", "   ", " , ,, ", "\n\t", None])
def test_empty_input_raises(raw):
    with pytest.raises(EmptyInputError):
        parse_references(raw)


def test_empty_input_error_is_user_facing():
    with pytest.raises(VisualizerError) as excinfo:
        parse_references("")
    assert str(excinfo.value) == "Enter a reference string!"


def test_parse_returns_immutable_sequence():
    assert isinstance(parse_references("1 2"), tuple)


# --- Capacity validation ---

@pytest.mark.parametrize("raw, expected", [(3, 3), ("3", 3), (" 4 ", 4), ("+2", 2), (1, 1)])
def test_parse_capacity_accepts_positive_integers(raw, expected):
    assert parse_capacity(raw) == expected


@pytest.mark.parametrize("raw", [0, -1, "0", "-1", "", "  ", "abc", "2.5", "3abc", None, True, False])
def test_parse_capacity_rejects_invalid(raw):
    with pytest.raises(InvalidCapacityError) as excinfo:
        parse_capacity(raw)
    assert excinfo.value.value == raw
    assert str(excinfo.value) == "Enter a valid number of pages!"
