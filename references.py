# references.py

import math
import re
from typing import Tuple, Union

from errors import EmptyInputError, InvalidCapacityError

Token = Union[int, float, str]

# Separators are runs of whitespace and/or commas
_SEPARATORS = re.compile(r"[\s,]+")
_INTEGER = re.compile(r"[+-]?\d+")
_PREFIXED = re.compile(r"0([xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")
_INFINITY = re.compile(r"[+-]?Infinity")


def to_token(text: str) -> Token:
    """
    Convert one raw token to a page identity.

    Whole-text numeric literals become numbers: signed decimals, unsigned
    hex/octal/binary integers, and signed "Infinity". Decimals too large for
    a float become infinity. Integer-valued numbers become ints, so "1",
    "1.0" and "0x1" name the same page. Anything else is kept verbatim as a
    case-sensitive string.
    """
    if _INTEGER.fullmatch(text):
        return int(text)
    if _PREFIXED.fullmatch(text):
        return int(text, 0)
    if _INFINITY.fullmatch(text):
        return float(text.replace("Infinity", "inf"))
    if _DECIMAL.fullmatch(text):
        value = float(text)
        if math.isfinite(value) and value.is_integer():
            return int(value)
        return value
    return text


def parse_references(raw: str) -> Tuple[Token, ...]:
    """
    Parse a free-text reference string into an ordered sequence of tokens.

    Args:
        raw (str): Page references separated by whitespace and/or commas

    Returns:
        Tuple[Token, ...]: The references in input order

    Raises:
        EmptyInputError: If no tokens remain after splitting
    """
    if raw is None:
        raise EmptyInputError()

    tokens = tuple(to_token(x) for x in _SEPARATORS.split(raw) if x != "")
    if not tokens:
        raise EmptyInputError()
    return tokens


def parse_capacity(raw) -> int:
    """
    Validate a frame count given as an int or as text.

    Raises:
        InvalidCapacityError: If the value is missing, not an integer, or < 1
    """
    if isinstance(raw, bool) or raw is None:
        raise InvalidCapacityError(raw)

    if isinstance(raw, int):
        value = raw
    else:
        text = str(raw).strip()
        if not _INTEGER.fullmatch(text):
            raise InvalidCapacityError(raw)
        value = int(text)

    if value <= 0:
        raise InvalidCapacityError(raw)
    return value
