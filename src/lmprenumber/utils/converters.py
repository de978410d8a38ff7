#!/usr/bin/env python3
# src/lmprenumber/utils/converters.py

"""
Best-effort numeric coercion for whitespace-separated data file tokens.

Each ``parse_*`` function reports whether the token was a valid number of the
requested width. The ``to_*`` field converters apply the zero-fallback policy
on top of that, so a bad token never aborts parsing of a whole file.
"""

import math
import re
from typing import Callable, NamedTuple, Union

UINT32_MAX = 2**32 - 1
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_UNSIGNED_PATTERN = re.compile(r"[0-9]+")
_SIGNED_PATTERN = re.compile(r"[+-]?[0-9]+")
_FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)

Number = Union[int, float]
Converter = Callable[[str], Number]


class Coercion(NamedTuple):
    """Result of converting a single token."""

    value: Number
    ok: bool


def parse_uint32(token: str) -> Coercion:
    """Parse an unsigned 32-bit decimal integer."""
    if not _UNSIGNED_PATTERN.fullmatch(token):
        return Coercion(0, False)
    value = int(token)
    if value > UINT32_MAX:
        return Coercion(0, False)
    return Coercion(value, True)


def parse_int32(token: str) -> Coercion:
    """Parse a signed 32-bit decimal integer."""
    if not _SIGNED_PATTERN.fullmatch(token):
        return Coercion(0, False)
    value = int(token)
    if value < INT32_MIN or value > INT32_MAX:
        return Coercion(0, False)
    return Coercion(value, True)


def parse_float64(token: str) -> Coercion:
    """Parse a 64-bit float, rejecting values that overflow to infinity."""
    if not _FLOAT_PATTERN.fullmatch(token):
        return Coercion(0.0, False)
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        return Coercion(0.0, False)
    return Coercion(value, True)


def zero_on_failure(coercion: Coercion, zero: Number) -> Number:
    """Return the parsed value, or ``zero`` when the token was malformed."""
    return coercion.value if coercion.ok else zero


def to_uint32(token: str) -> int:
    return zero_on_failure(parse_uint32(token), 0)


def to_int32(token: str) -> int:
    return zero_on_failure(parse_int32(token), 0)


def to_float64(token: str) -> float:
    return zero_on_failure(parse_float64(token), 0.0)
