"""Shortest round-trip rendering of floats and integers for data file fields."""

import math
from typing import Union

import numpy as np

# Decimal exponents outside [-4, 6) switch to exponent notation.
MIN_POSITIONAL_EXPONENT = -4
MAX_POSITIONAL_EXPONENT = 6


def format_float(value: float) -> str:
    """
    Render a float with the fewest digits that still read back exactly.

    Args:
        value: Float to render

    Returns:
        Text such as ``1.5``, ``100``, ``0.0001``, ``1e-05`` or ``1.234567e+06``
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0.0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"

    scientific = np.format_float_scientific(value, unique=True, trim="-", exp_digits=2)
    exponent = int(scientific.split("e")[1])
    if exponent < MIN_POSITIONAL_EXPONENT or exponent >= MAX_POSITIONAL_EXPONENT:
        return scientific
    return np.format_float_positional(value, unique=True, trim="-")


def format_value(value: Union[int, float]) -> str:
    """Render an integer field as plain decimal and a float field via format_float."""
    if isinstance(value, float):
        return format_float(value)
    return str(int(value))
