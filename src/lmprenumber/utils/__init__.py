from .converters import (
    Coercion,
    parse_float64,
    parse_int32,
    parse_uint32,
    to_float64,
    to_int32,
    to_uint32,
    zero_on_failure,
)
from .float_format import format_float, format_value
from .logging_setup import setup_logging

__all__ = [
    'Coercion',
    'parse_float64',
    'parse_int32',
    'parse_uint32',
    'to_float64',
    'to_int32',
    'to_uint32',
    'zero_on_failure',
    'format_float',
    'format_value',
    'setup_logging'
]
