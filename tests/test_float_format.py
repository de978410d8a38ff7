import pytest

from lmprenumber.utils.float_format import format_float, format_value


@pytest.mark.parametrize(
    "value, expected",
    [
        (1.5, "1.5"),
        (1.0, "1"),
        (100.0, "100"),
        (-0.8476, "-0.8476"),
        (0.1, "0.1"),
        (0.0001, "0.0001"),
        (0.0005, "0.0005"),
        (0.00001, "1e-05"),
        (-2.5e-7, "-2.5e-07"),
        (123456.0, "123456"),
        (1234567.0, "1.234567e+06"),
        (1e21, "1e+21"),
        (0.0, "0"),
        (-0.0, "-0"),
        (float("inf"), "+Inf"),
        (float("-inf"), "-Inf"),
        (float("nan"), "NaN"),
    ],
)
def test_format_float(value, expected):
    assert format_float(value) == expected


@pytest.mark.parametrize("value", [0.1 + 0.2, 1 / 3, 6.02214076e23, -1.602176634e-19])
def test_format_float_reads_back_exactly(value):
    assert float(format_float(value)) == value


def test_format_value_renders_integers_plainly():
    assert format_value(0) == "0"
    assert format_value(4294967295) == "4294967295"
    assert format_value(-3) == "-3"
    assert format_value(2.0) == "2"
