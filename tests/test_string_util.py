import pytest

from cycutil.string_util import size_to_string


def test_pinned_values():
    assert size_to_string(512) == "512.00 "
    assert size_to_string(1024) == "1.00 KB"
    assert size_to_string(1024**3) == "1.00 GB"


@pytest.mark.parametrize("size", [0, 1, 100, 1023])
def test_bytes_have_no_unit(size):
    text = size_to_string(size)
    assert text.endswith(" ")
    assert float(text) == pytest.approx(size)


@pytest.mark.parametrize(
    "size, unit, divisor",
    [
        (1024, "KB", 1024),
        (1536, "KB", 1024),
        (1024 * 1024 - 1, "KB", 1024),
        (1024 * 1024, "MB", 1024 * 1024),
        (5 * 1024 * 1024 + 300, "MB", 1024 * 1024),
        (3 * 1024**3, "GB", 1024**3),
        (10 * 1024**4, "GB", 1024**3),
    ],
)
def test_unit_and_value(size, unit, divisor):
    text = size_to_string(size)
    number, suffix = text.split(" ")
    assert suffix == unit
    assert float(number) == pytest.approx(size / divisor, abs=0.006)


def test_float_input_matches_integer_input():
    assert size_to_string(2048.0) == size_to_string(2048)


def test_two_decimals_always():
    for size in (7, 4097, 9 * 1024 * 1024, 2 * 1024**3):
        number = size_to_string(size).split(" ")[0]
        assert len(number.split(".")[1]) == 2