import pytest

from pushswap.fmtspec import Flag, FormatSpec, count_digits, padding


def test_has_reports_set_flags_only():
    spec = FormatSpec(Flag.MINUS | Flag.ZERO, 4, 0)
    assert spec.has(Flag.MINUS)
    assert spec.has(Flag.ZERO)
    assert not spec.has(Flag.DOT)
    assert not spec.has(Flag.PLUS)


def test_default_spec_has_no_flags():
    spec = FormatSpec()
    assert not any(spec.has(flag) for flag in Flag if flag != Flag.NONE)
    assert spec.width == 0
    assert spec.precision == 0


def test_flags_are_distinct_bits():
    bits = [flag for flag in Flag if flag != Flag.NONE]
    assert len(bits) == 6
    for flag in bits:
        spec = FormatSpec(flag, 0, 0)
        assert spec.has(flag)
        others = [other for other in bits if other != flag]
        assert not any(spec.has(other) for other in others)


@pytest.mark.parametrize("n", [0, 7, -7, 10, 99999, -2147483648, 2147483647])
def test_count_digits_matches_decimal_text(n):
    assert count_digits(n) == len(str(n).lstrip("-"))


def test_count_digits_of_zero_is_one():
    assert count_digits(0) == 1


@pytest.mark.parametrize("width", [1, 5, 12])
def test_padding_length_and_content(width):
    pad = padding(width, "0")
    assert len(pad) == width
    assert set(pad) == {"0"}


@pytest.mark.parametrize("width", [0, -3])
def test_padding_non_positive_width_is_empty(width):
    assert padding(width, " ") == ""