import pytest

from autocompress.domain.entities.budget import SizeTarget
from autocompress.domain.errors import InvalidSizeArgument


def test_parse_integer_string():
    assert SizeTarget.parse("25").desired_size_mb == 25
    assert SizeTarget.parse(" 8 ").desired_size_kb == 8 * 1024


@pytest.mark.parametrize("raw", ["abc", "2.5", "", "10MB"])
def test_parse_rejects_non_integer(raw):
    with pytest.raises(InvalidSizeArgument) as ei:
        SizeTarget.parse(raw)
    assert "invalid output size" in str(ei.value)


@pytest.mark.parametrize("raw", ["0", "-3"])
def test_parse_rejects_non_positive(raw):
    with pytest.raises(InvalidSizeArgument):
        SizeTarget.parse(raw)


def test_constructor_rejects_float():
    with pytest.raises(InvalidSizeArgument):
        SizeTarget(2.5)  # type: ignore[arg-type]


@pytest.mark.parametrize("raw", ["1_0", "١٢", "５", "--5", "+-5", "5 0"])
def test_parse_accepts_only_ascii_digits(raw):
    with pytest.raises(InvalidSizeArgument):
        SizeTarget.parse(raw)


def test_parse_accepts_leading_plus():
    assert SizeTarget.parse("+5").desired_size_mb == 5
