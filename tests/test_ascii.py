import pytest

from replline.ascii import ascii_to_num, is_identi_ascii


@pytest.mark.parametrize("ch", ["a", "z", "A", "Z", "_", "é", "中"])
def test_identifier_characters(ch):
    assert is_identi_ascii(ch) is True


@pytest.mark.parametrize("ch", ["0", "9", " ", ".", "$", "#", "(", "\n"])
def test_non_identifier_characters(ch):
    assert is_identi_ascii(ch) is False


@pytest.mark.parametrize("digit", range(10))
def test_ascii_to_num_digits(digit):
    assert ascii_to_num(str(digit)) == digit


def test_ascii_to_num_is_monotonic():
    values = [ascii_to_num(ch) for ch in "0123456789"]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


@pytest.mark.parametrize("ch", [" ", "\0", "/", "-"])
def test_ascii_to_num_below_zero_raises(ch):
    with pytest.raises(ValueError):
        ascii_to_num(ch)