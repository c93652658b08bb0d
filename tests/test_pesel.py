import pytest

from unidb.pesel import check_pesel


def test_wrong_pesel_is_rejected():
    assert check_pesel("12345678901") is False


def test_good_pesel_is_accepted():
    assert check_pesel("24090833676") is True


def test_all_zeros_is_valid():
    assert check_pesel("00000000000") is True


def test_all_ones_is_invalid():
    assert check_pesel("11111111111") is False


@pytest.mark.parametrize("pesel", ["", "2409083367", "240908336760", "1"])
def test_wrong_length_is_rejected(pesel):
    assert check_pesel(pesel) is False


@pytest.mark.parametrize("pesel", ["2409083367a", "24090 33676", "-2409083367", "２4090833676"])
def test_non_digits_are_rejected(pesel):
    assert check_pesel(pesel) is False


@pytest.mark.parametrize(
    "prefix", ["2409083367", "0000000000", "1111111111", "9999999999", "0123456789", "9000000000"]
)
def test_exactly_one_check_digit_matches(prefix):
    valid = [digit for digit in "0123456789" if check_pesel(prefix + digit)]
    assert len(valid) == 1


def test_changing_check_digit_invalidates():
    good = "24090833676"
    others = [good[:-1] + digit for digit in "0123456789" if digit != good[-1]]
    assert not any(check_pesel(candidate) for candidate in others)