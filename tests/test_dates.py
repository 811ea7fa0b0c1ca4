import pytest

from algokit.dates import InvalidDateError, MyDate, is_leap_year, is_valid_date


@pytest.mark.parametrize(
    "year, expected",
    [(2000, True), (1900, False), (2024, True), (2023, False), (2400, True)],
)
def test_is_leap_year(year, expected):
    assert is_leap_year(year) is expected


@pytest.mark.parametrize(
    "day, month, year",
    [(1, 1, 2020), (31, 12, 2020), (29, 2, 2024), (30, 4, 2021), (21, 4, 2025)],
)
def test_valid_dates(day, month, year):
    assert is_valid_date(day, month, year) is True


@pytest.mark.parametrize(
    "day, month, year",
    [
        (0, 1, 2020),
        (32, 1, 2020),
        (29, 2, 2023),
        (29, 2, 1900),
        (31, 4, 2021),
        (1, 0, 2020),
        (1, 13, 2020),
    ],
)
def test_invalid_dates(day, month, year):
    assert is_valid_date(day, month, year) is False


def test_default_date():
    assert str(MyDate()) == "12.12.2012"


def test_date_is_zero_padded():
    assert str(MyDate(21, 4, 2025)) == "21.04.2025"


def test_constructor_rejects_invalid_date():
    with pytest.raises(InvalidDateError):
        MyDate(31, 2, 2020)


def test_invalid_date_error_is_value_error():
    with pytest.raises(ValueError):
        MyDate(1, 13, 2020)


def test_set_date_updates_fields():
    date = MyDate()
    date.set_date(29, 2, 2024)
    assert (date.day, date.month, date.year) == (29, 2, 2024)


def test_set_date_invalid_leaves_date_unchanged():
    date = MyDate(5, 6, 2021)
    with pytest.raises(InvalidDateError):
        date.set_date(30, 2, 2021)
    assert str(date) == str(MyDate(5, 6, 2021))


@pytest.mark.parametrize("year", [1900, 2000, 2023, 2024])
def test_method_agrees_with_function(year):
    assert MyDate(1, 1, year).is_leap_year() is is_leap_year(year)


def test_default_year_is_leap():
    assert MyDate().is_leap_year() is True