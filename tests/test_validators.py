import pytest

from src.points.validators import is_afternoon, is_odd_day, is_valid_total


@pytest.mark.parametrize("total", ["35.35", "0.00", "9.00", "1234567.89"])
def test_valid_totals(total):
    assert is_valid_total(total)


@pytest.mark.parametrize("total", ["35.3", "abc", "35", "", "35.355", "-1.00", "1,000.00", ".50", "35.35\n", " 35.35"])
def test_invalid_totals(total):
    assert not is_valid_total(total)


def test_non_ascii_digits_are_not_a_valid_total():
    assert not is_valid_total("٣٥.٣٥")


def test_total_that_is_not_a_string():
    assert not is_valid_total(35.35)
    assert not is_valid_total(None)


@pytest.mark.parametrize("date,expected", [
    ("2022-01-01", True),
    ("2022-03-31", True),
    ("2022-03-20", False),
    ("2022-02-10", False),
])
def test_odd_day(date, expected):
    assert is_odd_day(date) is expected


@pytest.mark.parametrize("date", ["2022-1-01", "22-01-01", "2022/01/01", "2022-01-011", "2022-01-01\n", "January 1", ""])
def test_malformed_date_is_never_odd(date):
    assert is_odd_day(date) is False


@pytest.mark.parametrize("time,expected", [
    ("14:00", True),
    ("14:33", True),
    ("15:59", True),
    ("13:59", False),
    ("13:01", False),
    ("16:00", False),
    ("02:30", False),
])
def test_afternoon(time, expected):
    assert is_afternoon(time) is expected


@pytest.mark.parametrize("time", ["2:30", "14:3", "14-30", "14:30:00", "14:30\n", "", None])
def test_malformed_time_is_never_afternoon(time):
    assert is_afternoon(time) is False
