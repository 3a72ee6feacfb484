from decimal import Decimal

import pytest

from receipt_points.errors import FormatError
from receipt_points.formats import parse_date, parse_decimal, parse_time, parse_total


def test_parse_date_named_segments():
	d = parse_date("2022-03-20")
	assert (d.year, d.month, d.day) == (2022, 3, 20)


def test_parse_date_has_no_calendar_check():
	d = parse_date("2022-13-32")
	assert (d.month, d.day) == (13, 32)


@pytest.mark.parametrize(
	"value",
	["2022-1-1", "2022/01/01", "2022-01-011", "20220-1-01", "2022-0a-01", "", "2022-01-01\n"],
)
def test_parse_date_rejects_bad_shape(value):
	with pytest.raises(FormatError) as exc:
		parse_date(value)
	assert exc.value.field == "purchaseDate"
	assert exc.value.value == value


def test_parse_time_has_no_range_check():
	t = parse_time("99:99")
	assert (t.hour, t.minute) == (99, 99)


@pytest.mark.parametrize("value", ["1:05", "14.05", "14:5", "14:050", "ab:cd", ""])
def test_parse_time_rejects_bad_shape(value):
	with pytest.raises(FormatError):
		parse_time(value)


def test_time_clock_is_lexical():
	assert parse_time("14:05").as_clock() == Decimal("14.05")
	assert parse_time("14:60").as_clock() == Decimal("14.60")


def test_parse_total_splits_cents():
	total = parse_total("35.35")
	assert total.cents == "35"
	assert total.amount == Decimal("35.35")


def test_parse_total_allows_missing_dollars():
	assert parse_total(".25").amount == Decimal("0.25")


@pytest.mark.parametrize("value", ["35.3", "35", "35.355", "3a.00", "abc", "", "1e2.00"])
def test_parse_total_rejects_bad_shape(value):
	with pytest.raises(FormatError):
		parse_total(value)


def test_format_error_is_value_error():
	with pytest.raises(ValueError):
		parse_total("nope")


def test_time_clock_signed_minute_is_not_a_number():
	assert parse_time("14:+5").as_clock() is None
	assert parse_time("16:-1").as_clock() is None
	assert parse_time("+1:05").as_clock() == Decimal("1.05")


@pytest.mark.parametrize(
	"value, expected",
	[("6.49", Decimal("6.49")), (".5", Decimal("0.5")), ("7.", Decimal("7")), ("-2.5e1", Decimal("-25"))],
)
def test_parse_decimal_plain_numbers(value, expected):
	assert parse_decimal(value) == expected


@pytest.mark.parametrize(
	"value",
	["", ".", "1_000.00", " 5.00 ", "١٠.٠٠", "NaN", "Infinity", "1e", "$5.00"],
)
def test_parse_decimal_rejects_other_text(value):
	assert parse_decimal(value) is None
