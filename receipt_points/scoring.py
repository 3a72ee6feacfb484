"""Points rules for validated receipts.

Each rule is an independent function of the receipt returning a
non-negative number of points; a receipt's score is their sum. The set of
rules is fixed.

Rules:

* ``retailer`` - one point per ASCII letter or digit in the retailer name.
* ``round_total`` - 50 points when the total has no cents.
* ``quarter_total`` - 25 points when the cents are a multiple of 25.
* ``item_pairs`` - 5 points for every two items.
* ``description_length`` - for each item whose trimmed description length
  is a multiple of 3, the price times 0.2 rounded up.
* ``odd_day`` - 6 points when the day of the purchase date is odd.
* ``afternoon`` - 10 points when the purchase time is after 14:00 and
  before 16:00.

The date, time and total must have passed :func:`validate`; the parsers
raise :class:`~receipt_points.errors.FormatError` otherwise.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Callable, Optional

from .formats import parse_date, parse_decimal, parse_time, parse_total
from .schemas import Receipt

PRICE_MULTIPLIER = Decimal("0.2")
AFTERNOON_START = Decimal("14.00")
AFTERNOON_END = Decimal("16.00")
MAX_PRICE_EXPONENT = 308


def _parse_price(value: str) -> Optional[Decimal]:
	"""Parse an item price; unreadable prices give ``None``."""
	price = parse_decimal(value)
	# too large for a double
	if price is None or price.adjusted() > MAX_PRICE_EXPONENT:
		return None
	return price


def retailer_points(receipt: Receipt) -> int:
	return sum(1 for ch in receipt.retailer if ch.isascii() and ch.isalnum())


def round_total_points(receipt: Receipt) -> int:
	return 50 if parse_total(receipt.total).cents == "00" else 0


def quarter_total_points(receipt: Receipt) -> int:
	return 25 if parse_total(receipt.total).cents in ("00", "25", "50", "75") else 0


def item_pairs_points(receipt: Receipt) -> int:
	return 5 * (len(receipt.items) // 2)


def description_length_points(receipt: Receipt) -> int:
	points = 0
	for item in receipt.items:
		if len(item.short_description.strip()) % 3 != 0:
			continue
		price = _parse_price(item.price)
		if price is None:
			continue
		points += max(math.ceil(price * PRICE_MULTIPLIER), 0)
	return points


def odd_day_points(receipt: Receipt) -> int:
	return 6 if parse_date(receipt.purchase_date).day % 2 != 0 else 0


def afternoon_points(receipt: Receipt) -> int:
	clock = parse_time(receipt.purchase_time).as_clock()
	if clock is None:
		return 0
	return 10 if AFTERNOON_START < clock < AFTERNOON_END else 0


RULES: tuple[tuple[str, Callable[[Receipt], int]], ...] = (
	("retailer", retailer_points),
	("round_total", round_total_points),
	("quarter_total", quarter_total_points),
	("item_pairs", item_pairs_points),
	("description_length", description_length_points),
	("odd_day", odd_day_points),
	("afternoon", afternoon_points),
)


def score_breakdown(receipt: Receipt) -> dict[str, int]:
	return {name: rule(receipt) for name, rule in RULES}


def score(receipt: Receipt) -> int:
	return sum(score_breakdown(receipt).values())
