from __future__ import annotations

from typing import Callable

from .errors import INVALID_RECEIPT, FormatError
from .formats import parse_date, parse_time, parse_total
from .schemas import Receipt

_CHECKS: tuple[tuple[str, Callable[[Receipt], str], Callable[[str], object]], ...] = (
	("purchaseDate", lambda r: r.purchase_date, parse_date),
	("purchaseTime", lambda r: r.purchase_time, parse_time),
	("total", lambda r: r.total, parse_total),
)


def validate(receipt: Receipt) -> tuple[bool, dict[str, str]]:
	"""Check the shape of the date, time and total of ``receipt``.

	Every field is checked; each one that fails gets its own entry keyed by
	its wire name. Items and retailer are not looked at.
	"""
	errors: dict[str, str] = {}
	for field, get, parse in _CHECKS:
		value = get(receipt)
		try:
			parse(value)
		except FormatError:
			errors[field] = f"Invalid input: {value}"

	if errors:
		errors["error"] = INVALID_RECEIPT
		return False, errors
	return True, {}
