"""Parsers for the fixed-format text fields of a receipt.

Dates, times and totals travel as plain text. These parsers only check
the textual shape: a fixed width, the separators at fixed positions and
segments that read as integers (an optional sign followed by ASCII
digits). ``"2022-13-32"`` and ``"99:99"`` are accepted; calendar and
clock ranges are never checked.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .errors import FormatError

# a signed segment spends one of its fixed-width characters on the sign
_DATE = re.compile(
	r"(?P<year>[+-][0-9]{3}|[0-9]{4})"
	r"-(?P<month>[+-][0-9]|[0-9]{2})"
	r"-(?P<day>[+-][0-9]|[0-9]{2})"
)
_TIME = re.compile(r"(?P<hour>[+-][0-9]|[0-9]{2}):(?P<minute>[+-][0-9]|[0-9]{2})")
_TOTAL = re.compile(r"(?P<dollars>[+-]?[0-9]*)\.(?P<cents>[0-9]{2})")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def parse_decimal(value: str) -> Optional[Decimal]:
	"""Read a plain ASCII decimal number, or return ``None``.

	No whitespace, digit separators, non-ASCII digits, NaN or infinity.
	"""
	if _DECIMAL.fullmatch(value) is None:
		return None
	return Decimal(value)


@dataclass(frozen=True)
class PurchaseDate:
	year: int
	month: int
	day: int


@dataclass(frozen=True)
class PurchaseTime:
	hour_text: str
	minute_text: str

	@property
	def hour(self) -> int:
		return int(self.hour_text)

	@property
	def minute(self) -> int:
		return int(self.minute_text)

	def as_clock(self) -> Optional[Decimal]:
		"""Return the time as the decimal ``HH.MM``.

		The minute text is written after the point as it is, so ``14:05`` is
		``14.05`` and ``14:60`` is ``14.60``. A signed minute such as
		``14:+5`` does not make a number and gives ``None``.
		"""
		return parse_decimal(f"{self.hour_text}.{self.minute_text}")


@dataclass(frozen=True)
class Total:
	dollars: str
	cents: str

	@property
	def amount(self) -> Decimal:
		return Decimal(f"{self.dollars}.{self.cents}")


def parse_date(value: str) -> PurchaseDate:
	m = _DATE.fullmatch(value)
	if m is None:
		raise FormatError("purchaseDate", value)
	return PurchaseDate(int(m["year"]), int(m["month"]), int(m["day"]))


def parse_time(value: str) -> PurchaseTime:
	m = _TIME.fullmatch(value)
	if m is None:
		raise FormatError("purchaseTime", value)
	return PurchaseTime(m["hour"], m["minute"])


def parse_total(value: str) -> Total:
	m = _TOTAL.fullmatch(value)
	if m is None:
		raise FormatError("total", value)
	return Total(m["dollars"], m["cents"])
