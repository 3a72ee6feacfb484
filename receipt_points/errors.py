from __future__ import annotations

INVALID_RECEIPT = "The receipt is invalid."


class FormatError(ValueError):
	"""A fixed-format text field (date, time or total) has the wrong shape."""

	def __init__(self, field: str, value: str) -> None:
		super().__init__(f"malformed {field}: {value!r}")
		self.field = field
		self.value = value


class ValidationError(Exception):
	"""One or more receipt fields failed format validation.

	``errors`` maps the wire field name to a human readable message and
	always carries a general ``"error"`` entry.
	"""

	def __init__(self, errors: dict[str, str]) -> None:
		super().__init__(errors.get("error", INVALID_RECEIPT))
		self.errors = dict(errors)


class NotFoundError(LookupError):
	def __init__(self, receipt_id: str) -> None:
		super().__init__(f"No receipt found for that id: {receipt_id}")
		self.receipt_id = receipt_id
