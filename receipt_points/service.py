from __future__ import annotations

import logging

from opentelemetry import trace

from .errors import NotFoundError, ValidationError
from .schemas import Receipt
from .scoring import score_breakdown
from .store import ReceiptStore
from .validation import validate

log = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)


class ReceiptService:
	def __init__(self, store: ReceiptStore) -> None:
		self.store = store

	def process(self, receipt: Receipt) -> str:
		"""Validate and store ``receipt``, returning its new identifier.

		Raises :class:`ValidationError` without touching the store when the
		date, time or total is malformed.
		"""
		with tracer.start_as_current_span("service.process") as span:
			span.set_attribute("items.count", len(receipt.items))

			ok, errors = validate(receipt)
			if not ok:
				span.set_attribute("receipt.valid", False)
				log.info("rejected receipt", extra={"fields": sorted(errors)})
				raise ValidationError(errors)

			receipt_id = self.store.put(receipt)
			span.set_attribute("receipt.valid", True)
			span.set_attribute("receipt.id", receipt_id)

		log.info("processed receipt", extra={"receipt_id": receipt_id})
		return receipt_id

	def points(self, receipt_id: str) -> int:
		with tracer.start_as_current_span("service.points") as span:
			span.set_attribute("receipt.id", receipt_id)

			receipt = self.store.get(receipt_id)
			if receipt is None:
				raise NotFoundError(receipt_id)

			breakdown = score_breakdown(receipt)
			total = sum(breakdown.values())
			span.set_attribute("points", total)

		log.debug(
			"scored receipt",
			extra={"receipt_id": receipt_id, "points": total, "rules": breakdown},
		)
		return total

	def receipts(self) -> list[Receipt]:
		return self.store.all()
