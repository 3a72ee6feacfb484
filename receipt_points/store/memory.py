from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Optional

from ..schemas import Receipt

log = logging.getLogger(__name__)


class InMemoryReceiptStore:
	"""Process-local receipt storage; contents are lost on restart.

	Safe to share between threads.
	"""

	def __init__(self) -> None:
		self._receipts: Dict[str, Receipt] = {}
		self._lock = threading.Lock()

	def get(self, receipt_id: str) -> Optional[Receipt]:
		with self._lock:
			return self._receipts.get(receipt_id)

	def put(self, receipt: Receipt) -> str:
		receipt_id = str(uuid.uuid4())
		stored = receipt.model_copy(update={"id": receipt_id})
		with self._lock:
			self._receipts[receipt_id] = stored
		log.debug("stored receipt", extra={"receipt_id": receipt_id})
		return receipt_id

	def all(self) -> list[Receipt]:
		with self._lock:
			return list(self._receipts.values())

	def __len__(self) -> int:
		with self._lock:
			return len(self._receipts)
