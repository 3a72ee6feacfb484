from __future__ import annotations

from typing import Optional, Protocol

from ..schemas import Receipt


class ReceiptStore(Protocol):
	def get(self, receipt_id: str) -> Optional[Receipt]: ...
	def put(self, receipt: Receipt) -> str: ...
	def all(self) -> list[Receipt]: ...
