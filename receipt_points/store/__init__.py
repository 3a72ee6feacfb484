from .base import ReceiptStore
from .memory import InMemoryReceiptStore

__all__ = [
	"ReceiptStore",
	"InMemoryReceiptStore",
]
