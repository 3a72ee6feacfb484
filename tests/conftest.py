from __future__ import annotations

import copy

import pytest
from fastapi.testclient import TestClient

from receipt_points.config import Settings
from receipt_points.main import create_app
from receipt_points.schemas import Receipt
from receipt_points.service import ReceiptService
from receipt_points.store import InMemoryReceiptStore

TARGET_RECEIPT = {
	"retailer": "Target",
	"purchaseDate": "2022-01-01",
	"purchaseTime": "13:01",
	"items": [
		{"shortDescription": "Mountain Dew 12PK", "price": "6.49"},
		{"shortDescription": "Emils Cheese Pizza", "price": "12.25"},
		{"shortDescription": "Knorr Creamy Chicken", "price": "1.26"},
		{"shortDescription": "Doritos Nacho Cheese", "price": "3.35"},
		{"shortDescription": "   Klarbrunn 12-PK 12 FL OZ  ", "price": "12.00"},
	],
	"total": "35.35",
}


def _make_receipt(**overrides) -> Receipt:
	data = {
		"retailer": "",
		"purchaseDate": "2022-01-02",
		"purchaseTime": "10:00",
		"items": [],
		"total": "1.01",
	}
	data.update(overrides)
	return Receipt.model_validate(data)


@pytest.fixture
def make_receipt():
	"""Build a valid receipt worth nothing beyond its retailer name by default."""
	return _make_receipt


@pytest.fixture
def target_payload() -> dict:
	return copy.deepcopy(TARGET_RECEIPT)


@pytest.fixture
def target_receipt() -> Receipt:
	return Receipt.model_validate(TARGET_RECEIPT)


@pytest.fixture
def store() -> InMemoryReceiptStore:
	return InMemoryReceiptStore()


@pytest.fixture
def service(store: InMemoryReceiptStore) -> ReceiptService:
	return ReceiptService(store)


@pytest.fixture
def client(store: InMemoryReceiptStore) -> TestClient:
	app = create_app(Settings(otlp_endpoint=None), store=store)
	return TestClient(app)
