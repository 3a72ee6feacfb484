from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class _Document(BaseModel):
	# stored receipts are shared between requests and must never change
	model_config = ConfigDict(frozen=True, populate_by_name=True)


class Item(_Document):
	short_description: str = Field("", alias="shortDescription")
	price: str = ""


class Receipt(_Document):
	id: Optional[str] = None
	retailer: str = ""
	purchase_date: str = Field("", alias="purchaseDate")
	purchase_time: str = Field("", alias="purchaseTime")
	items: tuple[Item, ...] = ()
	total: str = ""


class ProcessResponse(BaseModel):
	id: str


class PointsResponse(BaseModel):
	points: int


class ErrorBody(BaseModel):
	code: str
	message: str
	details: dict[str, Any] = Field(default_factory=dict)


class ErrorResponse(BaseModel):
	error: ErrorBody
