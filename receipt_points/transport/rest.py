from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ..errors import INVALID_RECEIPT, NotFoundError, ValidationError
from ..schemas import (
	ErrorBody,
	ErrorResponse,
	PointsResponse,
	ProcessResponse,
	Receipt,
)
from ..service import ReceiptService

log = logging.getLogger(__name__)


class Health(BaseModel):
	status: str = "ok"


def http_error(
	code: str, message: str, status: int, details: dict | None = None
) -> JSONResponse:
	return JSONResponse(
		status_code=status,
		content=ErrorResponse(
			error=ErrorBody(code=code, message=message, details=details or {})
		).model_dump(),
	)


def request_validation_handler(
	request: Request, exc: RequestValidationError
) -> JSONResponse:
	details: dict[str, str] = {}
	for err in exc.errors():
		# drop the leading "body" segment
		loc = [str(part) for part in err.get("loc", ())[1:]]
		details[".".join(loc) or "body"] = err.get("msg", "invalid value")
	details["error"] = INVALID_RECEIPT
	return http_error("VALIDATION_ERROR", INVALID_RECEIPT, 400, details)


def build_router(svc: ReceiptService) -> APIRouter:
	router = APIRouter()

	@router.get("/health", response_model=Health)
	async def health() -> Health:
		return Health()

	@router.post("/receipts/process", response_model=ProcessResponse)
	async def process(receipt: Receipt) -> JSONResponse:
		try:
			receipt_id = svc.process(receipt)
			return JSONResponse(ProcessResponse(id=receipt_id).model_dump())
		except ValidationError as e:
			return http_error("VALIDATION_ERROR", str(e), 400, e.errors)
		except Exception as e:
			log.exception("process failed")
			return http_error(
				"INTERNAL", "failed to process receipt", 500, {"reason": str(e)}
			)

	@router.get("/receipts/{receipt_id}/points", response_model=PointsResponse)
	async def points(receipt_id: str) -> JSONResponse:
		try:
			total = svc.points(receipt_id)
			return JSONResponse(PointsResponse(points=total).model_dump())
		except NotFoundError as e:
			return http_error("NOT_FOUND", str(e), 404, {"id": e.receipt_id})
		except Exception as e:
			log.exception("scoring failed")
			return http_error(
				"INTERNAL", "failed to score receipt", 500, {"reason": str(e)}
			)

	@router.get("/receipts", response_model=list[Receipt])
	async def receipts() -> JSONResponse:
		return JSONResponse(
			[r.model_dump(mode="json", by_alias=True) for r in svc.receipts()]
		)

	return router
