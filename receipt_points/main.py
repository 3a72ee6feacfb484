from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from .config import SERVICE_NAME, Settings, load_settings
from .service import ReceiptService
from .store import InMemoryReceiptStore, ReceiptStore
from .transport.rest import build_router, request_validation_handler
from .version import VERSION, get_version_info

log = logging.getLogger(__name__)


def setup_tracing(app: FastAPI, settings: Settings) -> None:
	if not settings.otlp_endpoint:
		log.info("tracing disabled (no OTLP_ENDPOINT)")
		return

	resource = Resource.create({"service.name": SERVICE_NAME})
	provider = TracerProvider(resource=resource)
	exporter = OTLPSpanExporter(endpoint=settings.otlp_endpoint, insecure=True)
	provider.add_span_processor(BatchSpanProcessor(exporter))
	trace.set_tracer_provider(provider)

	FastAPIInstrumentor.instrument_app(app, tracer_provider=provider)
	log.info("tracing enabled", extra={"otlp_endpoint": settings.otlp_endpoint})


@asynccontextmanager
async def lifespan(app: FastAPI):
	log.info("starting service", extra=get_version_info())
	yield
	log.info("stopping service")


def create_app(
	settings: Optional[Settings] = None, store: Optional[ReceiptStore] = None
) -> FastAPI:
	"""Build the HTTP app around its own receipt store.

	Each call gets a fresh :class:`InMemoryReceiptStore` unless ``store`` is
	given, so separate apps never see each other's receipts.
	"""
	settings = settings or load_settings()
	svc = ReceiptService(store if store is not None else InMemoryReceiptStore())

	app = FastAPI(title=SERVICE_NAME, version=VERSION, lifespan=lifespan)
	app.add_exception_handler(RequestValidationError, request_validation_handler)
	app.include_router(build_router(svc))

	setup_tracing(app, settings)
	return app
