"""OpenTelemetry tracing configuration.

Request spans come from the FastAPI instrumentation and query spans from
the SQLAlchemy engine. Spans go to an OTLP collector when
``OTLP_ENDPOINT`` is set, to the console in debug mode, and nowhere
otherwise.
"""

import structlog
from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from compass import __version__
from compass.config import settings


log = structlog.get_logger()

_provider: TracerProvider | None = None


def setup_tracing(app: FastAPI) -> None:
    """Configure tracing and instrument the app and database engine.

    Args:
        app: The FastAPI application instance to instrument
    """
    global _provider

    if settings.otlp_endpoint:
        exporter = OTLPSpanExporter(
            endpoint=settings.otlp_endpoint,
            insecure=not settings.otlp_endpoint.startswith("https"),
        )
        log.info("tracing_configured", exporter="otlp", endpoint=settings.otlp_endpoint)
    elif settings.debug:
        exporter = ConsoleSpanExporter()
        log.info("tracing_configured", exporter="console")
    else:
        log.info("tracing_disabled", reason="no OTLP_ENDPOINT configured")
        return

    _provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": settings.app_name.lower().replace(" ", "-"),
                "service.version": __version__,
                "deployment.environment": settings.environment,
            }
        )
    )
    _provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(_provider)

    FastAPIInstrumentor.instrument_app(
        app,
        excluded_urls="health/.*,docs,redoc,openapi.json",
    )

    # Imported here so the engine is only created once tracing is wanted
    from compass.core.database import async_engine  # noqa: PLC0415

    SQLAlchemyInstrumentor().instrument(engine=async_engine.sync_engine)


def shutdown_tracing() -> None:
    """Flush pending spans and stop the tracer provider."""
    global _provider

    if _provider is not None:
        _provider.shutdown()
        _provider = None
