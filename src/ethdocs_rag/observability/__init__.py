"""
Observability Module - OpenTelemetry tracing for retrieval operations.

USAGE:
------
# At application startup:
from ethdocs_rag.observability import init_tracing

init_tracing()  # Installs an SDK provider if ETHDOCS_TRACING_ENABLED=true

# In code that needs tracing:
from ethdocs_rag.observability import get_tracer

tracer = get_tracer()
with tracer.span("retrieval.search") as span:
    # ... do work ...
    span.set("retrieval.result_count", 3)
"""

from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from ethdocs_rag.observability.config import (
    TracingConfig,
    get_config,
    reset_config,
)
from ethdocs_rag.observability.tracer import (
    RetrievalTracer,
    RetrievalSpan,
    get_tracer,
    reset_tracer,
)
from ethdocs_rag.observability.attributes import (
    RETRIEVAL_QUERY,
    RETRIEVAL_LIMIT,
    RETRIEVAL_SOURCE,
    RETRIEVAL_RESULT_COUNT,
    RETRIEVAL_DOCUMENT_ID,
    RETRIEVAL_CORPUS_SIZE,
    search_attributes,
    tool_attributes,
)

logger = logging.getLogger(__name__)

_tracing_initialized = False


def init_tracing(config: TracingConfig | None = None) -> bool:
    """
    Install an OpenTelemetry SDK tracer provider.

    Call once at application startup. Spans go to the configured OTLP
    endpoint, or to the console when no endpoint is set.

    Args:
        config: Optional config (uses env vars if not provided)

    Returns:
        True if tracing was initialized, False if disabled
    """
    global _tracing_initialized
    if _tracing_initialized:
        return True

    config = config or get_config()

    if not config.enabled:
        logger.debug("Tracing disabled")
        return False

    if config.collector_endpoint:
        exporter = OTLPSpanExporter(endpoint=config.collector_endpoint)
        logger.info(f"Exporting spans to: {config.collector_endpoint}")
    else:
        exporter = ConsoleSpanExporter()
        logger.info("Exporting spans to console")

    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: config.service_name}))
    provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(provider)

    reset_tracer()
    _tracing_initialized = True
    return True


def shutdown_tracing() -> None:
    """Flush and shut down the tracer provider."""
    global _tracing_initialized

    if not _tracing_initialized:
        return

    provider = trace.get_tracer_provider()
    if isinstance(provider, TracerProvider):
        provider.shutdown()

    reset_tracer()
    reset_config()
    _tracing_initialized = False


__all__ = [
    # Setup
    "init_tracing",
    "shutdown_tracing",
    # Config
    "TracingConfig",
    "get_config",
    "reset_config",
    # Tracer
    "RetrievalTracer",
    "RetrievalSpan",
    "get_tracer",
    "reset_tracer",
    # Attributes
    "RETRIEVAL_QUERY",
    "RETRIEVAL_LIMIT",
    "RETRIEVAL_SOURCE",
    "RETRIEVAL_RESULT_COUNT",
    "RETRIEVAL_DOCUMENT_ID",
    "RETRIEVAL_CORPUS_SIZE",
    "search_attributes",
    "tool_attributes",
]
