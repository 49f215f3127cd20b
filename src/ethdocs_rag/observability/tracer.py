"""
Retrieval tracer.

One RetrievalTracer wraps an optional OpenTelemetry tracer. With
tracing disabled it holds no tracer and its spans drop everything, so
call sites never branch on configuration.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Iterator

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.trace import Span, StatusCode, Tracer


class RetrievalSpan:
    """A span that may or may not be recording."""

    def __init__(self, span: Span | None = None):
        self._span = span

    @property
    def recording(self) -> bool:
        return self._span is not None

    def set(self, key: str, value: Any) -> None:
        if self._span is not None:
            self._span.set_attribute(key, value)

    def ok(self) -> None:
        if self._span is not None:
            self._span.set_status(StatusCode.OK)

    def fail(self, error: BaseException, description: str | None = None) -> None:
        """Mark the span failed, recording the exception."""
        if self._span is not None:
            self._span.record_exception(error)
            self._span.set_status(StatusCode.ERROR, description or str(error))


class RetrievalTracer:
    """Opens RetrievalSpans; inert when built without an OTel tracer."""

    def __init__(self, tracer: Tracer | None = None):
        self._tracer = tracer

    @property
    def enabled(self) -> bool:
        return self._tracer is not None

    @contextmanager
    def span(self, name: str, attributes: dict[str, Any] | None = None) -> Iterator[RetrievalSpan]:
        """Open a span named `name` with initial attributes."""
        if self._tracer is None:
            yield RetrievalSpan()
            return
        with self._tracer.start_as_current_span(name, attributes=attributes) as span:
            yield RetrievalSpan(span)


_tracer: RetrievalTracer | None = None


def get_tracer() -> RetrievalTracer:
    """
    Shared tracer for the process.

    Recording only when tracing is enabled and init_tracing has installed
    an SDK provider.
    """
    global _tracer
    if _tracer is not None:
        return _tracer

    from ethdocs_rag.observability.config import get_config

    config = get_config()
    if config.enabled and isinstance(trace.get_tracer_provider(), TracerProvider):
        _tracer = RetrievalTracer(trace.get_tracer(config.service_name))
    else:
        _tracer = RetrievalTracer()
    return _tracer


def reset_tracer() -> None:
    """Reset tracer (useful for testing)."""
    global _tracer
    _tracer = None
