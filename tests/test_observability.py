"""
Unit Tests for Observability Module

Tests the OpenTelemetry integration with focus on:
1. Inert tracer when tracing is disabled
2. Configuration loading from environment
3. Span attribute helpers
"""

import pytest
from unittest.mock import patch

from ethdocs_rag.observability import init_tracing, shutdown_tracing
from ethdocs_rag.observability.config import (
    TracingConfig,
    get_config,
    reset_config,
)
from ethdocs_rag.observability.tracer import (
    RetrievalSpan,
    RetrievalTracer,
    get_tracer,
    reset_tracer,
)
from ethdocs_rag.observability.attributes import (
    RETRIEVAL_LIMIT,
    RETRIEVAL_QUERY,
    RETRIEVAL_QUERY_TOKENS,
    RETRIEVAL_SOURCE,
    TOOL_NAME,
    search_attributes,
    tool_attributes,
)


# ---------------------------------------------------------------------------
# CONFIG TESTS
# ---------------------------------------------------------------------------


class TestTracingConfig:
    """Test configuration loading."""

    def setup_method(self):
        reset_config()

    def teardown_method(self):
        reset_config()

    def test_config_defaults(self):
        """Config should have sensible defaults when env vars not set."""
        with patch.dict("os.environ", {}, clear=True):
            config = TracingConfig.from_env()

        assert config.enabled is False
        assert config.service_name == "ethdocs-rag"
        assert config.collector_endpoint is None
        assert config.capture_content is False

    @pytest.mark.parametrize("value", ["true", "1", "yes", "TRUE"])
    def test_config_enabled_values(self, value):
        with patch.dict("os.environ", {"ETHDOCS_TRACING_ENABLED": value}):
            assert TracingConfig.from_env().enabled is True

    def test_config_endpoint(self):
        with patch.dict("os.environ", {"ETHDOCS_TRACING_ENDPOINT": "http://collector:4318/v1/traces"}):
            config = TracingConfig.from_env()

        assert config.collector_endpoint == "http://collector:4318/v1/traces"

    def test_get_config_is_cached(self):
        assert get_config() is get_config()


# ---------------------------------------------------------------------------
# TRACER TESTS
# ---------------------------------------------------------------------------


class TestTracer:
    """Test tracer factory."""

    def setup_method(self):
        reset_config()
        reset_tracer()

    def teardown_method(self):
        shutdown_tracing()
        reset_config()
        reset_tracer()

    def test_inert_when_disabled(self):
        with patch.dict("os.environ", {"ETHDOCS_TRACING_ENABLED": "false"}):
            tracer = get_tracer()

        assert isinstance(tracer, RetrievalTracer)
        assert tracer.enabled is False

    def test_inert_span_accepts_calls(self):
        with RetrievalTracer().span("test", {"a": 1}) as span:
            assert isinstance(span, RetrievalSpan)
            assert span.recording is False
            span.set("key", "value")
            span.ok()
            span.fail(ValueError("x"))

    def test_init_tracing_disabled(self):
        assert init_tracing(TracingConfig(enabled=False)) is False

    def test_init_tracing_enabled(self):
        with patch.dict("os.environ", {"ETHDOCS_TRACING_ENABLED": "true"}):
            assert init_tracing() is True
            tracer = get_tracer()

        assert tracer.enabled is True
        with tracer.span("retrieval.test", {RETRIEVAL_LIMIT: 3}) as span:
            assert span.recording is True
            span.set("retrieval.result_count", 0)
            span.ok()


# ---------------------------------------------------------------------------
# ATTRIBUTE HELPERS
# ---------------------------------------------------------------------------


class TestAttributes:
    """Test span attribute helpers."""

    def test_search_attributes_without_content(self):
        attrs = search_attributes(limit=5, source=None, token_count=2)

        assert attrs == {RETRIEVAL_LIMIT: 5, RETRIEVAL_QUERY_TOKENS: 2}

    def test_search_attributes_with_content(self):
        attrs = search_attributes(limit=5, source="contracts", token_count=1, query="erc20")

        assert attrs[RETRIEVAL_SOURCE] == "contracts"
        assert attrs[RETRIEVAL_QUERY] == "erc20"

    def test_tool_attributes(self):
        assert tool_attributes("search_docs") == {TOOL_NAME: "search_docs"}
