"""
OpenTelemetry Configuration

Loads tracing settings from environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class TracingConfig:
    """Configuration for retrieval tracing.

    Environment Variables:
        ETHDOCS_TRACING_ENABLED: Enable OpenTelemetry tracing (default: false)
        ETHDOCS_SERVICE_NAME: Service name on exported spans (default: ethdocs-rag)
        ETHDOCS_TRACING_ENDPOINT: OTLP/HTTP endpoint (console export if empty)
        ETHDOCS_TRACING_CAPTURE_CONTENT: Record query text on spans (default: false)
    """

    enabled: bool = False
    service_name: str = "ethdocs-rag"
    collector_endpoint: str | None = None
    capture_content: bool = False

    @classmethod
    def from_env(cls) -> "TracingConfig":
        """Load config from environment variables."""
        return cls(
            enabled=os.environ.get("ETHDOCS_TRACING_ENABLED", "false").lower() in ("true", "1", "yes"),
            service_name=os.environ.get("ETHDOCS_SERVICE_NAME", "ethdocs-rag"),
            collector_endpoint=os.environ.get("ETHDOCS_TRACING_ENDPOINT") or None,
            capture_content=os.environ.get("ETHDOCS_TRACING_CAPTURE_CONTENT", "false").lower() in ("true", "1", "yes"),
        )


# Global config singleton
_config: TracingConfig | None = None


def get_config() -> TracingConfig:
    """Get the global tracing config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = TracingConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
