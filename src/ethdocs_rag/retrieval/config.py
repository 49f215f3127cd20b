"""
Retrieval Configuration

Loads corpus settings from environment variables.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SOURCES = ("uniswap-v2", "uniswap-v3", "contracts")


def _parse_sources(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return DEFAULT_SOURCES
    sources = tuple(s.strip() for s in raw.split(",") if s.strip())
    return sources or DEFAULT_SOURCES


@dataclass
class RetrievalConfig:
    """Configuration for the document corpus and search defaults.

    Environment Variables:
        ETHDOCS_DATA_DIR: Root data directory (default: ./data)
        ETHDOCS_SOURCES: Comma-separated source partitions
            (default: uniswap-v2,uniswap-v3,contracts)
        ETHDOCS_DEFAULT_LIMIT: Results returned when no limit is given (default: 5)
        ETHDOCS_LOG_LEVEL: Logging level for the CLI (default: INFO)
    """

    data_dir: Path = Path("data")
    sources: tuple[str, ...] = field(default=DEFAULT_SOURCES)
    default_limit: int = 5
    log_level: str = "INFO"

    @property
    def docs_dir(self) -> Path:
        return self.data_dir / "docs"

    @property
    def embeddings_dir(self) -> Path:
        return self.data_dir / "embeddings"

    def source_directories(self) -> dict[str, Path]:
        """Map each source partition to its directory under docs/."""
        return {source: self.docs_dir / source for source in self.sources}

    @classmethod
    def from_env(cls) -> "RetrievalConfig":
        """Load config from environment variables."""
        return cls(
            data_dir=Path(os.environ.get("ETHDOCS_DATA_DIR", "data")),
            sources=_parse_sources(os.environ.get("ETHDOCS_SOURCES")),
            default_limit=int(os.environ.get("ETHDOCS_DEFAULT_LIMIT", "5")),
            log_level=os.environ.get("ETHDOCS_LOG_LEVEL", "INFO").upper(),
        )


# Global config singleton
_config: RetrievalConfig | None = None


def get_config() -> RetrievalConfig:
    """Get the global retrieval config (lazy-loaded from env)."""
    global _config
    if _config is None:
        _config = RetrievalConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset config (useful for testing)."""
    global _config
    _config = None
