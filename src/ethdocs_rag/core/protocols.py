"""
Core protocols defining contracts for the retrieval system.

The tool layer and CLI only ever talk to a DocumentRetriever. The
keyword-index service implements it; tests can substitute a MagicMock
or any class with the same methods.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

import numpy as np


# ---------------------------------------------------------------------------
# RESULT TYPE
# ---------------------------------------------------------------------------


@dataclass
class DocumentResult:
    """A retrieved document with its relevance score."""
    id: str
    title: str
    content: str
    source: str
    score: np.float32 = np.float32(0.0)

    def to_dict(self) -> dict:
        """Convert to a JSON-serializable dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "source": self.source,
            "score": float(self.score),
        }


# ---------------------------------------------------------------------------
# RETRIEVER PROTOCOL
# ---------------------------------------------------------------------------


@runtime_checkable
class DocumentRetriever(Protocol):
    """
    Contract for document retrieval.

    Implementations:
    - RetrievalService (keyword inverted index)
    """

    def search(
        self,
        query: str,
        limit: int = 5,
        source: str | None = None,
    ) -> list[DocumentResult]:
        """Rank documents against a free-text query."""
        ...

    def get_document(self, doc_id: str) -> DocumentResult | None:
        """Look up a single document by id."""
        ...

    def add_document(self, title: str, content: str, source: str) -> DocumentResult:
        """Add a document to the corpus and make it searchable."""
        ...
