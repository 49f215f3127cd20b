"""
Document model for the retrieval system.

Single responsibility: Define the structure of documents held by
the document store.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from ethdocs_rag.core import DocumentResult


def make_document_id(source: str, title: str) -> str:
    """Compose the primary key of a document from its source and title."""
    return f"{source}/{title}"


@dataclass(frozen=True)
class Document:
    """
    A document in the corpus.

    This is the internal representation owned by the DocumentStore.
    For external APIs, we convert to DocumentResult
    (defined in core.protocols).
    """
    id: str
    title: str
    content: str
    source: str
    # Reserved for semantic search; arrays do not compare or hash
    embedding: np.ndarray | None = field(default=None, compare=False)

    @classmethod
    def create(cls, title: str, content: str, source: str) -> "Document":
        """Build a document whose id is derived from source and title."""
        return cls(
            id=make_document_id(source, title),
            title=title,
            content=content,
            source=source,
        )

    def to_result(self, score: float) -> DocumentResult:
        """Wrap this document in a scored result."""
        return DocumentResult(
            id=self.id,
            title=self.title,
            content=self.content,
            source=self.source,
            score=np.float32(score),
        )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "source": self.source,
        }
