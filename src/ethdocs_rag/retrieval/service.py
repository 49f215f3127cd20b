"""
Retrieval service - the facade external callers use.

Owns the DocumentStore and InvertedIndex as one lock-guarded aggregate.
Searches and lookups run under the shared side of a read-write lock;
add_document holds the exclusive side for its store-append plus
index-update, so readers never observe an indexed position whose
document is missing.

Pattern: Protocol (core.DocumentRetriever) -> Implementation -> Factory
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping

from ethdocs_rag.core import DocumentResult, InconsistentWriteError
from ethdocs_rag.observability import get_config as get_tracing_config
from ethdocs_rag.observability import get_tracer
from ethdocs_rag.observability.attributes import (
    RETRIEVAL_CORPUS_SIZE,
    RETRIEVAL_DOCUMENT_FOUND,
    RETRIEVAL_DOCUMENT_ID,
    RETRIEVAL_RESULT_COUNT,
    RETRIEVAL_TOP_SCORE,
    search_attributes,
)
from ethdocs_rag.retrieval.config import RetrievalConfig, get_config
from ethdocs_rag.retrieval.index import InvertedIndex, tokenize
from ethdocs_rag.retrieval.locks import ReadWriteLock
from ethdocs_rag.retrieval.query import QueryEngine
from ethdocs_rag.retrieval.store import DocumentStore

logger = logging.getLogger(__name__)

# Score reported for direct lookups, which bypass ranking
DIRECT_LOOKUP_SCORE = 1.0


class RetrievalService:
    """
    Keyword retrieval over an in-memory corpus.

    Implements the DocumentRetriever protocol.
    """

    def __init__(
        self,
        store: DocumentStore | None = None,
        index: InvertedIndex | None = None,
    ):
        """
        Initialize with an existing store (and its index), or empty.

        If a store is given without an index, the index is built from
        the store's current contents.
        """
        self._store = store if store is not None else DocumentStore()
        if index is None:
            index = InvertedIndex()
            for position, doc in enumerate(self._store):
                index.index_document(position, doc.content)
        self._index = index
        self._engine = QueryEngine(self._store, self._index)
        self._lock = ReadWriteLock()

    @classmethod
    def from_directories(cls, directories_by_source: Mapping[str, Path | str]) -> "RetrievalService":
        """Load and index every file of the given source directories."""
        with get_tracer().span("retrieval.load") as span:
            store = DocumentStore()
            store.load(directories_by_source)
            service = cls(store)
            span.set(RETRIEVAL_CORPUS_SIZE, len(store))

        logger.info(
            f"Indexed {len(store)} documents, {len(service._index)} distinct tokens"
        )
        return service

    @property
    def document_count(self) -> int:
        with self._lock.read():
            return len(self._store)

    def search(
        self,
        query: str,
        limit: int = 5,
        source: str | None = None,
    ) -> list[DocumentResult]:
        """
        Rank documents against a query.

        Args:
            query: Free-text query
            limit: Maximum number of results
            source: Restrict results to one source partition

        Returns:
            Results ordered best first; empty if nothing matches
        """
        capture = get_tracing_config().capture_content
        attributes = search_attributes(
            limit=limit,
            source=source,
            token_count=len(tokenize(query)),
            query=query if capture else None,
        )

        with get_tracer().span("retrieval.search", attributes=attributes) as span:
            with self._lock.read():
                ranked = self._engine.search(query, limit, source=source)

            results = [doc.to_result(score) for doc, score in ranked]
            span.set(RETRIEVAL_RESULT_COUNT, len(results))
            if results:
                span.set(RETRIEVAL_TOP_SCORE, float(results[0].score))

        return results

    def get_document(self, doc_id: str) -> DocumentResult | None:
        """Direct lookup by id; None if no document has this id."""
        with get_tracer().span(
            "retrieval.get_document", attributes={RETRIEVAL_DOCUMENT_ID: doc_id}
        ) as span:
            with self._lock.read():
                doc = self._store.get_by_id(doc_id)
            span.set(RETRIEVAL_DOCUMENT_FOUND, doc is not None)

        if doc is None:
            return None
        return doc.to_result(DIRECT_LOOKUP_SCORE)

    def add_document(self, title: str, content: str, source: str) -> DocumentResult:
        """
        Append a document and index it as one unit.

        Raises:
            InconsistentWriteError: indexing failed; the append was rolled back
        """
        with get_tracer().span("retrieval.add_document") as span:
            with self._lock.write():
                prior_length = len(self._store)
                position = self._store.append(title, content, source)
                try:
                    self._index.index_document(position, content)
                except Exception as e:
                    self._store.truncate(prior_length)
                    span.fail(e)
                    raise InconsistentWriteError(
                        f"Indexing failed for {source}/{title}; append rolled back"
                    ) from e
                doc = self._store[position]

            span.set(RETRIEVAL_DOCUMENT_ID, doc.id)

        logger.info(f"Added document {doc.id} at position {position}")
        return doc.to_result(DIRECT_LOOKUP_SCORE)


# ---------------------------------------------------------------------------
# FACTORY FUNCTION
# ---------------------------------------------------------------------------


def get_retrieval_service(config: RetrievalConfig | None = None) -> RetrievalService:
    """
    Build a service over the configured data directory.

    Creates <data_dir>/docs and <data_dir>/embeddings if they are
    missing, then loads every configured source partition.

    Args:
        config: Retrieval configuration (env-derived if not provided)
    """
    config = config or get_config()

    config.docs_dir.mkdir(parents=True, exist_ok=True)
    config.embeddings_dir.mkdir(parents=True, exist_ok=True)

    return RetrievalService.from_directories(config.source_directories())
