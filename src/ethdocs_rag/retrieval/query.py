"""
Query engine - frequency-weighted IDF scoring over the inverted index.

SCORING:
--------
For every token of the query (repeats included):

    idf = ln(total_documents / len(postings(token)))

and every position in the token's posting list gains idf. Because
posting lists keep one entry per occurrence, a document that repeats a
term N times gains N * idf for it, and a query that repeats a word
counts it once per repetition.

Scores are accumulated in float32. Documents whose total is exactly
zero are dropped. Ranking is score descending, ties by ascending
position, so results are reproducible.
"""

from __future__ import annotations

import logging
from collections import defaultdict

import numpy as np

from ethdocs_rag.retrieval.document import Document
from ethdocs_rag.retrieval.index import InvertedIndex, tokenize
from ethdocs_rag.retrieval.store import DocumentStore

logger = logging.getLogger(__name__)


class QueryEngine:
    """Ranks store documents against free-text queries."""

    def __init__(self, store: DocumentStore, index: InvertedIndex):
        self._store = store
        self._index = index

    def score(self, query: str) -> dict[int, np.float32]:
        """Accumulated score per document position for a query."""
        total = np.float32(len(self._store))
        scores: dict[int, np.float32] = defaultdict(lambda: np.float32(0.0))

        for token in tokenize(query):
            postings = self._index.postings(token)
            if not postings:
                continue

            idf = np.log(total / np.float32(len(postings)))
            for position in postings:
                scores[position] += idf

        return scores

    def search(
        self,
        query: str,
        limit: int,
        source: str | None = None,
    ) -> list[tuple[Document, np.float32]]:
        """
        Rank documents for a query.

        Args:
            query: Free-text query
            limit: Maximum number of results (0 returns nothing)
            source: Only rank documents from this source partition

        Returns:
            (document, score) pairs, best first, at most `limit` long
        """
        if limit <= 0:
            return []

        ranked = []
        for position, score in self.score(query).items():
            if score == 0:
                continue
            doc = self._store[position]
            # Filter before truncating so a filtered search still fills `limit`
            if source is not None and doc.source != source:
                continue
            ranked.append((position, doc, score))

        ranked.sort(key=lambda item: (-item[2], item[0]))
        logger.debug(f"Query {query!r} matched {len(ranked)} documents")

        return [(doc, score) for _, doc, score in ranked[:limit]]
