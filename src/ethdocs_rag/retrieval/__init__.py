"""
Retrieval module - keyword search over the documentation corpus.

This module provides:
- Document: The document model
- DocumentStore: Ordered, append-only corpus
- InvertedIndex / tokenize: Token -> positions index
- QueryEngine: IDF-accumulation ranking
- RetrievalService: Lock-guarded facade (implements DocumentRetriever)
- get_retrieval_service(): Factory function

ARCHITECTURE:
-------------
1. Protocol defines the contract (in core.protocols)
2. Store + Index + Engine compose the keyword implementation
3. RetrievalService guards them with one read-write lock
4. Factory function builds it from configuration
"""

# Document model
from ethdocs_rag.retrieval.document import Document, make_document_id

# Building blocks
from ethdocs_rag.retrieval.index import InvertedIndex, tokenize
from ethdocs_rag.retrieval.store import DocumentStore
from ethdocs_rag.retrieval.query import QueryEngine
from ethdocs_rag.retrieval.locks import ReadWriteLock

# Config, facade and factory
from ethdocs_rag.retrieval.config import RetrievalConfig, get_config, reset_config
from ethdocs_rag.retrieval.service import (
    DIRECT_LOOKUP_SCORE,
    RetrievalService,
    get_retrieval_service,
)

# Seed data
from ethdocs_rag.retrieval.seeds import (
    get_seed_documents,
    seed_data_dir,
    seed_service,
)

__all__ = [
    # Document
    "Document",
    "make_document_id",
    # Building blocks
    "InvertedIndex",
    "tokenize",
    "DocumentStore",
    "QueryEngine",
    "ReadWriteLock",
    # Config
    "RetrievalConfig",
    "get_config",
    "reset_config",
    # Facade
    "DIRECT_LOOKUP_SCORE",
    "RetrievalService",
    "get_retrieval_service",
    # Seeds
    "get_seed_documents",
    "seed_data_dir",
    "seed_service",
]
