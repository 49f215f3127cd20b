"""
Core module - shared protocols, result types and errors.

USAGE:
------
from ethdocs_rag.core import DocumentRetriever, DocumentResult

class MyRetriever:
    '''Implements DocumentRetriever protocol.'''
    ...
"""

from ethdocs_rag.core.errors import (
    RetrievalError,
    CorpusLoadError,
    DocumentNotFoundError,
    InconsistentWriteError,
)
from ethdocs_rag.core.protocols import (
    # Protocols
    DocumentRetriever,
    # Data classes
    DocumentResult,
)

__all__ = [
    # Protocols
    "DocumentRetriever",
    # Data classes
    "DocumentResult",
    # Errors
    "RetrievalError",
    "CorpusLoadError",
    "DocumentNotFoundError",
    "InconsistentWriteError",
]
