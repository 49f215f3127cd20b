"""
Span attribute keys for retrieval operations.

Reference: https://opentelemetry.io/docs/specs/semconv/
"""

# ---------------------------------------------------------------------------
# RETRIEVAL NAMESPACE
# ---------------------------------------------------------------------------

RETRIEVAL_QUERY = "retrieval.query"  # only when capture_content is on
RETRIEVAL_QUERY_TOKENS = "retrieval.query.token_count"
RETRIEVAL_LIMIT = "retrieval.limit"
RETRIEVAL_SOURCE = "retrieval.source"
RETRIEVAL_RESULT_COUNT = "retrieval.result_count"
RETRIEVAL_TOP_SCORE = "retrieval.top_score"

# Documents
RETRIEVAL_DOCUMENT_ID = "retrieval.document.id"
RETRIEVAL_DOCUMENT_FOUND = "retrieval.document.found"
RETRIEVAL_CORPUS_SIZE = "retrieval.corpus.size"

# Tools
TOOL_NAME = "tool.name"
TOOL_STATUS = "tool.status"  # "ok", "error"


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------


def search_attributes(
    limit: int,
    source: str | None,
    token_count: int,
    query: str | None = None,
) -> dict:
    """Attributes for a search span. Query text is included only if given."""
    attrs = {
        RETRIEVAL_LIMIT: limit,
        RETRIEVAL_QUERY_TOKENS: token_count,
    }
    if source is not None:
        attrs[RETRIEVAL_SOURCE] = source
    if query is not None:
        attrs[RETRIEVAL_QUERY] = query
    return attrs


def tool_attributes(name: str) -> dict:
    """Attributes for a tool dispatch span."""
    return {TOOL_NAME: name}
