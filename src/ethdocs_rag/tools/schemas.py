"""
Request/response schemas for the documentation tools.

These Pydantic models are the contract between the tool-calling layer
and the retrieval core. Params are validated here, before they reach
the service, so the core never sees a missing query or a negative
limit.
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

from ethdocs_rag.core import DocumentResult


# ---------------------------------------------------------------------------
# TOOL PARAMS
# ---------------------------------------------------------------------------


class SearchDocsParams(BaseModel):
    """Params of the `search_docs` tool."""

    model_config = ConfigDict(extra="ignore")

    query: str = Field(description="Free-text search query")
    limit: int | None = Field(
        default=None,
        ge=0,
        description="Maximum number of results (configured default when omitted)",
    )
    source: str | None = Field(
        default=None,
        description="Restrict results to one source (e.g. 'uniswap-v2')",
    )


class GetDocumentParams(BaseModel):
    """Params of the `get_document` tool."""

    model_config = ConfigDict(extra="ignore")

    id: str = Field(description="Document id, '<source>/<title>'")


class AddDocumentParams(BaseModel):
    """Params of the `add_document` tool."""

    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, description="Document title, usually a file name")
    content: str = Field(description="Full document text")
    source: str = Field(min_length=1, description="Source partition label")


# ---------------------------------------------------------------------------
# TOOL OUTPUT
# ---------------------------------------------------------------------------


class DocumentPayload(BaseModel):
    """A document as returned to tool callers."""

    id: str
    title: str
    content: str
    source: str
    score: float

    @classmethod
    def from_result(cls, result: DocumentResult) -> "DocumentPayload":
        return cls(
            id=result.id,
            title=result.title,
            content=result.content,
            source=result.source,
            score=float(result.score),
        )


# ---------------------------------------------------------------------------
# JSON-RPC ENVELOPE
# ---------------------------------------------------------------------------


class JsonRpcRequest(BaseModel):
    """One line of the line-delimited JSON-RPC protocol."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    method: str
    params: dict[str, Any] = Field(default_factory=dict)


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Any = None


class JsonRpcResponse(BaseModel):
    jsonrpc: Literal["2.0"] = "2.0"
    id: int | str | None = None
    result: Any = None
    error: JsonRpcError | None = None
