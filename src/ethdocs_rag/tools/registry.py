"""
Tool registry - named tools over a DocumentRetriever.

Each tool validates its params against a schema, calls the retriever
and returns a JSON-ready value. Failures are raised as ToolError with a
JSON-RPC error code so the dispatcher can report them unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Protocol

from pydantic import BaseModel, ValidationError

from ethdocs_rag.core import DocumentNotFoundError, DocumentRetriever, RetrievalError
from ethdocs_rag.retrieval.config import get_config
from ethdocs_rag.tools.schemas import (
    AddDocumentParams,
    DocumentPayload,
    GetDocumentParams,
    SearchDocsParams,
)

logger = logging.getLogger(__name__)

# JSON-RPC 2.0 error codes
PARSE_ERROR = -32700
INVALID_REQUEST = -32600
METHOD_NOT_FOUND = -32601
INVALID_PARAMS = -32602
SERVER_ERROR = -32000


class ToolError(Exception):
    """A tool call failed; `code` is the JSON-RPC error code to report."""

    def __init__(self, code: int, message: str, data: Any = None):
        self.code = code
        self.message = message
        self.data = data
        super().__init__(message)


class Tool(Protocol):
    """Contract for a callable tool."""

    name: str
    description: str

    def execute(self, params: dict[str, Any], retriever: DocumentRetriever) -> Any:
        ...


def _validate(model: type[BaseModel], params: dict[str, Any]) -> Any:
    try:
        return model.model_validate(params)
    except ValidationError as e:
        raise ToolError(
            INVALID_PARAMS,
            "Invalid params",
            data=e.errors(include_url=False, include_context=False),
        ) from e


class SearchDocsTool:
    name = "search_docs"
    description = "Search documentation and code examples for blockchain development"

    def execute(self, params: dict[str, Any], retriever: DocumentRetriever) -> list[dict]:
        request = _validate(SearchDocsParams, params)
        limit = request.limit if request.limit is not None else get_config().default_limit
        results = retriever.search(request.query, limit=limit, source=request.source)
        return [DocumentPayload.from_result(r).model_dump() for r in results]


class GetDocumentTool:
    name = "get_document"
    description = "Get a documentation file or contract source by id"

    def execute(self, params: dict[str, Any], retriever: DocumentRetriever) -> dict:
        request = _validate(GetDocumentParams, params)
        result = retriever.get_document(request.id)
        if result is None:
            raise DocumentNotFoundError(request.id)
        return DocumentPayload.from_result(result).model_dump()


class AddDocumentTool:
    name = "add_document"
    description = "Add a document to the searchable documentation corpus"

    def execute(self, params: dict[str, Any], retriever: DocumentRetriever) -> dict:
        request = _validate(AddDocumentParams, params)
        result = retriever.add_document(request.title, request.content, request.source)
        return DocumentPayload.from_result(result).model_dump()


class ToolRegistry:
    """Name -> tool lookup and invocation."""

    def __init__(self, retriever: DocumentRetriever):
        self._retriever = retriever
        self._tools: dict[str, Tool] = {}

    def register_tool(self, tool: Tool) -> None:
        self._tools[tool.name] = tool

    def register_default_tools(self) -> "ToolRegistry":
        self.register_tool(SearchDocsTool())
        self.register_tool(GetDocumentTool())
        self.register_tool(AddDocumentTool())
        return self

    def get_tool(self, name: str) -> Tool:
        try:
            return self._tools[name]
        except KeyError:
            raise ToolError(METHOD_NOT_FOUND, f"Unknown method: {name}") from None

    def list_tools(self) -> list[dict[str, str]]:
        return [
            {"name": tool.name, "description": tool.description}
            for tool in self._tools.values()
        ]

    def call(self, name: str, params: dict[str, Any]) -> Any:
        """
        Invoke a tool by name.

        Raises:
            ToolError: unknown tool, invalid params, missing document,
                or a retrieval failure
        """
        tool = self.get_tool(name)
        try:
            return tool.execute(params, self._retriever)
        except DocumentNotFoundError as e:
            raise ToolError(SERVER_ERROR, "Document not found", data={"id": e.doc_id}) from e
        except RetrievalError as e:
            logger.error(f"Tool {name} failed: {e}")
            raise ToolError(SERVER_ERROR, str(e)) from e


def get_tool_registry(retriever: DocumentRetriever) -> ToolRegistry:
    """Registry with the documentation tools registered."""
    return ToolRegistry(retriever).register_default_tools()
