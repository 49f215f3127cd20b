"""
Tools module - the documentation tools exposed to the assistant.

- schemas: Pydantic params/response models
- registry: Tool implementations and ToolRegistry
- rpc: Line-delimited JSON-RPC dispatch
"""

from ethdocs_rag.tools.registry import (
    PARSE_ERROR,
    INVALID_REQUEST,
    METHOD_NOT_FOUND,
    INVALID_PARAMS,
    SERVER_ERROR,
    ToolError,
    ToolRegistry,
    SearchDocsTool,
    GetDocumentTool,
    AddDocumentTool,
    get_tool_registry,
)
from ethdocs_rag.tools.rpc import RpcDispatcher
from ethdocs_rag.tools.schemas import (
    SearchDocsParams,
    GetDocumentParams,
    AddDocumentParams,
    DocumentPayload,
)

__all__ = [
    # Error codes
    "PARSE_ERROR",
    "INVALID_REQUEST",
    "METHOD_NOT_FOUND",
    "INVALID_PARAMS",
    "SERVER_ERROR",
    # Registry
    "ToolError",
    "ToolRegistry",
    "SearchDocsTool",
    "GetDocumentTool",
    "AddDocumentTool",
    "get_tool_registry",
    # Dispatch
    "RpcDispatcher",
    # Schemas
    "SearchDocsParams",
    "GetDocumentParams",
    "AddDocumentParams",
    "DocumentPayload",
]
