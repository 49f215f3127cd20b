"""
Line-delimited JSON-RPC 2.0 dispatch.

One request per line in, one response per line out. The socket or
stdio transport around this lives outside the package; handle_line is
pure apart from the retriever it dispatches to.

Request:  {"jsonrpc": "2.0", "id": 1, "method": "search_docs",
           "params": {"query": "swap fee", "limit": 3}}
Response: {"jsonrpc": "2.0", "id": 1, "result": [...]}
"""

from __future__ import annotations

import json
import logging
from typing import Any, Iterable, TextIO

from pydantic import ValidationError

from ethdocs_rag.observability import get_tracer, tool_attributes
from ethdocs_rag.observability.attributes import TOOL_STATUS
from ethdocs_rag.tools.registry import (
    INVALID_REQUEST,
    PARSE_ERROR,
    SERVER_ERROR,
    ToolError,
    ToolRegistry,
)
from ethdocs_rag.tools.schemas import JsonRpcError, JsonRpcRequest, JsonRpcResponse

logger = logging.getLogger(__name__)


class RpcDispatcher:
    """Maps JSON-RPC methods onto registry tools."""

    def __init__(self, registry: ToolRegistry):
        self._registry = registry

    def handle_request(self, method: str, params: dict[str, Any]) -> Any:
        """Run one method; raises ToolError on failure."""
        if method == "list_tools":
            return {"tools": self._registry.list_tools()}

        with get_tracer().span("tool.call", tool_attributes(method)) as span:
            try:
                result = self._registry.call(method, params)
            except ToolError as e:
                span.set(TOOL_STATUS, "error")
                span.fail(e, e.message)
                raise
            span.set(TOOL_STATUS, "ok")
            span.ok()
            return result

    def handle_line(self, line: str) -> str:
        """Decode one request line and encode its response line (no newline)."""
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as e:
            return self._error(None, PARSE_ERROR, f"Parse error: {e.msg}")

        request_id = payload.get("id") if isinstance(payload, dict) else None

        try:
            request = JsonRpcRequest.model_validate(payload)
        except ValidationError:
            return self._error(request_id, INVALID_REQUEST, "Invalid request")

        try:
            result = self.handle_request(request.method, request.params)
        except ToolError as e:
            logger.debug(f"{request.method} failed: {e.message}")
            return self._error(request.id, e.code, e.message, e.data)
        except Exception:
            logger.exception(f"Unhandled error in {request.method}")
            return self._error(request.id, SERVER_ERROR, "Internal error")

        return JsonRpcResponse(id=request.id, result=result).model_dump_json(exclude={"error"})

    def serve(self, lines: Iterable[str], out: TextIO) -> int:
        """Answer every non-blank line; returns the number of requests handled."""
        handled = 0
        for line in lines:
            if not line.strip():
                continue
            out.write(self.handle_line(line) + "\n")
            out.flush()
            handled += 1
        return handled

    @staticmethod
    def _error(request_id: Any, code: int, message: str, data: Any = None) -> str:
        # "id" stays null when the request id could not be read
        response = JsonRpcResponse(
            id=request_id if isinstance(request_id, (int, str)) else None,
            error=JsonRpcError(code=code, message=message, data=data),
        )
        return response.model_dump_json(exclude={"result"})
