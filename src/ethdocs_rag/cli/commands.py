"""
CLI commands - entry points for the documentation retriever.

Each command follows a consistent pattern:
1. Load environment and configuration
2. Build the retrieval service
3. Run the operation
4. Print results
5. Return exit code
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from dotenv import load_dotenv

from ethdocs_rag.core import CorpusLoadError, DocumentResult
from ethdocs_rag.observability import init_tracing, shutdown_tracing
from ethdocs_rag.retrieval import (
    RetrievalConfig,
    RetrievalService,
    get_config,
    get_retrieval_service,
    seed_data_dir,
)
from ethdocs_rag.tools import RpcDispatcher, get_tool_registry

logger = logging.getLogger(__name__)


def _load_env() -> None:
    """Load environment variables from .env file."""
    load_dotenv()


def _setup_logging(config: RetrievalConfig) -> None:
    # Logs go to stderr so `serve` keeps stdout for responses
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _build_service(config: RetrievalConfig) -> RetrievalService | None:
    try:
        return get_retrieval_service(config)
    except CorpusLoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return None


def _print_result(result: DocumentResult, show_content: bool) -> None:
    print(f"[{float(result.score):.4f}] {result.id}")
    if show_content:
        print(result.content)
        print("-" * 60)


def run_seed(args: argparse.Namespace, config: RetrievalConfig) -> int:
    """Write the built-in primers into the data directory."""
    written = seed_data_dir(config.docs_dir, overwrite=args.overwrite)
    for path in written:
        print(f"  wrote {path}")
    print(f"Seeded {len(written)} documents into {config.docs_dir}")
    return 0


def run_search(args: argparse.Namespace, config: RetrievalConfig) -> int:
    """Search the corpus and print ranked results."""
    service = _build_service(config)
    if service is None:
        return 1

    limit = args.limit if args.limit is not None else config.default_limit
    results = service.search(args.query, limit=limit, source=args.source)

    if args.json:
        print(json.dumps([r.to_dict() for r in results], indent=2))
        return 0

    if not results:
        print("No matching documents.")
        return 0

    for result in results:
        _print_result(result, show_content=args.content)
    return 0


def run_get(args: argparse.Namespace, config: RetrievalConfig) -> int:
    """Print one document by id; exit 1 when it does not exist."""
    service = _build_service(config)
    if service is None:
        return 1

    result = service.get_document(args.id)
    if result is None:
        print(f"Document not found: {args.id}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print(f"{result.id} ({result.source})")
        print("=" * 60)
        print(result.content)
    return 0


def run_serve(args: argparse.Namespace, config: RetrievalConfig) -> int:
    """Answer line-delimited JSON-RPC requests from stdin on stdout."""
    service = _build_service(config)
    if service is None:
        return 1

    dispatcher = RpcDispatcher(get_tool_registry(service))
    logger.info(f"Serving {service.document_count} documents on stdio")
    handled = dispatcher.serve(sys.stdin, sys.stdout)
    logger.info(f"Handled {handled} requests")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ethdocs",
        description="Keyword search over Ethereum and Uniswap documentation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  ethdocs seed                          # Write built-in primers to ./data
  ethdocs search "swap fee" --limit 3
  ethdocs search transfer --source contracts --json
  ethdocs get contracts/TokenStandards.md
  echo '{"jsonrpc":"2.0","id":1,"method":"search_docs","params":{"query":"twap"}}' | ethdocs serve
        """,
    )
    parser.add_argument("--data-dir", help="Root data directory (overrides ETHDOCS_DATA_DIR)")

    subparsers = parser.add_subparsers(dest="command", required=True)

    seed = subparsers.add_parser("seed", help="Write seed documents into the data directory")
    seed.add_argument("--overwrite", action="store_true", help="Replace existing files")

    search = subparsers.add_parser("search", help="Search documents")
    search.add_argument("query", help="Free-text query")
    search.add_argument("--limit", type=int, help="Maximum number of results")
    search.add_argument("--source", help="Restrict to one source partition")
    search.add_argument("--content", action="store_true", help="Print document content")
    search.add_argument("--json", action="store_true", help="Output JSON")

    get = subparsers.add_parser("get", help="Print a document by id")
    get.add_argument("id", help="Document id, '<source>/<title>'")
    get.add_argument("--json", action="store_true", help="Output JSON")

    subparsers.add_parser("serve", help="Answer JSON-RPC requests on stdin/stdout")

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point with subcommands.

    Usage:
        ethdocs seed     # Populate the data directory
        ethdocs search   # Ranked keyword search
        ethdocs get      # Fetch one document
        ethdocs serve    # JSON-RPC over stdio
    """
    _load_env()

    parser = build_parser()
    args = parser.parse_args(argv)

    config = get_config()
    if args.data_dir:
        config = replace(config, data_dir=Path(args.data_dir))

    _setup_logging(config)
    init_tracing()
    try:
        if args.command == "seed":
            return run_seed(args, config)
        elif args.command == "search":
            return run_search(args, config)
        elif args.command == "get":
            return run_get(args, config)
        elif args.command == "serve":
            return run_serve(args, config)
        else:
            parser.print_help()
            return 1
    finally:
        shutdown_tracing()


if __name__ == "__main__":
    sys.exit(main())
