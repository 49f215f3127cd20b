"""
CLI module - command-line interface.

Provides entry points for:
- Seeding the data directory
- Searching and fetching documents
- Serving the documentation tools over stdio JSON-RPC
"""

from ethdocs_rag.cli.commands import (
    main,
    run_seed,
    run_search,
    run_get,
    run_serve,
)

__all__ = [
    "main",
    "run_seed",
    "run_search",
    "run_get",
    "run_serve",
]
