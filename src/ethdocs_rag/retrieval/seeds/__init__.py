"""
Seed data for the retrieval system.

Built-in primers covering Ethereum basics, token standards and Uniswap
V2, written into the data directory so a fresh install has something
to search.
"""

from ethdocs_rag.retrieval.seeds.ethereum_docs import (
    get_seed_documents,
    seed_data_dir,
    seed_service,
)

__all__ = ["get_seed_documents", "seed_data_dir", "seed_service"]
