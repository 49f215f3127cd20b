"""
Ethereum documentation seed data.

These primers are the hand-written part of the corpus. Protocol
sources and READMEs fetched from upstream repositories land next to
them under the same source directories.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from ethdocs_rag.retrieval.document import Document

if TYPE_CHECKING:
    from ethdocs_rag.core import DocumentRetriever

logger = logging.getLogger(__name__)


ETHEREUM_BASICS = """# Ethereum Basics

Ethereum is a decentralized, open-source blockchain with smart contract
functionality. Ether (ETH) is the native cryptocurrency of the platform.

## Key Concepts

- **Accounts**: Ethereum has two kinds of accounts.
  - Externally Owned Accounts (EOAs): controlled by private keys
  - Contract Accounts: controlled by their code

- **Transactions**: operations that change the state of the chain
  - From: sender address
  - To: recipient address
  - Value: amount of ETH to transfer
  - Data: optional data payload
  - Gas Limit: maximum gas to use
  - Gas Price: price per unit of gas

- **Gas**: unit measuring the computational effort of an operation.
  The sender pays gas used times gas price.

- **Smart Contracts**: programs that run on the Ethereum blockchain and
  enforce their rules automatically.

## Common Operations

- Sending ETH: transfer value from one account to another
- Deploying Contracts: upload contract code to the blockchain
- Calling Contract Functions: interact with deployed contracts
"""

TOKEN_STANDARDS = """# Ethereum Token Standards

## ERC-20

The most widely used standard for fungible tokens.

### Key Functions

- **totalSupply()**: total token supply
- **balanceOf(address)**: token balance of an address
- **transfer(address, uint256)**: transfer tokens to an address
- **transferFrom(address, address, uint256)**: transfer on behalf of an owner
- **approve(address, uint256)**: allow a spender to withdraw from your account
- **allowance(address, address)**: amount a spender may still withdraw

## ERC-721

Standard for non-fungible tokens (NFTs).

### Key Functions

- **balanceOf(address)**: number of NFTs owned by an address
- **ownerOf(uint256)**: owner of a specific NFT
- **safeTransferFrom(address, address, uint256)**: transfer ownership of an NFT
- **approve(address, uint256)**: allow another address to transfer one NFT
- **getApproved(uint256)**: approved address for one NFT
- **setApprovalForAll(address, bool)**: let an operator manage all of your NFTs
- **isApprovedForAll(address, address)**: whether an operator is approved
"""

UNISWAP_V2_OVERVIEW = """# Uniswap V2 Overview

Uniswap V2 is an automated market maker (AMM) protocol for token swaps
on Ethereum.

## Key Components

- **UniswapV2Factory**: creates and tracks Uniswap pairs
- **UniswapV2Pair**: core AMM logic, holds the reserves
- **UniswapV2Router02**: user-facing functions for interacting with pairs

## Core Concepts

### Constant Product Formula

Uniswap V2 uses the constant product formula: x * y = k

- x is the reserve of token A
- y is the reserve of token B
- k stays constant across trades

### Liquidity Provision

Liquidity providers deposit both tokens in the current ratio and
receive LP tokens representing their share of the pool.

### Swapping

Every swap pays a 0.3% fee to liquidity providers. Price impact grows
with the size of the swap relative to the pool reserves.

### Price Oracle

Pairs accumulate prices so that contracts can compute a time-weighted
average price (TWAP) over any window.
"""


def get_seed_documents() -> list[Document]:
    """Built-in primers, one per (source, file name)."""
    return [
        Document.create("EthereumBasics.md", ETHEREUM_BASICS, "contracts"),
        Document.create("TokenStandards.md", TOKEN_STANDARDS, "contracts"),
        Document.create("UniswapV2Overview.md", UNISWAP_V2_OVERVIEW, "uniswap-v2"),
    ]


def seed_data_dir(docs_dir: Path | str, overwrite: bool = False) -> list[Path]:
    """
    Write the seed documents under docs_dir/<source>/<title>.

    Existing files are left alone unless overwrite is set.

    Returns:
        Paths that were written
    """
    docs_dir = Path(docs_dir)
    written = []

    for doc in get_seed_documents():
        path = docs_dir / doc.source / doc.title
        if path.exists() and not overwrite:
            logger.debug(f"Seed file exists, skipping: {path}")
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(doc.content, encoding="utf-8")
        written.append(path)

    logger.info(f"Wrote {len(written)} seed documents to {docs_dir}")
    return written


def seed_service(retriever: DocumentRetriever) -> int:
    """Add the seed documents directly to a running retriever."""
    docs = get_seed_documents()
    for doc in docs:
        retriever.add_document(doc.title, doc.content, doc.source)
    return len(docs)
