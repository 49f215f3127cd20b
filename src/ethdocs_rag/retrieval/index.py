"""
Inverted index - token to posting list mapping.

Posting lists hold document POSITIONS (indices into the DocumentStore),
not ids, and keep duplicates: a token that occurs three times in one
document lists that position three times. Query scoring relies on this
to weight documents by term frequency.

The index only grows. There is no removal or rebuild; positions stay
valid because the store never removes or reorders documents.
"""

from __future__ import annotations

import re
from collections import defaultdict

# Anything that is not a letter or digit separates tokens.
_TOKEN_SPLIT = re.compile(r"[\W_]+")


def tokenize(text: str) -> list[str]:
    """
    Lowercase text and split it into alphanumeric tokens.

    Examples:
        >>> tokenize("Uniswap-V2 Router!")
        ['uniswap', 'v2', 'router']
    """
    return [token for token in _TOKEN_SPLIT.split(text.lower()) if token]


class InvertedIndex:
    """Token -> positions index supporting incremental growth."""

    def __init__(self):
        self._postings: dict[str, list[int]] = defaultdict(list)

    def index_document(self, position: int, content: str) -> None:
        """Append position to the posting list of every token occurrence.

        Tokenizes fully before touching any posting list, so a failure
        leaves the index unchanged.
        """
        for token in tokenize(content):
            self._postings[token].append(position)

    def postings(self, token: str) -> list[int]:
        """Posting list for a token (empty if the token was never indexed)."""
        return self._postings.get(token, [])

    def __contains__(self, token: str) -> bool:
        return token in self._postings

    def __len__(self) -> int:
        """Number of distinct tokens."""
        return len(self._postings)
