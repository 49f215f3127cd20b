"""
ethdocs-rag - keyword retrieval over blockchain documentation.

The retrieval service indexes a directory of documentation files
(Uniswap docs, contract sources, primers) and answers keyword queries
for the assistant's `search_docs` and `get_document` tools.
"""

__version__ = "0.1.0"
