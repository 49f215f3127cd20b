"""
Document store - the ordered corpus.

Each document's position in the store is its stable handle; the
inverted index refers to documents by position. Documents are only
ever appended.

Directory layout read by load():

    <data_dir>/docs/<source>/<file>

Every regular file becomes one document titled with its file name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, Mapping

from ethdocs_rag.core import CorpusLoadError
from ethdocs_rag.retrieval.document import Document

logger = logging.getLogger(__name__)


class DocumentStore:
    """Append-only ordered collection of documents."""

    def __init__(self):
        self._documents: list[Document] = []

    def load(self, directories_by_source: Mapping[str, Path | str]) -> list[int]:
        """
        Ingest every regular file of each source directory.

        Directories that do not exist are skipped (empty source). A file
        that cannot be read aborts the load with CorpusLoadError.

        Args:
            directories_by_source: source label -> directory path

        Returns:
            Positions of the loaded documents, in load order
        """
        positions = []

        for source, directory in directories_by_source.items():
            directory = Path(directory)
            if not directory.is_dir():
                logger.warning(f"Source directory missing, skipping: {source} ({directory})")
                continue

            count = 0
            for path in sorted(directory.iterdir()):
                if not path.is_file():
                    continue
                try:
                    content = path.read_text(encoding="utf-8")
                except (OSError, UnicodeDecodeError) as e:
                    raise CorpusLoadError(str(path), str(e)) from e

                positions.append(self.append(path.name, content, source))
                count += 1

            logger.info(f"Loaded {count} documents from source '{source}'")

        return positions

    def append(self, title: str, content: str, source: str) -> int:
        """Create a document and return its position. Never deduplicates."""
        self._documents.append(Document.create(title, content, source))
        return len(self._documents) - 1

    def truncate(self, length: int) -> None:
        """Drop documents at positions >= length (rollback of a failed write)."""
        del self._documents[length:]

    def get_by_id(self, doc_id: str) -> Document | None:
        """First document with this id, in insertion order."""
        for doc in self._documents:
            if doc.id == doc_id:
                return doc
        return None

    def __getitem__(self, position: int) -> Document:
        return self._documents[position]

    def __len__(self) -> int:
        return len(self._documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self._documents)
