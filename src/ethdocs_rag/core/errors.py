"""
Error taxonomy for the retrieval core.

Load failures are fatal for initialization, failed writes are fatal for
the call that made them. A missing document is NOT an error at the
service level (it returns None); DocumentNotFoundError exists for the
tool layer, which has to report the condition to its caller.
"""


class RetrievalError(Exception):
    """Base class for retrieval errors."""


class CorpusLoadError(RetrievalError):
    """A file under a declared source directory could not be read."""

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"Failed to load {path}: {message}")


class DocumentNotFoundError(RetrievalError):
    """Direct lookup found no document with the requested id."""

    def __init__(self, doc_id: str):
        self.doc_id = doc_id
        super().__init__(f"Document not found: {doc_id}")


class InconsistentWriteError(RetrievalError):
    """Store and index could not be updated together.

    The store append has been rolled back by the time this is raised.
    """
