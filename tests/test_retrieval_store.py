"""
Unit Tests for the Document Store

Tests loading the corpus from source directories, appending,
and lookup by id.
"""

import pytest
import numpy as np

from ethdocs_rag.core import CorpusLoadError
from ethdocs_rag.retrieval.document import Document, make_document_id
from ethdocs_rag.retrieval.store import DocumentStore


# ---------------------------------------------------------------------------
# FIXTURES
# ---------------------------------------------------------------------------


@pytest.fixture
def docs_dir(tmp_path):
    """Create a docs directory with two sources."""
    v2 = tmp_path / "uniswap-v2"
    v2.mkdir()
    (v2 / "UniswapV2Pair.sol").write_text("contract UniswapV2Pair { function swap() }")
    (v2 / "README.md").write_text("Uniswap V2 core contracts")

    contracts = tmp_path / "contracts"
    contracts.mkdir()
    (contracts / "IERC20.sol").write_text("interface IERC20 { function transfer() }")
    (contracts / "nested").mkdir()

    return tmp_path


# ---------------------------------------------------------------------------
# LOADING
# ---------------------------------------------------------------------------


class TestLoad:
    """Test DocumentStore.load from source directories."""

    def test_loads_every_file(self, docs_dir):
        """Each regular file should become one document."""
        store = DocumentStore()
        positions = store.load({
            "uniswap-v2": docs_dir / "uniswap-v2",
            "contracts": docs_dir / "contracts",
        })

        assert len(store) == 3
        assert positions == [0, 1, 2]

    def test_document_fields_from_file(self, docs_dir):
        """id is source/filename, title is the filename, content is the text."""
        store = DocumentStore()
        store.load({"contracts": docs_dir / "contracts"})

        doc = store[0]
        assert doc.id == "contracts/IERC20.sol"
        assert doc.title == "IERC20.sol"
        assert doc.source == "contracts"
        assert doc.content == "interface IERC20 { function transfer() }"

    def test_files_loaded_in_name_order(self, docs_dir):
        """Positions within a source follow file name order."""
        store = DocumentStore()
        store.load({"uniswap-v2": docs_dir / "uniswap-v2"})

        assert [doc.title for doc in store] == ["README.md", "UniswapV2Pair.sol"]

    def test_missing_directory_is_skipped(self, docs_dir):
        """A source whose directory does not exist contributes nothing."""
        store = DocumentStore()
        store.load({
            "uniswap-v3": docs_dir / "uniswap-v3",
            "contracts": docs_dir / "contracts",
        })

        assert len(store) == 1
        assert store[0].source == "contracts"

    def test_subdirectories_are_ignored(self, docs_dir):
        """Only regular files are ingested."""
        store = DocumentStore()
        store.load({"contracts": docs_dir / "contracts"})

        assert [doc.title for doc in store] == ["IERC20.sol"]

    def test_unreadable_file_raises(self, tmp_path):
        """A file that cannot be decoded aborts the load."""
        source = tmp_path / "contracts"
        source.mkdir()
        (source / "binary.bin").write_bytes(b"\xff\xfe\xfa\x00")

        store = DocumentStore()
        with pytest.raises(CorpusLoadError) as exc_info:
            store.load({"contracts": source})

        assert "binary.bin" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


# ---------------------------------------------------------------------------
# APPEND AND LOOKUP
# ---------------------------------------------------------------------------


class TestAppendAndLookup:
    """Test append positions and get_by_id."""

    def test_append_returns_next_position(self):
        store = DocumentStore()

        assert store.append("A.md", "alpha", "src") == 0
        assert store.append("B.md", "beta", "src") == 1

    def test_append_never_deduplicates(self):
        """Identical source/title pairs create separate entries."""
        store = DocumentStore()
        store.append("X", "first", "src")
        store.append("X", "second", "src")

        assert len(store) == 2
        assert store[0].id == store[1].id == "src/X"

    def test_get_by_id_returns_first_match(self):
        """Earlier insertions shadow later duplicates for direct lookup."""
        store = DocumentStore()
        store.append("X", "first", "src")
        store.append("X", "second", "src")

        assert store.get_by_id("src/X").content == "first"

    def test_get_by_id_missing(self):
        store = DocumentStore()
        store.append("X", "first", "src")

        assert store.get_by_id("src/Y") is None

    def test_truncate_drops_tail(self):
        store = DocumentStore()
        store.append("A", "alpha", "src")
        store.append("B", "beta", "src")

        store.truncate(1)

        assert len(store) == 1
        assert store.get_by_id("src/B") is None


# ---------------------------------------------------------------------------
# DOCUMENT MODEL
# ---------------------------------------------------------------------------


class TestDocument:
    """Test Document dataclass."""

    def test_create_derives_id(self):
        doc = Document.create("Router.sol", "content", "uniswap-v2")

        assert doc.id == "uniswap-v2/Router.sol"
        assert doc.id == make_document_id("uniswap-v2", "Router.sol")

    def test_document_default_fields(self):
        """Embedding is optional and unset by default."""
        doc = Document.create("T", "content", "src")

        assert doc.embedding is None

    def test_document_with_embedding(self):
        """Document should accept an embedding array."""
        doc = Document(
            id="src/T",
            title="T",
            content="content",
            source="src",
            embedding=np.array([0.1, 0.2, 0.3], dtype=np.float32),
        )

        assert len(doc.embedding) == 3

    def test_document_is_immutable(self):
        doc = Document.create("T", "content", "src")

        with pytest.raises(AttributeError):
            doc.content = "changed"

    def test_to_result_carries_float32_score(self):
        result = Document.create("T", "content", "src").to_result(0.5)

        assert result.id == "src/T"
        assert isinstance(result.score, np.float32)
        assert result.to_dict()["score"] == 0.5

    def test_embedding_excluded_from_equality(self):
        """Documents with embeddings compare and hash on their text fields."""
        a = Document("src/T", "T", "content", "src", embedding=np.array([0.1, 0.2]))
        b = Document("src/T", "T", "content", "src", embedding=np.array([0.3, 0.4]))

        assert a == b
        assert hash(a) == hash(b)
        assert len({a, b}) == 1
