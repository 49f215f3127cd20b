"""
Unit Tests for CLI Commands

Runs the CLI against a temporary data directory and checks output
and exit codes.
"""

import io
import json
from unittest.mock import patch

import pytest

from ethdocs_rag.cli import commands
from ethdocs_rag.retrieval.config import reset_config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Isolate the CLI from the caller's environment."""
    for var in ("ETHDOCS_DATA_DIR", "ETHDOCS_SOURCES", "ETHDOCS_DEFAULT_LIMIT", "ETHDOCS_TRACING_ENABLED"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def seeded_dir(tmp_path):
    assert commands.main(["--data-dir", str(tmp_path), "seed"]) == 0
    return tmp_path


# ---------------------------------------------------------------------------
# LOAD_ENV TESTS
# ---------------------------------------------------------------------------


class TestLoadEnv:
    """Test environment loading."""

    def test_load_env_does_not_raise(self):
        commands._load_env()


# ---------------------------------------------------------------------------
# MAIN CLI DISPATCH TESTS
# ---------------------------------------------------------------------------


class TestMainCliDispatch:
    """Test main CLI dispatches to correct handlers."""

    @pytest.mark.parametrize(
        "argv, handler",
        [
            (["seed"], "run_seed"),
            (["search", "swap"], "run_search"),
            (["get", "contracts/IERC20.sol"], "run_get"),
            (["serve"], "run_serve"),
        ],
    )
    def test_main_dispatches(self, argv, handler):
        with patch.object(commands, handler) as mock_handler:
            mock_handler.return_value = 0
            result = commands.main(argv)

        mock_handler.assert_called_once()
        assert result == 0

    def test_missing_command_exits(self):
        with pytest.raises(SystemExit):
            commands.main([])

    def test_data_dir_override(self, tmp_path):
        with patch.object(commands, "run_seed", return_value=0) as mock_seed:
            commands.main(["--data-dir", str(tmp_path), "seed"])

        _, config = mock_seed.call_args.args
        assert config.data_dir == tmp_path


# ---------------------------------------------------------------------------
# COMMANDS
# ---------------------------------------------------------------------------


class TestCommands:
    """Test command output against seeded data."""

    def test_seed_writes_files(self, tmp_path, capsys):
        assert commands.main(["--data-dir", str(tmp_path), "seed"]) == 0

        assert (tmp_path / "docs" / "contracts" / "TokenStandards.md").exists()
        assert "Seeded 3 documents" in capsys.readouterr().out

    def test_search(self, seeded_dir, capsys):
        capsys.readouterr()

        code = commands.main(["--data-dir", str(seeded_dir), "search", "constant product"])

        assert code == 0
        assert "uniswap-v2/UniswapV2Overview.md" in capsys.readouterr().out

    def test_search_json(self, seeded_dir, capsys):
        capsys.readouterr()

        code = commands.main([
            "--data-dir", str(seeded_dir), "search", "allowance", "--source", "contracts", "--json",
        ])

        results = json.loads(capsys.readouterr().out)
        assert code == 0
        assert [r["id"] for r in results] == ["contracts/TokenStandards.md"]

    def test_search_no_match(self, seeded_dir, capsys):
        capsys.readouterr()

        code = commands.main(["--data-dir", str(seeded_dir), "search", "zzzznomatch"])

        assert code == 0
        assert "No matching documents." in capsys.readouterr().out

    def test_get(self, seeded_dir, capsys):
        capsys.readouterr()

        code = commands.main(["--data-dir", str(seeded_dir), "get", "contracts/TokenStandards.md"])

        assert code == 0
        assert "ERC-721" in capsys.readouterr().out

    def test_get_not_found(self, seeded_dir, capsys):
        code = commands.main(["--data-dir", str(seeded_dir), "get", "contracts/Missing.md"])

        assert code == 1
        assert "Document not found" in capsys.readouterr().err

    def test_unreadable_corpus(self, tmp_path, capsys):
        source = tmp_path / "docs" / "contracts"
        source.mkdir(parents=True)
        (source / "bad.bin").write_bytes(b"\xff\xfe\xfa")

        code = commands.main(["--data-dir", str(tmp_path), "search", "anything"])

        assert code == 1
        assert "bad.bin" in capsys.readouterr().err

    def test_serve(self, seeded_dir, capsys, monkeypatch):
        request = {"jsonrpc": "2.0", "id": 1, "method": "search_docs", "params": {"query": "twap", "limit": 1}}
        monkeypatch.setattr("sys.stdin", io.StringIO(json.dumps(request) + "\n"))
        capsys.readouterr()

        code = commands.main(["--data-dir", str(seeded_dir), "serve"])

        response = json.loads(capsys.readouterr().out.strip())
        assert code == 0
        assert response["result"][0]["id"] == "uniswap-v2/UniswapV2Overview.md"
