"""
Tests for avengement_solver.cli

Tests argument parsing and the end-to-end command.
"""

import pytest

from avengement_solver.cli import main, parse_args
from avengement_solver.memory.transposition_table import TranspositionTable


class TestParseArgs:
    """Argument parsing tests."""

    def test_defaults(self):
        args = parse_args([])
        assert args.iterations == 10_000
        assert args.runs == 1
        assert args.seed is None
        assert args.verbose is False
        assert args.cache.endswith("mcts_cache.db")

    def test_short_flags(self):
        args = parse_args(["-i", "50", "-r", "3", "-c", "x.db", "-v"])
        assert args.iterations == 50
        assert args.runs == 3
        assert args.cache == "x.db"
        assert args.verbose is True

    @pytest.mark.parametrize("argv", [
        ["--iterations", "0"],
        ["--runs", "-2"],
        ["--exploration", "-1"],
        ["--iterations", "many"],
    ])
    def test_rejects_bad_values(self, argv):
        with pytest.raises(SystemExit):
            parse_args(argv)


class TestMain:
    """End-to-end command tests."""

    def test_unresolved_exit_code(self, cache_path, capsys):
        code = main(["-i", "5", "-r", "1", "-c", str(cache_path), "--seed", "3"])
        out = capsys.readouterr().out

        assert code == 1
        assert "=== MCTS-Solver Analysis Complete ===" in out
        assert "Status: unresolved" in out
        assert "Total simulations: 5" in out
        assert cache_path.exists()

    def test_cache_reused_between_invocations(self, cache_path):
        main(["-i", "5", "-c", str(cache_path), "--seed", "1"])
        first = len(TranspositionTable.load(cache_path))
        main(["-i", "5", "-c", str(cache_path), "--seed", "2"])
        assert len(TranspositionTable.load(cache_path)) >= first
