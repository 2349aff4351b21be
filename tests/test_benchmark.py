import logging

import pytest

from minimax_bench.benchmark import (
    AlgorithmStats,
    format_duration,
    hypothetical_trees,
    line_value,
    main,
    run_average,
    run_once,
)
from minimax_bench.config import BenchmarkConfig
from minimax_bench.constants import ALGORITHM_ORDER, STOCKMAN_NAME
from minimax_bench.games import ExplicitTree, StockmanTree
from minimax_bench.search import SearchResult
from minimax_bench.strategy import Algorithm


def test_format_duration():
    assert format_duration(0.25) == "250.000 ms"
    assert format_duration(2.5e-5) == "25.000 us"
    assert format_duration(4e-8) == "40 ns"


def test_line_value():
    tree = StockmanTree()
    assert line_value(tree, tree.root(), (1, 0, 1, 1)) == 52
    assert line_value(tree, tree.root(), (1, 0)) is None
    assert line_value(tree, tree.root(), (2,)) is None


def test_run_once_reports_every_algorithm(capsys):
    results = run_once(StockmanTree(), STOCKMAN_NAME)
    assert list(results) == list(ALGORITHM_ORDER)
    assert all(result.value == 52 for result in results.values())

    out = capsys.readouterr().out
    assert STOCKMAN_NAME in out
    for algorithm in ALGORITHM_ORDER:
        assert algorithm.value in out
    assert "MATCH" in out


def test_run_once_subset(capsys):
    results = run_once(ExplicitTree([[3, 1], [4, 2]]), "small", ["sss", Algorithm.SCOUT])
    assert list(results) == [Algorithm.SSS, Algorithm.SCOUT]
    assert "branch_and_bound" not in capsys.readouterr().out


def test_run_average():
    trees = list(hypothetical_trees(3, 3, 4, seed=100))
    stats = run_average(trees, "average", total=len(trees))
    assert set(stats) == set(ALGORITHM_ORDER)
    for algorithm_stats in stats.values():
        assert algorithm_stats.trials == 4
    assert stats[Algorithm.ALPHA_BETA].average_count <= stats[Algorithm.BRANCH_AND_BOUND].average_count
    assert stats[Algorithm.BRANCH_AND_BOUND].average_count <= 27


def test_run_average_logs_disagreement(caplog):
    class LyingTree(ExplicitTree):
        # Changes its mind after the first full search
        calls = 0

        def leaf_value(self, node):
            LyingTree.calls += 1
            value = super().leaf_value(node)
            return value if LyingTree.calls <= 4 else value + 10

    with caplog.at_level(logging.ERROR):
        run_average([LyingTree([[3, 1], [4, 2]])], "lying",
                    [Algorithm.BRANCH_AND_BOUND, Algorithm.ALPHA_BETA])
    assert "ALGORITHM MISMATCH" in caplog.text


def test_algorithm_stats():
    stats = AlgorithmStats(Algorithm.PVS)
    assert stats.average_count == 0.0
    stats.add(SearchResult(value=1, count=10), 0.5)
    stats.add(SearchResult(value=1, count=20), 1.5)
    assert stats.average_count == 15
    assert stats.average_seconds == 1.0


def test_benchmark_config():
    config = BenchmarkConfig(algorithms=["pvs", "sss"], trials=3)
    assert config.algorithms == (Algorithm.PVS, Algorithm.SSS)
    assert [search.name for search in config.make_algorithms()] == ["pvs", "sss"]
    with pytest.raises(ValueError):
        BenchmarkConfig(trials=0)
    with pytest.raises(ValueError):
        BenchmarkConfig(algorithms=["minimax"])


def test_cli_stockman(capsys):
    main(["stockman"])
    out = capsys.readouterr().out
    assert STOCKMAN_NAME in out
    assert out.count("MATCH") >= len(ALGORITHM_ORDER)


def test_cli_average(capsys):
    main(["--algorithms", "alpha_beta,sss", "average", "--depth", "2", "--width", "3", "--trials", "3"])
    out = capsys.readouterr().out
    assert "alpha_beta" in out
    assert "pvs" not in out


def test_cli_perft(capsys):
    main(["perft", "--depth", "2", "--divide"])
    out = capsys.readouterr().out
    assert "e2e4: 20" in out
    assert "perft(2) = 400" in out


def test_cli_rejects_bad_hypothetical_tree():
    with pytest.raises(SystemExit):
        main(["hypothetical", "--depth", "2", "--width", "0"])
