"""
Benchmark driver comparing the six minimax algorithms.

Every sub-command either runs each algorithm once on a single tree and prints
time, leaf evaluations and whether the principal variation reproduces the
value, or averages leaf evaluations and times over many seeded random trees.
"""

import argparse
import logging
import sys
import time
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence

import chess
from tqdm import tqdm

from minimax_bench.config import BenchmarkConfig
from minimax_bench.constants import (
    ALGORITHM_ORDER,
    CHESS_DEPTH,
    DEFAULT_SEED,
    DEFAULT_TRIALS,
    DEPTH_WIDTH_PAIRS,
    STOCKMAN_NAME,
    UNIFORM_DEPTH,
    UT3_DEPTH,
)
from minimax_bench.errors import SearchError
from minimax_bench.games import (
    ChessTree,
    HypotheticalTree,
    StockmanTree,
    UniformTree,
    Ut3Tree,
)
from minimax_bench.search import SearchResult, get_search_algorithm
from minimax_bench.strategy import Algorithm
from minimax_bench.tree import GameTree, Value, perft, perft_divide


def setup_logging(verbose=False):
    """Set up logging configuration."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def format_duration(seconds: float) -> str:
    """Render a duration with the largest of ms, us and ns that keeps it above one."""
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f} ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.3f} us"
    return f"{seconds * 1e9:.0f} ns"


def line_value(tree: GameTree, root: Any, line: Sequence[int]) -> Optional[Value]:
    """
    Value of the leaf reached by following `line` from `root`.

    Returns None when the line is out of range or stops short of a leaf.
    """
    node = root
    for index in line:
        children = tree.children(node)
        if not 0 <= index < len(children):
            return None
        node = children[index]
    if not tree.is_leaf(node):
        return None
    return tree.leaf_value(node)


def format_line(tree: GameTree, root: Any, line: Sequence[int]) -> str:
    labels = []
    node = root
    for index in line:
        labels.append(tree.move_label(node, index))
        node = tree.children(node)[index]
    return " ".join(labels) or "-"


@dataclass
class AlgorithmStats:
    """Running totals for one algorithm across the trees of an average run."""
    algorithm: Algorithm
    trials: int = 0
    total_count: int = 0
    total_seconds: float = 0.0

    def add(self, result: SearchResult, seconds: float):
        self.trials += 1
        self.total_count += result.count
        self.total_seconds += seconds

    @property
    def average_count(self) -> float:
        return self.total_count / self.trials if self.trials else 0.0

    @property
    def average_seconds(self) -> float:
        return self.total_seconds / self.trials if self.trials else 0.0


def _timed_search(algorithm: Algorithm, tree: GameTree, root: Any):
    search = get_search_algorithm(algorithm)
    start_time = time.perf_counter()
    result = search.search(root, tree)
    return result, time.perf_counter() - start_time


def run_once(tree: GameTree, name: str,
             algorithms: Sequence[Algorithm] = ALGORITHM_ORDER) -> Dict[Algorithm, SearchResult]:
    """Run each algorithm once on `tree` and print one report row per algorithm."""
    root = tree.root()
    results = {}

    print(f"\n=== {name} ===")
    print(f"{'algorithm':<18}{'value':>12}{'leaves':>12}{'time':>16}  pv")
    for algorithm in algorithms:
        algorithm = Algorithm(algorithm)
        result, seconds = _timed_search(algorithm, tree, root)
        results[algorithm] = result

        reached = line_value(tree, root, result.line)
        status = "MATCH" if reached == result.value else "MISMATCH"
        if status == "MISMATCH":
            logging.warning(f"{algorithm.value}: line {result.line} reaches {reached}, value is {result.value}")

        print(f"{algorithm.value:<18}{result.value:>12}{result.count:>12}{format_duration(seconds):>16}  "
              f"{status} {format_line(tree, root, result.line)}")

    values = {result.value for result in results.values()}
    if len(values) > 1:
        logging.error(f"ALGORITHM MISMATCH on {name}: {sorted(values)}")
    return results


def run_average(trees: Iterable[GameTree], name: str,
                algorithms: Sequence[Algorithm] = ALGORITHM_ORDER,
                total: Optional[int] = None) -> Dict[Algorithm, AlgorithmStats]:
    """
    Run each algorithm on every tree and print the average leaf evaluations and time.

    Trees on which the algorithms disagree about the root value are logged as
    ALGORITHM MISMATCH and still counted.
    """
    algorithms = [Algorithm(algorithm) for algorithm in algorithms]
    stats = {algorithm: AlgorithmStats(algorithm) for algorithm in algorithms}
    mismatches = 0

    for trial, tree in enumerate(tqdm(trees, total=total, desc=name, leave=False)):
        root = tree.root()
        values = {}
        for algorithm in algorithms:
            result, seconds = _timed_search(algorithm, tree, root)
            stats[algorithm].add(result, seconds)
            values[algorithm] = result.value
        if len(set(values.values())) > 1:
            mismatches += 1
            logging.error(f"ALGORITHM MISMATCH on {name} trial {trial}: "
                          + ", ".join(f"{a.value}={v}" for a, v in values.items()))

    print(f"\n=== {name} ===")
    print(f"{'algorithm':<18}{'avg leaves':>14}{'avg time':>16}")
    for algorithm, algorithm_stats in stats.items():
        print(f"{algorithm.value:<18}{algorithm_stats.average_count:>14.2f}"
              f"{format_duration(algorithm_stats.average_seconds):>16}")
    if mismatches:
        print(f"{mismatches} trial(s) with ALGORITHM MISMATCH")
    return stats


def hypothetical_trees(depth: int, width: int, trials: int, seed: int) -> Iterator[HypotheticalTree]:
    """`trials` hypothetical trees seeded with consecutive seeds starting at `seed`."""
    for trial in range(trials):
        yield HypotheticalTree(depth, width, seed + trial)


def run_suite(config: BenchmarkConfig) -> Dict[tuple, Dict[Algorithm, AlgorithmStats]]:
    """Average run for every (depth, width) pair of the hypothetical tree suite."""
    suite = {}
    for depth, width in DEPTH_WIDTH_PAIRS:
        logging.info(f"Hypothetical trees depth={depth} width={width}")
        suite[(depth, width)] = run_average(
            hypothetical_trees(depth, width, config.trials, config.seed),
            f"Hypothetical depth={depth} width={width}",
            config.algorithms,
            total=config.trials,
        )
    return suite


def algorithm_list(value: str):
    """Parse a comma separated list of algorithm names."""
    try:
        return [Algorithm(name.strip()) for name in value.split(',') if name.strip()]
    except ValueError:
        choices = ", ".join(a.value for a in Algorithm)
        raise argparse.ArgumentTypeError(f"expected a comma separated subset of: {choices}") from None


def parse_args(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Benchmark minimax search algorithms A to F')
    parser.add_argument('--algorithms', type=algorithm_list, default=list(ALGORITHM_ORDER),
                        help='Comma separated algorithms to run, in order (default: all six)')
    parser.add_argument('--verbose', action='store_true', help='Enable verbose logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    subparsers.add_parser('stockman', help="Stockman's example tree")

    ut3 = subparsers.add_parser('ut3', help='Ultimate tic-tac-toe from the empty board')
    ut3.add_argument('--depth', type=int, default=UT3_DEPTH, help='Search depth in plies')

    uniform = subparsers.add_parser('uniform', help='Binary tree with random leaf values')
    uniform.add_argument('--depth', type=int, default=UNIFORM_DEPTH, help='Tree depth')
    uniform.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed')

    hypothetical = subparsers.add_parser('hypothetical', help='One unordered-independent tree')
    average = subparsers.add_parser('average', help='Average over seeded hypothetical trees')
    for sub in (hypothetical, average):
        sub.add_argument('--depth', type=int, required=True, help='Tree depth')
        sub.add_argument('--width', type=int, required=True, help='Branching factor')
        sub.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed (first seed for average)')
    average.add_argument('--trials', type=int, default=DEFAULT_TRIALS, help='Number of trees')

    suite = subparsers.add_parser('suite', help='Average over every depth/width pair')
    suite.add_argument('--trials', type=int, default=DEFAULT_TRIALS, help='Number of trees per pair')
    suite.add_argument('--seed', type=int, default=DEFAULT_SEED, help='First random seed')

    chess_parser = subparsers.add_parser('chess', help='Chess searched to a fixed depth')
    perft_parser = subparsers.add_parser('perft', help='Count chess move paths')
    for sub in (chess_parser, perft_parser):
        sub.add_argument('--depth', type=int, default=CHESS_DEPTH, help='Depth in plies')
        sub.add_argument('--fen', default=chess.STARTING_FEN, help='Start position')
    perft_parser.add_argument('--divide', action='store_true', help='Print the count below each move')

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point."""
    args = parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = BenchmarkConfig(
            algorithms=args.algorithms,
            trials=getattr(args, 'trials', DEFAULT_TRIALS),
            seed=getattr(args, 'seed', DEFAULT_SEED),
            verbose=args.verbose,
        )

        if args.command == 'stockman':
            run_once(StockmanTree(), STOCKMAN_NAME, config.algorithms)
        elif args.command == 'ut3':
            run_once(Ut3Tree(args.depth), f"Ultimate tic-tac-toe depth={args.depth}", config.algorithms)
        elif args.command == 'uniform':
            run_once(UniformTree(args.depth, config.seed),
                     f"Uniform tree depth={args.depth} seed={config.seed}", config.algorithms)
        elif args.command == 'hypothetical':
            run_once(HypotheticalTree(args.depth, args.width, config.seed),
                     f"Hypothetical depth={args.depth} width={args.width} seed={config.seed}",
                     config.algorithms)
        elif args.command == 'average':
            run_average(hypothetical_trees(args.depth, args.width, config.trials, config.seed),
                        f"Hypothetical depth={args.depth} width={args.width}",
                        config.algorithms, total=config.trials)
        elif args.command == 'suite':
            run_suite(config)
        elif args.command == 'chess':
            run_once(ChessTree(args.depth, args.fen), f"Chess depth={args.depth}", config.algorithms)
        elif args.command == 'perft':
            tree = ChessTree(args.depth, args.fen)
            root = tree.root()
            start_time = time.perf_counter()
            if args.divide:
                breakdown = perft_divide(tree, root, args.depth)
                for move, count in breakdown.items():
                    print(f"{move}: {count}")
                nodes = sum(breakdown.values())
            else:
                nodes = perft(tree, root, args.depth)
            print(f"perft({args.depth}) = {nodes} in {format_duration(time.perf_counter() - start_time)}")

    except (SearchError, ValueError) as e:
        logging.error(f"Error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
