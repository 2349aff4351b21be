from dataclasses import dataclass
from typing import List, Sequence

from minimax_bench.constants import ALGORITHM_ORDER, DEFAULT_SEED, DEFAULT_TRIALS
from minimax_bench.search import SearchAlgorithm, get_search_algorithm
from minimax_bench.strategy import Algorithm


@dataclass
class BenchmarkConfig:
    """Settings shared by every benchmark sub-command."""
    algorithms: Sequence[Algorithm] = ALGORITHM_ORDER
    trials: int = DEFAULT_TRIALS
    seed: int = DEFAULT_SEED
    verbose: bool = False

    def __post_init__(self):
        self.algorithms = tuple(Algorithm(name) for name in self.algorithms)
        if not self.algorithms:
            raise ValueError("At least one algorithm is required")
        if self.trials < 1:
            raise ValueError(f"Trials must be positive, got {self.trials}")

    def make_algorithms(self) -> List[SearchAlgorithm]:
        """Fresh search instances in benchmark order."""
        return [get_search_algorithm(name) for name in self.algorithms]
