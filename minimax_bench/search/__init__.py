"""Search algorithms for minimax game trees."""

from minimax_bench.strategy import Algorithm

from .base import EvaluationCounter, SearchAlgorithm, SearchConfig, SearchResult
from .branch_and_bound_search import BranchAndBoundSearch
from .alpha_beta_search import AlphaBetaSearch
from .p_alpha_beta_search import PAlphaBetaSearch
from .pvs_search import PVSSearch
from .scout_search import ScoutSearch
from .sss_search import SSSSearch

ALGORITHMS = {
    Algorithm.BRANCH_AND_BOUND: BranchAndBoundSearch,
    Algorithm.ALPHA_BETA: AlphaBetaSearch,
    Algorithm.P_ALPHA_BETA: PAlphaBetaSearch,
    Algorithm.PVS: PVSSearch,
    Algorithm.SCOUT: ScoutSearch,
    Algorithm.SSS: SSSSearch,
}


def get_search_algorithm(name) -> SearchAlgorithm:
    """Fresh instance of the algorithm called `name` (an Algorithm or its string value)."""
    try:
        algorithm = Algorithm(name)
    except ValueError:
        raise ValueError(f"Unknown search algorithm: {name!r}") from None
    return ALGORITHMS[algorithm]()


__all__ = [
    'ALGORITHMS',
    'Algorithm',
    'EvaluationCounter',
    'SearchAlgorithm',
    'SearchConfig',
    'SearchResult',
    'BranchAndBoundSearch',
    'AlphaBetaSearch',
    'PAlphaBetaSearch',
    'PVSSearch',
    'ScoutSearch',
    'SSSSearch',
    'get_search_algorithm',
]
