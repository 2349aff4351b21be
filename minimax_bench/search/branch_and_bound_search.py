from typing import Optional, Tuple

from minimax_bench.errors import InvalidBound
from minimax_bench.tree import GameTree, Value

from .base import EvaluationCounter, Line, SearchAlgorithm, SearchConfig, SearchResult


class BranchAndBoundSearch(SearchAlgorithm):
    """Single-bound minimax (Algorithm A): the baseline every pruning scheme is measured against."""

    def __init__(self):
        super().__init__("branch_and_bound")

    def search(self, root, tree: GameTree, config: Optional[SearchConfig] = None) -> SearchResult:
        """
        Perform branch-and-bound search. Only `beta` of the config is used, as the bound.
        """
        if config is not None and config.alpha is not None:
            raise InvalidBound("branch_and_bound takes a single bound (beta), not alpha")
        _, bound = self._root_window(root, tree, config)
        leaves = EvaluationCounter(tree)
        value, line = self._branch_and_bound(root, bound, leaves)
        return self._make_result(root, tree, value, line, leaves, bound=bound)

    def _branch_and_bound(self, node, bound: Value, leaves: EvaluationCounter) -> Tuple[Value, Line]:
        """
        Returns the value relative to the side to move at `node` and its line.
        Stops scanning children once the best value reaches `bound`.
        """
        if leaves.tree.is_leaf(node):
            return self._static_evaluate(node, leaves), ()

        best = leaves.domain.minimum
        best_line: Line = ()

        for index, child in enumerate(self._children(node, leaves)):
            score, line = self._branch_and_bound(child, -best, leaves)
            score = -score
            line = (index,) + line

            if score > best:
                best = score
                best_line = line

            if best >= bound:
                return best, line  # Cut-off

        return best, best_line
