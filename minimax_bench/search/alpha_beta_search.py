from typing import Optional, Tuple

from minimax_bench.tree import GameTree, Value

from .base import EvaluationCounter, Line, SearchAlgorithm, SearchConfig, SearchResult


class AlphaBetaSearch(SearchAlgorithm):
    """Search algorithm that performs alpha-beta search (negamax variant), Algorithm B."""

    def __init__(self):
        super().__init__("alpha_beta")

    def search(self, root, tree: GameTree, config: Optional[SearchConfig] = None) -> SearchResult:
        """
        Perform alpha-beta search and return the root value and leaf count.
        """
        alpha, beta = self._root_window(root, tree, config)
        leaves = EvaluationCounter(tree)
        value, line = self._alpha_beta(root, alpha, beta, leaves)
        return self._make_result(root, tree, value, line, leaves, alpha=alpha, beta=beta)

    def _alpha_beta(self, node, alpha: Value, beta: Value, leaves: EvaluationCounter) -> Tuple[Value, Line]:
        """
        Performs alpha-beta search (negamax variant).
        Returns score relative to the current player and the line it comes from.
        alpha: Lower bound (best score the side to move can already guarantee).
        beta: Upper bound (best score the opponent can already guarantee).
        """
        if leaves.tree.is_leaf(node):
            return self._static_evaluate(node, leaves), ()

        best = alpha
        best_line: Line = ()

        for index, child in enumerate(self._children(node, leaves)):
            # Negate and swap alpha/beta bounds
            score, line = self._alpha_beta(child, -beta, -best, leaves)
            score = -score
            line = (index,) + line

            if score > best:
                best = score
                best_line = line

            # The opponent will not allow this node once we can force beta or more
            if best >= beta:
                return best, line  # Beta cut-off

        return best, best_line
