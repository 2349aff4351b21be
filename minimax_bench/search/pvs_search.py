from typing import Optional, Tuple

from minimax_bench.tree import GameTree, Value

from .base import EvaluationCounter, Line, SearchAlgorithm, SearchConfig, SearchResult


class PVSSearch(SearchAlgorithm):
    """Principal Variation Search (Algorithm D) without transposition table or move ordering."""

    def __init__(self):
        super().__init__("pvs")

    def search(self, root, tree: GameTree, config: Optional[SearchConfig] = None) -> SearchResult:
        """
        Perform PVS from the root with the given (default: full) window.
        """
        alpha, beta = self._root_window(root, tree, config)
        leaves = EvaluationCounter(tree)
        value, line = self._pvs(root, alpha, beta, leaves)
        return self._make_result(root, tree, value, line, leaves, alpha=alpha, beta=beta)

    def _pvs(self, node, alpha: Value, beta: Value, leaves: EvaluationCounter) -> Tuple[Value, Line]:
        """
        The first child is assumed to be the principal variation and gets the full
        window. Every later child is probed with a null window at the current bound
        and searched again unless the probe fails low.
        """
        if leaves.tree.is_leaf(node):
            return self._static_evaluate(node, leaves), ()

        domain = leaves.domain
        children = self._children(node, leaves)

        best, best_line = self._pvs(children[0], -beta, -alpha, leaves)
        best = -best
        best_line = (0,) + best_line

        if best >= beta:
            return best, best_line

        for index, child in enumerate(children[1:], start=1):
            bound = max(best, alpha)

            # Null window search
            score, probe_line = self._pvs(child, -domain.above(bound), -bound, leaves)
            score = -score

            if score >= beta:
                return score, (index,) + probe_line  # Fail high, no re-search needed

            if score > best:
                # Re-search with the window the probe left open
                value, line = self._pvs(child, -beta, -score, leaves)
                best = -value
                best_line = (index,) + line

            if best >= beta:
                return best, best_line

        return best, best_line
