from typing import Optional, Tuple

from minimax_bench.tree import GameTree, Value

from .base import EvaluationCounter, Line, SearchAlgorithm, SearchConfig, SearchResult


class ScoutSearch(SearchAlgorithm):
    """
    Pearl's SCOUT (Algorithm E).

    A node's value is computed from its first child; every other child is only
    tested against that value with the boolean TEST procedure, and evaluated
    exactly when the test says it can improve on it.
    """

    def __init__(self):
        super().__init__("scout")

    def search(self, root, tree: GameTree, config: Optional[SearchConfig] = None) -> SearchResult:
        """
        Perform SCOUT. An explicit window only applies at the root.
        """
        alpha, beta = self._root_window(root, tree, config)
        leaves = EvaluationCounter(tree)
        if config is None or config.is_default:
            value, line = self._scout(root, leaves)
        else:
            value, line = self._scout(root, leaves, alpha, beta)
        return self._make_result(root, tree, value, line, leaves, alpha=alpha, beta=beta)

    def _scout(self, node, leaves: EvaluationCounter,
               alpha: Optional[Value] = None, beta: Optional[Value] = None) -> Tuple[Value, Line]:
        if leaves.tree.is_leaf(node):
            return self._static_evaluate(node, leaves), ()

        children = self._children(node, leaves)

        best, best_line = self._scout(children[0], leaves)
        best = -best
        best_line = (0,) + best_line

        for index, child in enumerate(children[1:], start=1):
            if beta is not None and best >= beta:
                break
            threshold = best if alpha is None else max(best, alpha)

            # The child is worse for us exactly when its own value exceeds -threshold.
            if not self._test(child, -threshold, True, leaves):
                value, line = self._scout(child, leaves)
                best = -value
                best_line = (index,) + line

        return best, best_line

    def _test(self, node, threshold: Value, strict: bool, leaves: EvaluationCounter) -> bool:
        """
        Whether the value of `node`, relative to its side to move, is greater
        than `threshold` (strict) or at least `threshold` (not strict).
        """
        if leaves.tree.is_leaf(node):
            value = self._static_evaluate(node, leaves)
            return value > threshold if strict else value >= threshold

        for child in self._children(node, leaves):
            # One child the opponent cannot hold above -threshold is enough.
            if not self._test(child, -threshold, not strict, leaves):
                return True
        return False
