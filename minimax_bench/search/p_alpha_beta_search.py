from typing import Optional, Tuple

from minimax_bench.tree import GameTree, Value

from .base import EvaluationCounter, Line, SearchAlgorithm, SearchConfig, SearchResult


class PAlphaBetaSearch(SearchAlgorithm):
    """
    Probing alpha-beta (Algorithm C), after Fishburn & Finkel (1980).

    The first child of every node is searched by this algorithm itself. Each
    later child is probed with a minimal window just above the best value so
    far and is only searched again, with fail-soft alpha-beta, when the probe
    shows it can do better.
    """

    def __init__(self):
        super().__init__("p_alpha_beta")

    def search(self, root, tree: GameTree, config: Optional[SearchConfig] = None) -> SearchResult:
        """
        Perform probing alpha-beta search. An explicit window only applies at the root.
        """
        alpha, beta = self._root_window(root, tree, config)
        leaves = EvaluationCounter(tree)
        if config is None or config.is_default:
            value, line = self._p_alpha_beta(root, leaves)
        else:
            value, line = self._p_alpha_beta(root, leaves, alpha, beta)
        return self._make_result(root, tree, value, line, leaves, alpha=alpha, beta=beta)

    def _p_alpha_beta(self, node, leaves: EvaluationCounter,
                      alpha: Optional[Value] = None, beta: Optional[Value] = None) -> Tuple[Value, Line]:
        if leaves.tree.is_leaf(node):
            return self._static_evaluate(node, leaves), ()

        domain = leaves.domain
        children = self._children(node, leaves)

        best, best_line = self._p_alpha_beta(children[0], leaves)
        best = -best
        best_line = (0,) + best_line

        limit = domain.maximum if beta is None else beta

        for index, child in enumerate(children[1:], start=1):
            if best >= limit:
                break
            bound = best if alpha is None else max(best, alpha)

            # Minimal window probe: can this child beat the bound?
            score, probe_line = self._f_alpha_beta(child, -domain.above(bound), -bound, leaves)
            score = -score

            if score > bound:
                if score >= limit:
                    return score, (index,) + probe_line
                # In Muszycka & Shinghal (1985) the re-search is written with plain
                # alpha-beta; Fishburn & Finkel use the fail-soft variant.
                value, line = self._f_alpha_beta(child, domain.minimum, -score, leaves)
                best = -value
                best_line = (index,) + line

        return best, best_line

    def _f_alpha_beta(self, node, alpha: Value, beta: Value, leaves: EvaluationCounter) -> Tuple[Value, Line]:
        """Fail-soft alpha-beta: the result may fall outside (alpha, beta) and is then a bound."""
        if leaves.tree.is_leaf(node):
            return self._static_evaluate(node, leaves), ()

        best = leaves.domain.minimum
        best_line: Line = ()

        for index, child in enumerate(self._children(node, leaves)):
            score, line = self._f_alpha_beta(child, -beta, -max(best, alpha), leaves)
            score = -score
            line = (index,) + line

            if score > best:
                best = score
                best_line = line

            if best >= beta:
                return best, line

        return best, best_line
