import logging
import math
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Tuple

from minimax_bench.errors import ContractViolation, InvalidBound, ValueOverflow
from minimax_bench.tree import GameTree, Side, Value, ValueDomain

Line = Tuple[int, ...]


@dataclass(frozen=True)
class SearchConfig:
    """Optional initial window, in absolute (MAX point of view) values.

    `None` stands for the matching end of the tree's value domain.
    """
    alpha: Optional[Value] = None
    beta: Optional[Value] = None

    @property
    def is_default(self) -> bool:
        return self.alpha is None and self.beta is None


@dataclass
class SearchResult:
    """Result of a search: root value, leaf evaluations, principal variation and metadata."""
    value: Value
    count: int
    line: Line = ()
    metadata: Dict[str, Any] = field(default_factory=dict)


class EvaluationCounter:
    """
    Counts `leaf_value` calls for a single top-level search.

    Every algorithm reaches leaf values only through this wrapper, so `count`
    is exactly the number of leaf evaluations of the call.
    """

    def __init__(self, tree: GameTree):
        self.tree = tree
        self.domain: ValueDomain = tree.domain
        self.count = 0
        self.started = time.perf_counter()

    def __call__(self, node) -> Value:
        if not self.tree.is_leaf(node):
            raise ContractViolation(f"Leaf value requested for non-leaf node {node!r}")
        self.count += 1
        value = self.tree.leaf_value(node)
        if value is None or (isinstance(value, float) and math.isnan(value)):
            raise ContractViolation(f"Leaf {node!r} has no value: {value!r}")
        if not self.domain.contains(value):
            raise ValueOverflow(
                f"Leaf {node!r} value {value!r} outside [{self.domain.minimum}, {self.domain.maximum}]")
        return value


class SearchAlgorithm(ABC):
    """Abstract base class for all search algorithms."""

    def __init__(self, name: str):
        self.name = name
        self.metrics = {
            'leaf_evaluations': 0,
            'searches': 0,
        }

    @abstractmethod
    def search(self, root, tree: GameTree, config: Optional[SearchConfig] = None) -> SearchResult:
        """
        Search the tree below `root`.

        Args:
            root: Node to search from
            tree: Game tree the node belongs to
            config: Optional initial window

        Returns:
            SearchResult with the root value from MAX's point of view and the
            number of leaf evaluations
        """
        pass

    def reset_metrics(self):
        """Reset search metrics."""
        self.metrics = {
            'leaf_evaluations': 0,
            'searches': 0,
        }

    def _static_evaluate(self, node, leaves: EvaluationCounter) -> Value:
        """Leaf value relative to the side to move at `node`."""
        value = leaves(node)
        return value if leaves.tree.side_to_move(node) is Side.MAX else -value

    def _children(self, node, leaves: EvaluationCounter) -> List:
        """Children of an internal node, checked against the tree contract."""
        tree = leaves.tree
        children = list(tree.children(node))
        if not children:
            raise ContractViolation(f"Non-leaf node {node!r} has no children")
        side = tree.side_to_move(node)
        for child in children:
            if tree.side_to_move(child) is side:
                raise ContractViolation(f"Child {child!r} of {node!r} has the same side to move ({side.value})")
        return children

    def _root_window(self, root, tree: GameTree, config: Optional[SearchConfig]) -> Tuple[Value, Value]:
        """
        Initial (alpha, beta) relative to the side to move at the root.

        Raises InvalidBound for an empty window or a bound outside the domain.
        """
        domain = tree.domain
        config = config or SearchConfig()
        alpha = domain.minimum if config.alpha is None else config.alpha
        beta = domain.maximum if config.beta is None else config.beta
        for bound in (alpha, beta):
            if not domain.contains(bound):
                raise InvalidBound(f"Bound {bound!r} outside [{domain.minimum}, {domain.maximum}]")
        if alpha >= beta:
            raise InvalidBound(f"Empty window: alpha={alpha!r} >= beta={beta!r}")
        if tree.side_to_move(root) is Side.MIN:
            return -beta, -alpha
        return alpha, beta

    def _make_result(self, root, tree: GameTree, value: Value, line: Sequence[int],
                     leaves: EvaluationCounter, **metadata) -> SearchResult:
        """Turn a negamax root value into a SearchResult and record metrics."""
        if tree.side_to_move(root) is Side.MIN:
            value = -value
        self.metrics['leaf_evaluations'] += leaves.count
        self.metrics['searches'] += 1
        logging.debug(f"{self.name}: value={value} leaves={leaves.count} line={tuple(line)}")
        return SearchResult(
            value=value,
            count=leaves.count,
            line=tuple(line),
            metadata={'algorithm': self.name, 'elapsed': time.perf_counter() - leaves.started, **metadata},
        )
