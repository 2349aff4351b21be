from enum import Enum
from typing import Dict, Generic, List, Sequence

from minimax_bench.tree import GameTree, NodeT, Side, Value


class Ordering(str, Enum):
    BEST = "best"
    WORST = "worst"


class ReorderedTree(GameTree[NodeT], Generic[NodeT]):
    """
    View of a finite tree whose children are sorted by exact minimax value.

    With `Ordering.BEST` the best child for the side to move comes first, with
    `Ordering.WORST` it comes last. Values are computed once, by full minimax
    directly on the base tree, so they never show up in a search's leaf count.
    Nodes of the base tree must be hashable.
    """

    def __init__(self, base: GameTree[NodeT], ordering: Ordering = Ordering.BEST):
        self.base = base
        self.ordering = Ordering(ordering)
        self.domain = base.domain
        self._values: Dict[NodeT, Value] = {}
        self._order: Dict[NodeT, List[int]] = {}

    def minimax_value(self, node: NodeT) -> Value:
        """Exact value of `node` from MAX's point of view."""
        if node in self._values:
            return self._values[node]
        if self.base.is_leaf(node):
            value = self.base.leaf_value(node)
        else:
            values = [self.minimax_value(child) for child in self.base.children(node)]
            value = max(values) if self.base.side_to_move(node) is Side.MAX else min(values)
        self._values[node] = value
        return value

    def _child_order(self, node: NodeT) -> List[int]:
        if node not in self._order:
            children = self.base.children(node)
            descending = (self.base.side_to_move(node) is Side.MAX) == (self.ordering is Ordering.BEST)
            self._order[node] = sorted(
                range(len(children)),
                key=lambda index: self.minimax_value(children[index]),
                reverse=descending,
            )
        return self._order[node]

    def root(self) -> NodeT:
        return self.base.root()

    def is_leaf(self, node: NodeT) -> bool:
        return self.base.is_leaf(node)

    def leaf_value(self, node: NodeT) -> Value:
        return self.base.leaf_value(node)

    def children(self, node: NodeT) -> Sequence[NodeT]:
        if self.base.is_leaf(node):
            return []
        children = self.base.children(node)
        return [children[index] for index in self._child_order(node)]

    def side_to_move(self, node: NodeT) -> Side:
        return self.base.side_to_move(node)

    def move_label(self, node: NodeT, index: int) -> str:
        return self.base.move_label(node, self._child_order(node)[index])
