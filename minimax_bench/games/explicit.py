from typing import Optional, Sequence, Tuple

from minimax_bench.errors import ContractViolation
from minimax_bench.tree import GameTree, Side, Value, ValueDomain

Path = Tuple[int, ...]


class ExplicitTree(GameTree[Path]):
    """
    Game tree written out as nested lists, e.g. ``[[3, 1], [4, 2]]``.

    Numbers are leaves (values from MAX's point of view), lists are internal
    nodes. A node is the tuple of child indices leading to it from the root.
    """

    def __init__(self, nested, root_side: Side = Side.MAX, domain: Optional[ValueDomain] = None):
        self.nested = nested
        self.root_side = Side(root_side)
        if domain is not None:
            self.domain = domain

    def _subtree(self, node: Path):
        subtree = self.nested
        for index in node:
            subtree = subtree[index]
        return subtree

    def root(self) -> Path:
        return ()

    def is_leaf(self, node: Path) -> bool:
        return not isinstance(self._subtree(node), (list, tuple))

    def leaf_value(self, node: Path) -> Value:
        subtree = self._subtree(node)
        if isinstance(subtree, (list, tuple)):
            raise ContractViolation(f"Node {node!r} is not a leaf")
        return subtree

    def children(self, node: Path) -> Sequence[Path]:
        subtree = self._subtree(node)
        if not isinstance(subtree, (list, tuple)):
            return []
        return [node + (index,) for index in range(len(subtree))]

    def side_to_move(self, node: Path) -> Side:
        return self.root_side if len(node) % 2 == 0 else self.root_side.opponent
