"""The example tree of Stockman, G.C. (1979), "A minimax algorithm better than alpha-beta?"."""

from typing import List

from minimax_bench.errors import ContractViolation
from minimax_bench.tree import GameTree, Side, ValueDomain

# Nodes are numbered heap style: the root is 1 and node n has children 2n and 2n + 1.
FIRST_LEAF = 16
LEAF_VALUES = {
    16: 30, 17: 54, 18: 21, 19: 73,
    20: 9, 21: 71, 22: 43, 23: 91,
    24: 28, 25: 94, 26: 78, 27: 52,
    28: 22, 29: 35, 30: 53, 31: 80,
}


class StockmanTree(GameTree[int]):
    """Binary tree of depth 4 with a MAX root, minimax value 52."""

    domain = ValueDomain(-100, 100, 1)

    def root(self) -> int:
        return 1

    def is_leaf(self, node: int) -> bool:
        return node >= FIRST_LEAF

    def leaf_value(self, node: int) -> int:
        if node not in LEAF_VALUES:
            raise ContractViolation(f"Node {node} is not a leaf of the Stockman tree")
        return LEAF_VALUES[node]

    def children(self, node: int) -> List[int]:
        if self.is_leaf(node):
            return []
        return [node << 1, (node << 1) + 1]

    def side_to_move(self, node: int) -> Side:
        depth = node.bit_length() - 1
        return Side.MAX if depth % 2 == 0 else Side.MIN

    def move_label(self, node: int, index: int) -> str:
        return ("left", "right")[index]
