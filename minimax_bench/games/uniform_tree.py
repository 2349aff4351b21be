from typing import List

import numpy as np

from minimax_bench.constants import DEFAULT_SEED
from minimax_bench.errors import ContractViolation
from minimax_bench.tree import GameTree, Side, ValueDomain

MIN_LEAF_VALUE = -100
MAX_LEAF_VALUE = 100


class UniformTree(GameTree[int]):
    """
    Binary tree of fixed depth with random leaf values.

    Nodes are numbered heap style (root 1, children 2n and 2n + 1), so the leaves
    are ``2**depth .. 2**(depth + 1) - 1``. Leaf values are drawn uniformly from
    [-100, 100], left to right, by ``numpy.random.default_rng(seed)``.
    """

    domain = ValueDomain(-(2 ** 31 - 1), 2 ** 31 - 1, 1)

    def __init__(self, depth: int, seed: int = DEFAULT_SEED):
        if depth < 0:
            raise ValueError(f"Depth must be non-negative, got {depth}")
        self.depth = depth
        self.seed = seed
        self.leaf_start = 1 << depth
        rng = np.random.default_rng(seed)
        self.leaf_values: List[int] = rng.integers(
            MIN_LEAF_VALUE, MAX_LEAF_VALUE, size=self.leaf_start, endpoint=True).tolist()

    def root(self) -> int:
        return 1

    def is_leaf(self, node: int) -> bool:
        return node >= self.leaf_start

    def leaf_value(self, node: int) -> int:
        if not self.is_leaf(node):
            raise ContractViolation(f"Node {node} is not a leaf")
        return self.leaf_values[node - self.leaf_start]

    def children(self, node: int) -> List[int]:
        if self.is_leaf(node):
            return []
        return [node << 1, (node << 1) + 1]

    def side_to_move(self, node: int) -> Side:
        return Side.MAX if (node.bit_length() - 1) % 2 == 0 else Side.MIN

    def move_label(self, node: int, index: int) -> str:
        return ("L", "R")[index]
