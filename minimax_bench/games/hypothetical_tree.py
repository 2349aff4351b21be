"""
Unordered-independent hypothetical game trees.

Every internal node has `width` children and every leaf sits at `depth`. The
`width ** depth` leaves carry a random permutation of ``1 .. width ** depth``,
so no two leaves (and no two sibling subtrees) share a value and the order of
the children says nothing about their values.

Seed contract: the permutation is ``numpy.random.default_rng(seed).permutation(n) + 1``
(a Fisher-Yates shuffle of ``0 .. n - 1`` on NumPy's PCG64 generator) assigned to the
leaves left to right. The same seed always yields the same tree.
"""
from typing import List, NamedTuple

import numpy as np

from minimax_bench.constants import DEFAULT_SEED
from minimax_bench.errors import ContractViolation
from minimax_bench.tree import GameTree, Side, ValueDomain


class HypNode(NamedTuple):
    # Position among the nodes of its level, counted from the left.
    index: int
    ply: int


class HypotheticalTree(GameTree[HypNode]):

    domain = ValueDomain(-(2 ** 63 - 1), 2 ** 63 - 1, 1)

    def __init__(self, depth: int, width: int, seed: int = DEFAULT_SEED):
        if depth < 0 or width < 1:
            raise ValueError(f"Need depth >= 0 and width >= 1, got depth={depth}, width={width}")
        self.depth = depth
        self.width = width
        self.seed = seed
        rng = np.random.default_rng(seed)
        self.leaf_values = rng.permutation(width ** depth) + 1

    @property
    def num_leaves(self) -> int:
        return self.width ** self.depth

    def root(self) -> HypNode:
        return HypNode(0, 0)

    def is_leaf(self, node: HypNode) -> bool:
        return node.ply >= self.depth

    def leaf_value(self, node: HypNode) -> int:
        if not self.is_leaf(node):
            raise ContractViolation(f"Node {node} is not a leaf")
        return int(self.leaf_values[node.index])

    def children(self, node: HypNode) -> List[HypNode]:
        if self.is_leaf(node):
            return []
        first = node.index * self.width
        return [HypNode(first + shift, node.ply + 1) for shift in range(self.width)]

    def side_to_move(self, node: HypNode) -> Side:
        return Side.MAX if node.ply % 2 == 0 else Side.MIN
