"""
Game tree contract shared by every search algorithm.

A concrete game exposes its positions through a `GameTree`. The tree owns the
nodes; algorithms only hold transient references and never mutate them. This
framework covers two-player zero-sum turn-based perfect-information games, so
plies alternate between the maximizing and the minimizing side.
"""
from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Generic, Sequence, TypeVar

NodeT = TypeVar('NodeT')
Value = float


class Side(str, Enum):
    MAX = "max"
    MIN = "min"

    @property
    def opponent(self) -> "Side":
        return Side.MIN if self is Side.MAX else Side.MAX

    @property
    def sign(self) -> int:
        """+1 for MAX, -1 for MIN; turns absolute values into negamax values."""
        return 1 if self is Side.MAX else -1


@dataclass(frozen=True)
class ValueDomain:
    """
    Bounded, totally ordered range of values a tree can produce.

    `minimum` and `maximum` act as the -infinity and +infinity sentinels of the
    searches. `epsilon` is the smallest step between two meaningful values and
    is used as the width of null windows.
    """
    minimum: Value = -math.inf
    maximum: Value = math.inf
    epsilon: Value = 1

    def __post_init__(self) -> None:
        if not self.maximum > 0 or self.minimum != -self.maximum:
            raise ValueError(
                f"Value domain must be symmetric around zero, got [{self.minimum}, {self.maximum}]")
        if not self.epsilon > 0:
            raise ValueError(f"Epsilon must be positive, got {self.epsilon}")

    def contains(self, value: Value) -> bool:
        return self.minimum <= value <= self.maximum

    def saturate(self, value: Value) -> Value:
        """Clamp arithmetic results to the domain instead of overflowing."""
        if value > self.maximum:
            return self.maximum
        if value < self.minimum:
            return self.minimum
        return value

    def above(self, value: Value) -> Value:
        """The smallest value strictly above `value`, saturated."""
        return self.saturate(value + self.epsilon)


class GameTree(ABC, Generic[NodeT]):
    """
    Capability interface a game representation must satisfy.

    `leaf_value` is always from MAX's point of view. `children` returns the
    ordered children of a node and is empty exactly for leaves; it may build
    them eagerly or lazily, the searches call it at most once per node.
    """

    domain: ValueDomain = ValueDomain()

    @abstractmethod
    def root(self) -> NodeT:
        """Start node of the tree."""

    @abstractmethod
    def is_leaf(self, node: NodeT) -> bool:
        ...

    @abstractmethod
    def leaf_value(self, node: NodeT) -> Value:
        """Static value of a leaf. Calling it on an internal node is an error."""

    @abstractmethod
    def children(self, node: NodeT) -> Sequence[NodeT]:
        ...

    @abstractmethod
    def side_to_move(self, node: NodeT) -> Side:
        ...

    def move_label(self, node: NodeT, index: int) -> str:
        """Human readable name of the edge from `node` to its `index`-th child."""
        return str(index)


def perft(tree: GameTree[Any], node: Any, depth: int) -> int:
    """Count the move paths of exactly `depth` plies below `node`."""
    if depth <= 0:
        return 1
    children = tree.children(node)
    if depth == 1:
        return len(children)
    return sum(perft(tree, child, depth - 1) for child in children)


def perft_divide(tree: GameTree[Any], node: Any, depth: int) -> Dict[str, int]:
    """Per-child breakdown of `perft`, keyed by move label."""
    return {
        tree.move_label(node, index): perft(tree, child, depth - 1)
        for index, child in enumerate(tree.children(node))
    }
