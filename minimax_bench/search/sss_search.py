import heapq
import itertools
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional, Tuple

from minimax_bench.errors import InvalidBound, SearchError
from minimax_bench.tree import GameTree, Side, Value

from .base import EvaluationCounter, Line, SearchAlgorithm, SearchConfig, SearchResult


class Status(IntEnum):
    # Lower sorts first among states of equal merit and path.
    SOLVED = 0
    LIVE = 1


@dataclass(eq=False)
class _Frame:
    """A node reached by SSS*, with the links needed to walk back up the tree."""
    node: object
    parent: Optional['_Frame']
    index: int
    path: Line
    is_or: bool
    children: Optional[List['_Frame']] = field(default=None, repr=False)

    def is_below(self, ancestor: '_Frame') -> bool:
        return self.path[:len(ancestor.path)] == ancestor.path


@dataclass(eq=False)
class _State:
    frame: _Frame
    status: Status
    merit: Value
    line: Line


class SSSSearch(SearchAlgorithm):
    """
    Stockman's SSS* (Algorithm F): best-first search over partial solution trees.

    The frontier holds (node, status, merit) states ordered by descending merit,
    then leftmost node first (Stockman's tie rule), then SOLVED before LIVE.
    Values are taken from the point of view of the side to move at the root, so
    nodes of that side are OR nodes and the others AND nodes.
    """

    def __init__(self):
        super().__init__("sss")

    def search(self, root, tree: GameTree, config: Optional[SearchConfig] = None) -> SearchResult:
        """
        Solve the root. SSS* always searches for the exact value and takes no window.
        """
        if config is not None and not config.is_default:
            raise InvalidBound("sss does not take a search window")
        leaves = EvaluationCounter(tree)
        value, line, expansions = self._sss(root, leaves)
        return self._make_result(root, tree, value, line, leaves, expansions=expansions)

    def _sss(self, root, leaves: EvaluationCounter) -> Tuple[Value, Line, int]:
        tree = leaves.tree
        root_side = tree.side_to_move(root)
        frontier: List[Tuple[Value, Line, int, int, _State]] = []
        counter = itertools.count()
        expansions = 0

        def push(frame: _Frame, status: Status, merit: Value, line: Line) -> None:
            state = _State(frame, status, merit, line)
            heapq.heappush(frontier, (-merit, frame.path, int(status), -next(counter), state))

        def purge_below(ancestor: _Frame) -> None:
            frontier[:] = [entry for entry in frontier if not entry[4].frame.is_below(ancestor)]
            heapq.heapify(frontier)

        push(_Frame(root, None, 0, (), True), Status.LIVE, leaves.domain.maximum, ())

        while frontier:
            state = heapq.heappop(frontier)[4]
            frame = state.frame

            if state.status is Status.SOLVED:
                parent = frame.parent
                if parent is None:
                    return state.merit, state.line, expansions
                if parent.is_or:
                    # One solved child solves an OR node; its other children are irrelevant.
                    purge_below(parent)
                    push(parent, Status.SOLVED, state.merit, state.line)
                elif frame.index + 1 < len(parent.children):
                    # AND node: solve the children one after another, carrying the running minimum.
                    push(parent.children[frame.index + 1], Status.LIVE, state.merit, state.line)
                else:
                    push(parent, Status.SOLVED, state.merit, state.line)
                continue

            if tree.is_leaf(frame.node):
                value = leaves(frame.node)
                if root_side is Side.MIN:
                    value = -value
                if state.merit < value:
                    push(frame, Status.SOLVED, state.merit, state.line)
                else:
                    push(frame, Status.SOLVED, value, frame.path)
                continue

            expansions += 1
            frame.children = [
                _Frame(child, frame, index, frame.path + (index,), not frame.is_or)
                for index, child in enumerate(self._children(frame.node, leaves))
            ]
            if frame.is_or:
                for child in frame.children:
                    push(child, Status.LIVE, state.merit, state.line)
            else:
                push(frame.children[0], Status.LIVE, state.merit, state.line)

        raise SearchError("SSS* frontier exhausted before the root was solved")
