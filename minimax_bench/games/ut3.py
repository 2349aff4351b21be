"""
Ultimate tic-tac-toe searched to a fixed number of plies.

The 81 cells are numbered board by board: cell ``9 * board + square``, with
boards and squares both numbered row by row. A move in square `s` sends the
opponent to board `s`, unless that board is already won or full, in which
case the opponent may play in any open board. X moves first and is MAX.
"""
from typing import List, NamedTuple, Sequence, Tuple

from minimax_bench.constants import UT3_DEPTH
from minimax_bench.errors import ContractViolation
from minimax_bench.tree import GameTree, Side, ValueDomain

X = 1
O = -1
EMPTY = 0
ANY_ZONE = 9

LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),
    (0, 3, 6), (1, 4, 7), (2, 5, 8),
    (0, 4, 8), (2, 4, 6),
)

OUTCOME_WIN = 1000000
OUTCOME_DRAW = 0

# Heuristic weights, indexed by the number of marks one side has on an open line.
BIG_LINE_WEIGHTS = (0, 20, 90, 0)
SMALL_LINE_WEIGHTS = (0, 1, 8, 0)

CORNER = 7
EDGE = 5
CENTRE = 9
SQUARE_WEIGHTS = (CORNER, EDGE, CORNER, EDGE, CENTRE, EDGE, CORNER, EDGE, CORNER)
SQ_BIG = 25


class Ut3Node(NamedTuple):
    cells: Tuple[int, ...]
    # Winner of each small board, EMPTY while undecided.
    boards: Tuple[int, ...]
    zone: int
    player: int
    ply: int


def line_winner(marks: Sequence[int]) -> int:
    """X or O if that side owns a full line of the 3x3 grid `marks`, else EMPTY."""
    for a, b, c in LINES:
        if marks[a] != EMPTY and marks[a] == marks[b] == marks[c]:
            return marks[a]
    return EMPTY


def _line_score(marks: Sequence[int], weights: Sequence[int]) -> int:
    score = 0
    for line in LINES:
        ours = sum(1 for i in line if marks[i] == X)
        theirs = sum(1 for i in line if marks[i] == O)
        if ours and theirs:
            continue
        score += weights[ours] - weights[theirs]
    return score


def _position_score(marks: Sequence[int]) -> int:
    return sum(weight * mark for weight, mark in zip(SQUARE_WEIGHTS, marks))


def legal_moves(node: Ut3Node) -> List[int]:
    if line_winner(node.boards) != EMPTY:
        return []
    if node.zone == ANY_ZONE:
        zones = [board for board in range(9) if node.boards[board] == EMPTY]
    else:
        zones = [node.zone]
    return [9 * board + square
            for board in zones
            for square in range(9)
            if node.cells[9 * board + square] == EMPTY]


def play_move(node: Ut3Node, move: int) -> Ut3Node:
    cells = list(node.cells)
    cells[move] = node.player
    board, square = divmod(move, 9)

    boards = node.boards
    if line_winner(cells[9 * board:9 * board + 9]) != EMPTY:
        boards = boards[:board] + (node.player,) + boards[board + 1:]

    target = cells[9 * square:9 * square + 9]
    if boards[square] != EMPTY or EMPTY not in target:
        zone = ANY_ZONE
    else:
        zone = square

    return Ut3Node(tuple(cells), boards, zone, -node.player, node.ply + 1)


def evaluate(node: Ut3Node) -> int:
    """Static value from X's point of view. Faster wins score higher."""
    winner = line_winner(node.boards)
    if winner != EMPTY:
        return winner * (OUTCOME_WIN - node.ply)
    if not legal_moves(node):
        return OUTCOME_DRAW

    score = _line_score(node.boards, BIG_LINE_WEIGHTS) + SQ_BIG * _position_score(node.boards)
    for board in range(9):
        marks = node.cells[9 * board:9 * board + 9]
        if node.boards[board] != EMPTY or EMPTY not in marks:
            continue
        score += _line_score(marks, SMALL_LINE_WEIGHTS) + _position_score(marks)
    return score


class Ut3Tree(GameTree[Ut3Node]):

    domain = ValueDomain(-OUTCOME_WIN, OUTCOME_WIN, 1)

    def __init__(self, depth: int = UT3_DEPTH):
        self.depth = depth

    def root(self) -> Ut3Node:
        return Ut3Node((EMPTY,) * 81, (EMPTY,) * 9, ANY_ZONE, X, 0)

    def is_leaf(self, node: Ut3Node) -> bool:
        return node.ply >= self.depth or not legal_moves(node)

    def leaf_value(self, node: Ut3Node) -> int:
        if not self.is_leaf(node):
            raise ContractViolation(f"Ply {node.ply} position is not a leaf")
        return evaluate(node)

    def children(self, node: Ut3Node) -> List[Ut3Node]:
        if node.ply >= self.depth:
            return []
        return [play_move(node, move) for move in legal_moves(node)]

    def side_to_move(self, node: Ut3Node) -> Side:
        return Side.MAX if node.player == X else Side.MIN

    def move_label(self, node: Ut3Node, index: int) -> str:
        board, square = divmod(legal_moves(node)[index], 9)
        return f"{board}{square}"
