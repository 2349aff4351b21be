from dataclasses import dataclass
from typing import List

import chess

from minimax_bench.constants import CHESS_DEPTH
from minimax_bench.errors import ContractViolation
from minimax_bench.tree import GameTree, Side, ValueDomain

MATE_SCORE = 100000000

PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}


@dataclass(frozen=True, eq=False)
class ChessNode:
    board: chess.Board
    ply: int


def material(board: chess.Board) -> int:
    """Material balance in centipawns, positive when White is ahead."""
    return sum(
        value * (len(board.pieces(piece_type, chess.WHITE)) - len(board.pieces(piece_type, chess.BLACK)))
        for piece_type, value in PIECE_VALUES.items()
    )


class ChessTree(GameTree[ChessNode]):
    """Chess to a fixed number of plies. White is MAX; leaves are scored by material."""

    domain = ValueDomain(-MATE_SCORE, MATE_SCORE, 1)

    def __init__(self, depth: int = CHESS_DEPTH, fen: str = chess.STARTING_FEN):
        self.depth = depth
        self.fen = fen

    def root(self) -> ChessNode:
        return ChessNode(chess.Board(self.fen), 0)

    def is_leaf(self, node: ChessNode) -> bool:
        return node.ply >= self.depth or node.board.is_game_over()

    def leaf_value(self, node: ChessNode) -> int:
        if not self.is_leaf(node):
            raise ContractViolation(f"Position {node.board.fen()} is not a leaf")
        outcome = node.board.outcome()
        if outcome is not None:
            if outcome.winner is None:
                return 0
            # Prefer quicker mates
            score = MATE_SCORE - node.ply
            return score if outcome.winner == chess.WHITE else -score
        return material(node.board)

    def children(self, node: ChessNode) -> List[ChessNode]:
        if node.ply >= self.depth:
            return []
        children = []
        for move in node.board.legal_moves:
            board = node.board.copy()
            board.push(move)
            children.append(ChessNode(board, node.ply + 1))
        return children

    def side_to_move(self, node: ChessNode) -> Side:
        return Side.MAX if node.board.turn == chess.WHITE else Side.MIN

    def move_label(self, node: ChessNode, index: int) -> str:
        return list(node.board.legal_moves)[index].uci()
