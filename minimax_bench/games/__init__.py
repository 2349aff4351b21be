"""Concrete game trees used by the tests and the benchmark driver."""

from .chess_tree import ChessNode, ChessTree
from .explicit import ExplicitTree
from .hypothetical_tree import HypNode, HypotheticalTree
from .ordering import Ordering, ReorderedTree
from .stockman import StockmanTree
from .uniform_tree import UniformTree
from .ut3 import Ut3Node, Ut3Tree

__all__ = [
    'ChessNode',
    'ChessTree',
    'ExplicitTree',
    'HypNode',
    'HypotheticalTree',
    'Ordering',
    'ReorderedTree',
    'StockmanTree',
    'UniformTree',
    'Ut3Node',
    'Ut3Tree',
]
