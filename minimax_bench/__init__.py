"""Minimax search algorithms A to F and a benchmark driver that compares them."""

from minimax_bench.errors import ContractViolation, InvalidBound, SearchError, ValueOverflow
from minimax_bench.search import (
    Algorithm,
    SearchAlgorithm,
    SearchConfig,
    SearchResult,
    get_search_algorithm,
)
from minimax_bench.tree import GameTree, Side, ValueDomain, perft, perft_divide

__version__ = "0.1.0"

__all__ = [
    'Algorithm',
    'ContractViolation',
    'GameTree',
    'InvalidBound',
    'SearchAlgorithm',
    'SearchConfig',
    'SearchError',
    'SearchResult',
    'Side',
    'ValueDomain',
    'ValueOverflow',
    'get_search_algorithm',
    'perft',
    'perft_divide',
]
