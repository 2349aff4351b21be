"""
Error hierarchy for the search engine.

Every error here is a programming error in a tree implementation or in the
caller. Algorithms raise them as soon as they are detected and never return a
partial result, since a wrong leaf count invalidates a benchmark run.
"""

__all__ = [
    "SearchError",
    "ContractViolation",
    "InvalidBound",
    "ValueOverflow",
]


class SearchError(Exception):
    """Base exception for all search errors."""


class ContractViolation(SearchError):
    """A game tree broke the tree contract.

    Raised when a non-leaf node has no children, when a child has the same side
    to move as its parent, or when a leaf reports no usable value.
    """


class InvalidBound(SearchError):
    """A search window is empty, outside the value domain, or not accepted."""


class ValueOverflow(SearchError):
    """A leaf value lies outside the tree's value domain."""
