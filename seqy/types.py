from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Protocol, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Expander = Callable[[T], Iterable[U]]
Comparer = Callable[[T, T], int]
Accumulator = Callable[[U, T], U]
Action = Callable[[T], Any]


@runtime_checkable
class Comparable(Protocol):
    """
    an object that can order itself relative to another.
    compare() returns a negative number, zero or a positive number when
    self is less than, equal to or greater than other.
    """

    def compare(self, other: Any) -> int: ...


def default_comparer(left: Any, right: Any) -> int:
    """naive three-way comparison for natively ordered values"""
    if left == right: return 0
    return 1 if left > right else -1
