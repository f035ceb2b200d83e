"""free-function shortcuts for running a single operation over any iterable"""
import typing
from .types import *
from .factories import from_iterable

if typing.TYPE_CHECKING:
    from .sequence import Sequence


def all_of(items: Iterable[T], predicate: Predicate[T]) -> bool:
    """true if every item satisfies the predicate (or there are no items)"""
    return from_iterable(items).all(predicate)


def any_of(items: Iterable[T], predicate: Optional[Predicate[T]] = None) -> bool:
    """true if some item satisfies the predicate; without one, true if there is any item"""
    return from_iterable(items).any(predicate)


def count_of(items: Iterable[T], predicate: Optional[Predicate[T]] = None) -> int:
    """count items, optionally only those satisfying the predicate"""
    return from_iterable(items).count(predicate)


def sort(items: Iterable[T], comparer: Optional[Comparer[T]] = None) -> 'Sequence[T]':
    """sort items with a three-way comparer, or natively when none is given"""
    return from_iterable(items).sort(comparer)


def sortc(items: Iterable[T], descending: bool = False) -> 'Sequence[T]':
    """sort items that implement compare()"""
    return from_iterable(items).sortc(descending)
