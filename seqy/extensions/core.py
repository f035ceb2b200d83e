from __future__ import annotations
import logging
import typing
from ..types import *
from ..exceptions import InvalidArgumentError, InvalidOperationError
from ..stages import (
    FilterStage, MapStage, FlattenStage, ConcatStage, SkipStage, TakeStage, SortedStage
)

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

logger = logging.getLogger(__name__)


class _CoreOperations(Generic[T]):
    def filter(self: 'Sequence[T]', predicate: Predicate[T]) -> 'Sequence[T]':
        """keep the elements that satisfy a predicate"""
        from ..sequence import Sequence
        return Sequence(FilterStage(self, predicate))

    def map(self: 'Sequence[T]', mapper: Selector[T, U]) -> 'Sequence[U]':
        """project each element to a new form"""
        from ..sequence import Sequence
        return Sequence(MapStage(self, mapper))

    def collect(self: 'Sequence[T]', expander: Expander[T, U]) -> 'Sequence[U]':
        """expand every element into a run of elements and flatten the runs, in order"""
        from ..sequence import Sequence
        return Sequence(FlattenStage(self, expander))

    def append(self: 'Sequence[T]', *items: T) -> 'Sequence[T]':
        """yields the current sequence followed by the given items"""
        from ..sequence import Sequence
        return Sequence(ConcatStage(self, after=items))

    def prepend(self: 'Sequence[T]', *items: T) -> 'Sequence[T]':
        """yields the given items followed by the current sequence"""
        from ..sequence import Sequence
        return Sequence(ConcatStage(self, before=items))

    def skip(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """bypass the first 'count' elements"""
        from ..sequence import Sequence
        if count < 0:
            raise InvalidArgumentError("the amount to skip cannot be less than zero")
        return Sequence(SkipStage(self, count))

    def take(self: 'Sequence[T]', count: int) -> 'Sequence[T]':
        """
        take at most the first 'count' elements.
        the source is never advanced past the last element taken, so this is
        safe on infinite sources.
        """
        from ..sequence import Sequence
        if count < 0:
            raise InvalidArgumentError("the amount to take cannot be less than zero")
        return Sequence(TakeStage(self, count))

    def sort(self: 'Sequence[T]', comparer: Optional[Comparer[T]] = None) -> 'Sequence[T]':
        """
        sort the sequence with a three-way comparer.
        unlike the other operators this materializes the source right away;
        without a comparer the elements must be natively orderable.
        """
        from ..sequence import Sequence
        return Sequence(SortedStage(list(self), comparer or default_comparer))

    def sortc(self: 'Sequence[T]', descending: bool = False) -> 'Sequence[T]':
        """
        sort the sequence using each element's own compare() method.
        raises InvalidOperationError when an element is not comparable or
        comparing two elements fails.
        """
        from ..sequence import Sequence
        items = list(self)
        for item in items:
            if not isinstance(item, Comparable):
                raise InvalidOperationError(
                    f"sequence contains an element of type '{type(item).__name__}' that does not implement compare()")

        direction = -1 if descending else 1

        def comparer(left: Comparable, right: Comparable) -> int:
            return direction * left.compare(right)

        try:
            return Sequence(SortedStage(items, comparer))
        except (TypeError, AttributeError) as e:
            logger.debug("comparison failed while sorting comparables: %s", e)
            raise InvalidOperationError(f"sequence elements cannot be compared: {e}") from e
