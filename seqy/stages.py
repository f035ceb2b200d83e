"""
pipeline stages.

a sequence's source is either a plain iterable or one of the stages below.
every stage keeps a reference to its upstream iterable plus whatever the
operator captured, and produces its elements from a fresh generator on each
iter() call, so a pipeline can be re-run as long as its root allows it.
"""
from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from functools import cmp_to_key
from itertools import chain, islice

from .types import *

logger = logging.getLogger(__name__)


class Stage(ABC, Generic[T]):
    """one link of a sequence pipeline"""

    def __init__(self, upstream: Iterable[Any]):
        self._upstream = upstream

    @property
    def upstream(self) -> Iterable[Any]:
        return self._upstream

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._upstream!r})"


class FilterStage(Stage[T]):
    def __init__(self, upstream: Iterable[T], predicate: Predicate[T]):
        super().__init__(upstream)
        self._predicate = predicate

    def __iter__(self) -> Iterator[T]:
        predicate = self._predicate
        for item in self._upstream:
            if predicate(item):
                yield item


class MapStage(Stage[U]):
    def __init__(self, upstream: Iterable[T], mapper: Selector[T, U]):
        super().__init__(upstream)
        self._mapper = mapper

    def __iter__(self) -> Iterator[U]:
        mapper = self._mapper
        for item in self._upstream:
            yield mapper(item)


class FlattenStage(Stage[U]):
    def __init__(self, upstream: Iterable[T], expander: Expander[T, U]):
        super().__init__(upstream)
        self._expander = expander

    def __iter__(self) -> Iterator[U]:
        expander = self._expander
        for item in self._upstream:
            yield from expander(item)


class ConcatStage(Stage[T]):
    """yields the upstream with a fixed run of items before and/or after it"""

    def __init__(self, upstream: Iterable[T], before: Tuple[T, ...] = (), after: Tuple[T, ...] = ()):
        super().__init__(upstream)
        self._before = tuple(before)
        self._after = tuple(after)

    def __iter__(self) -> Iterator[T]:
        yield from chain(self._before, self._upstream, self._after)

    def __repr__(self) -> str:
        return f"ConcatStage({self._upstream!r}, before={self._before!r}, after={self._after!r})"


class SkipStage(Stage[T]):
    def __init__(self, upstream: Iterable[T], count: int):
        super().__init__(upstream)
        self._count = count

    def __iter__(self) -> Iterator[T]:
        yield from islice(self._upstream, self._count, None)


class TakeStage(Stage[T]):
    def __init__(self, upstream: Iterable[T], count: int):
        super().__init__(upstream)
        self._count = count

    def __iter__(self) -> Iterator[T]:
        # islice stops as soon as count items were produced, without
        # requesting one more from the upstream
        yield from islice(self._upstream, self._count)


class SortedStage(Stage[T]):
    """
    the only stage that buffers. it takes ownership of an already materialized
    list and sorts it in place; iteration replays that snapshot. nothing
    upstream is referenced afterwards.
    """

    def __init__(self, items: List[T], comparer: Comparer[T]):
        super().__init__(())
        logger.debug("materialized %d items for sorting", len(items))
        # python's sort is stable, equal items keep their source order
        items.sort(key=cmp_to_key(comparer))
        self._data = items

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __repr__(self) -> str:
        return f"SortedStage(items={len(self._data)})"
