from __future__ import annotations

from collections import abc

from .types import *

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor


class Sequence(
    _CoreOperations[T],
    _TerminalOperations[T]
):
    """
    a lazy, composable view over an iterable.

    nothing runs until the sequence is iterated or a terminal operation is
    called. every transformation returns a new sequence wrapping the current
    one, so a pipeline can be iterated again as long as its root iterable can
    (a list can, a generator object cannot).
    """

    def __init__(self, source: Optional[Iterable[T]] = None):
        if source is not None and not isinstance(source, abc.Iterable):
            raise TypeError(f"source must be iterable, got '{type(source).__name__}'")
        self._source: Iterable[T] = source if source is not None else ()
        # --- initialize accessors ---
        self.to = TerminalAccessor(self)

    @property
    def source(self) -> Iterable[T]:
        """the iterable or pipeline stage this sequence reads from"""
        return self._source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"Sequence({self._source!r})"
