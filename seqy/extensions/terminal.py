from __future__ import annotations
import builtins
import typing
import numpy as np
import pandas as pd
from functools import reduce
from ..types import *
from ..exceptions import InvalidOperationError

if typing.TYPE_CHECKING:
    from ..sequence import Sequence

# marks "nothing found", since None is a legitimate element
_MISSING = object()


class _TerminalOperations(Generic[T]):
    """operations that force (part of) the pipeline to run and return a concrete value"""

    def count(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is not None: return self.filter(predicate).count()
        return sum(1 for _ in self)

    def all(self: 'Sequence[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition, stopping at the first that does not"""
        return builtins.all(predicate(x) for x in self)

    def any(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition, or if there is any element at all"""
        if predicate is None:
            for _ in self:
                return True
            return False
        return builtins.any(predicate(x) for x in self)

    def fold(self: 'Sequence[T]', accumulator: Accumulator[U, T], seed: Optional[U] = None) -> Optional[U]:
        """left-to-right reduction starting from seed; an empty sequence returns seed"""
        return reduce(accumulator, self, seed)

    def apply(self: 'Sequence[T]', applicator: Callable[[Any], V],
              accumulator: Optional[Accumulator[U, T]] = None, seed: Optional[U] = None) -> V:
        """
        hand the sequence to an applicator function.
        without an accumulator the applicator receives the (still lazy) sequence
        itself; with one, it receives the result of fold(accumulator, seed).
        """
        if accumulator is None: return applicator(self)
        return applicator(self.fold(accumulator, seed))

    def iter(self: 'Sequence[T]', action: Action[T]) -> None:
        """run an action on every element for its side effects"""
        for item in self:
            action(item)

    def to_array(self: 'Sequence[T]') -> List[T]:
        """materialize into a new list"""
        return list(self)

    def get_first(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get first element, raising InvalidOperationError if there is none"""
        if predicate is not None: return self.filter(predicate).get_first()
        for item in self:
            return item
        raise InvalidOperationError("sequence contains no elements")

    def get_first_or_default(self: 'Sequence[T]', default: Optional[T] = None,
                             predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get first element or default"""
        if predicate is not None: return self.filter(predicate).get_first_or_default(default)
        for item in self:
            return item
        return default

    def get_last(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get last element, raising InvalidOperationError if there is none"""
        found = self.get_last_or_default(_MISSING, predicate)
        if found is _MISSING: raise InvalidOperationError("sequence contains no elements")
        return found

    def get_last_or_default(self: 'Sequence[T]', default: Optional[T] = None,
                            predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get last element or default"""
        if predicate is not None: return self.filter(predicate).get_last_or_default(default)
        found = default
        for item in self:
            found = item
        return found

    def get_single(self: 'Sequence[T]', predicate: Optional[Predicate[T]] = None) -> T:
        """get the only element, erroring if there is not exactly one"""
        if predicate is not None: return self.filter(predicate).get_single()
        found = _MISSING
        for item in self:
            if found is not _MISSING:
                raise InvalidOperationError("sequence contains more than one element")
            found = item
        if found is _MISSING: raise InvalidOperationError("sequence contains no elements")
        return found

    def get_single_or_default(self: 'Sequence[T]', default: Optional[T] = None,
                              predicate: Optional[Predicate[T]] = None) -> Optional[T]:
        """get the only element, or default when there are zero or several"""
        if predicate is not None: return self.filter(predicate).get_single_or_default(default)
        found = _MISSING
        for item in self:
            if found is not _MISSING: return default
            found = item
        return default if found is _MISSING else found


class TerminalAccessor(Generic[T]):
    """conversions into concrete containers, exposed as `sequence.to`"""

    def __init__(self, sequence_instance: 'Sequence[T]'):
        self._sequence = sequence_instance

    def list(self) -> List[T]:
        """convert to list"""
        return self._sequence.to_array()

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return builtins.tuple(self._sequence)

    def set(self) -> Set[T]:
        """convert to set"""
        return builtins.set(self._sequence)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._sequence}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sequence.to_array())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sequence.to_array())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._sequence.to_array())
