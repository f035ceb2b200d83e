import typing
from .types import *

if typing.TYPE_CHECKING:
    from .sequence import Sequence

def from_iterable(source: Optional[Iterable[T]] = None) -> 'Sequence[T]':
    """create sequence from iterable, empty when none is given"""
    from .sequence import Sequence
    return Sequence(source if source is not None else [])

def from_items(*items: T) -> 'Sequence[T]':
    """create sequence from the given arguments"""
    from .sequence import Sequence
    return Sequence(items)

def from_seed(seed: T, expander: Expander[T, U]) -> 'Sequence[U]':
    """expand a single seed value into a sequence"""
    return from_items(seed).collect(expander)

def empty() -> 'Sequence[Any]':
    """create empty sequence"""
    from .sequence import Sequence
    return Sequence([])

# --- aliases ---
seq = from_iterable
seqv = from_items
seqi = from_seed
