r"""
'   ___ ___ ___  __   __
'  / __| __/ _ \ \ \ / /
'  \__ \ _| (_) | \ V /
'  |___/___\__\_\  |_|
"""

# expose the main class
from .sequence import Sequence

# expose the factory functions
from .factories import (
    from_iterable,
    from_items,
    from_seed,
    empty,
    seq,
    seqv,
    seqi
)

# expose the free-function shortcuts
from .functions import all_of, any_of, count_of, sort, sortc

# expose supporting types and errors
from .types import Comparable, default_comparer
from .exceptions import SequenceError, InvalidArgumentError, InvalidOperationError
from .stages import Stage

# define what `import *` does
__all__ = [
    "Sequence",
    "from_iterable",
    "from_items",
    "from_seed",
    "empty",
    "seq",
    "seqv",
    "seqi",
    "all_of",
    "any_of",
    "count_of",
    "sort",
    "sortc",
    "Comparable",
    "default_comparer",
    "SequenceError",
    "InvalidArgumentError",
    "InvalidOperationError",
    "Stage"
]
