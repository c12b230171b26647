r"""
'      ____  _____  _____   ____
'     / __ \|  __ \|  __ \ / __ \
'    | |  | | |__) | |  | | |  | |
'    | |  | |  _  /| |  | | |  | |
'    | |__| | | \ \| |__| | |__| |
'     \____/|_|  \_\_____/ \___\_\
"""

# expose the main classes
from .enumerable import Enumerable, OrderedEnumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    count_from,
    repeat,
    empty,
    generate,
    P,
    p
)

# expose the streaming operators
from .extensions.ordered import (
    ordered_merge,
    ordered_union,
    ordered_intersect,
    ordered_merge_all,
    ordered_union_all,
    ordered_intersect_all,
    combine_all
)
from .extensions.join import full_outer_join
from .extensions.grouping import buffer, aggregate_many, merge_adjacent
from .extensions.set import intersect_all
from .extensions.utility import with_cancellation, pad_right
from .extensions.terminal import min_max

# expose supporting types and errors
from .types import KeyedComparer, MISSING, default_comparer, identity, touch
from .errors import OrdqError, UnorderedSequenceError, SequenceCancelledError

# define what `import *` does
__all__ = [
    "Enumerable",
    "OrderedEnumerable",
    "from_iterable",
    "from_range",
    "count_from",
    "repeat",
    "empty",
    "generate",
    "P",
    "p",
    "ordered_merge",
    "ordered_union",
    "ordered_intersect",
    "ordered_merge_all",
    "ordered_union_all",
    "ordered_intersect_all",
    "combine_all",
    "full_outer_join",
    "buffer",
    "aggregate_many",
    "merge_adjacent",
    "intersect_all",
    "with_cancellation",
    "pad_right",
    "min_max",
    "KeyedComparer",
    "MISSING",
    "default_comparer",
    "identity",
    "touch",
    "OrdqError",
    "UnorderedSequenceError",
    "SequenceCancelledError"
]
