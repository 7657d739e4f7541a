"""List operations over immutable sequences.

Inputs may be any iterable; results are always new tuples. Functions are
grouped the way the source surface documents them:

- ``create``: ``singleton``, ``repeat``, ``range``, ``cons``
- ``transform``: ``map``, ``indexed_map``, ``foldl``, ``foldr``, ``scanl``,
  ``filter``, ``filter_map``
- ``utilities``: ``length``, ``reverse``, ``member``, ``all``, ``any``,
  ``maximum``, ``minimum``, ``sum``, ``product``
- ``combine``: ``append``, ``concat``, ``concat_map``, ``intersperse``,
  ``map2`` .. ``map5``
- ``sort``: ``sort``, ``sort_by``, ``sort_with``
- ``deconstruct``: ``is_empty``, ``head``, ``tail``, ``take``, ``drop``,
  ``partition``, ``unzip``

Several names shadow builtins (``map``, ``filter``, ``range``, ``sum``,
``all``, ``any``); import the module rather than its members to keep the
builtins reachable::

    from listops import lists

    lists.range(1, 4)  # (1, 2, 3, 4)
"""

from .combine import (
    append,
    concat,
    concat_map,
    concatMap,
    intersperse,
    map2,
    map3,
    map4,
    map5,
)
from .create import cons, range, repeat, singleton
from .deconstruct import (
    drop,
    head,
    is_empty,
    isEmpty,
    partition,
    tail,
    take,
    unzip,
)
from .sort import sort, sort_by, sort_with, sortBy, sortWith
from .transform import (
    filter,
    filter_map,
    filterMap,
    foldl,
    foldr,
    indexed_map,
    indexedMap,
    map,
    scanl,
)
from .utilities import (
    all,
    any,
    length,
    maximum,
    member,
    minimum,
    product,
    reverse,
    sum,
)

__all__ = [
    "all",
    "any",
    "append",
    "concat",
    "concat_map",
    "concatMap",
    "cons",
    "drop",
    "filter",
    "filter_map",
    "filterMap",
    "foldl",
    "foldr",
    "head",
    "indexed_map",
    "indexedMap",
    "intersperse",
    "is_empty",
    "isEmpty",
    "length",
    "map",
    "map2",
    "map3",
    "map4",
    "map5",
    "maximum",
    "member",
    "minimum",
    "partition",
    "product",
    "range",
    "repeat",
    "reverse",
    "scanl",
    "singleton",
    "sort",
    "sort_by",
    "sortBy",
    "sort_with",
    "sortWith",
    "sum",
    "tail",
    "take",
    "unzip",
]
