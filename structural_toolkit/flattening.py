from __future__ import annotations

from typing import Any, List, Sequence

SEQUENCE_TYPES = (list, tuple)


def flatten(seq: Sequence[Any]) -> List[Any]:
    """Fully unnest lists and tuples into one flat list, depth-first.

    Strings, bytes and mappings are treated as single elements.

    >>> flatten([1, [2, [3, 4], 5]])
    [1, 2, 3, 4, 5]
    """
    flat: List[Any] = []
    for item in seq:
        if isinstance(item, SEQUENCE_TYPES):
            flat.extend(flatten(item))
        else:
            flat.append(item)
    return flat
