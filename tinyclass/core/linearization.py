# tinyclass/core/linearization.py
"""
C3 linearization over an explicit ancestor graph.

The resolver never looks at Python's own ``__mro__``. It is handed a
``parents_of`` callable (usually ``AttributeRegistry.parents_of``) and computes

    L[C] = C + merge(L[P1], ..., L[Pn], [P1, ..., Pn])

for a class C with declared parents P1..Pn. Results are memoized per class
identity; the graph is expected to stay fixed once a class has been
linearized (the registry enforces that).
"""

from __future__ import annotations

import threading
from typing import Any, Callable, Dict, Hashable, Iterable, List, Optional, Sequence, Tuple

from tinyclass.exceptions import InconsistentHierarchyError, class_label
from tinyclass.logging import get_logger
from tinyclass.logging_tags import MRO

logger = get_logger(__name__)

Linearization = Tuple[Hashable, ...]


def c3_merge(sequences: Iterable[Sequence[Hashable]], owner: Any = None) -> List[Hashable]:
    """
    Merge linearizations with the C3 rule.

    Repeatedly picks the first head (scanning the lists in order) that does
    not appear in the tail of any list, appends it to the result and drops it
    from every list.

    Raises:
        InconsistentHierarchyError: If every remaining head appears in some tail.

    Examples:
        >>> c3_merge([["B", "A"], ["C", "A"], ["B", "C"]])
        ['B', 'C', 'A']
    """
    pending = [list(seq) for seq in sequences if seq]
    result: List[Hashable] = []

    while pending:
        for seq in pending:
            head = seq[0]
            if not any(head in other[1:] for other in pending):
                break
        else:
            heads = ", ".join(class_label(seq[0]) for seq in pending)
            raise InconsistentHierarchyError(
                owner, f"no consistent method resolution order for bases {heads}"
            )

        result.append(head)
        for seq in pending:
            # head is in no tail, so it can only sit at the front
            if seq[0] == head:
                del seq[0]
        pending = [seq for seq in pending if seq]

    return result


class LinearizationResolver:
    """
    Memoizing C3 resolver.

    Args:
        parents_of: Returns the ordered direct parents of a class handle.
        on_resolve: Called with every newly cached linearization.
        lock: Guards cache population. The registry passes its own lock so
            declarations and resolution never interleave.
    """

    def __init__(
        self,
        parents_of: Callable[[Hashable], Sequence[Hashable]],
        on_resolve: Optional[Callable[[Linearization], None]] = None,
        lock: Optional[threading.RLock] = None,
    ):
        self._parents_of = parents_of
        self._on_resolve = on_resolve
        self._cache: Dict[Hashable, Linearization] = {}
        self._lock = lock if lock is not None else threading.RLock()

    def linearize(self, cls: Hashable) -> Linearization:
        """Return the cached linearization of ``cls``, computing it on first use."""
        cached = self._cache.get(cls)
        if cached is not None:
            return cached

        with self._lock:
            return self._resolve(cls, ())

    def is_cached(self, cls: Hashable) -> bool:
        return cls in self._cache

    def _resolve(self, cls: Hashable, in_progress: Tuple[Hashable, ...]) -> Linearization:
        cached = self._cache.get(cls)
        if cached is not None:
            return cached

        if cls in in_progress:
            cycle = " -> ".join(class_label(c) for c in in_progress + (cls,))
            raise InconsistentHierarchyError(cls, f"cyclic inheritance ({cycle})")

        parents = list(self._parents_of(cls))
        chain = in_progress + (cls,)
        parent_lins = [self._resolve(parent, chain) for parent in parents]

        result: Linearization = (cls,) + tuple(c3_merge(parent_lins + [parents], owner=cls))

        self._cache[cls] = result
        logger.debug(
            f"{MRO} {class_label(cls)}: {[class_label(c) for c in result]}"
        )
        if self._on_resolve is not None:
            self._on_resolve(result)
        return result
