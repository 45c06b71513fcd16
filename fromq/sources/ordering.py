from __future__ import annotations
import logging
from functools import cmp_to_key
from .base import Source, iterate_over
from ..types import *

logger = logging.getLogger(__name__)


class SortKey(Generic[T, K]):
    """one level of a compound ordering"""

    def __init__(self, key_selector: KeySelector[T, K], descending: bool):
        self.key_selector = key_selector
        self.descending = descending

    def __repr__(self) -> str:
        return f"SortKey(descending={self.descending})"


class OrderBySource(Source[T]):
    """
    materializing, stable multi-key sort.

    every traversal pulls the whole upstream, computes each element's key tuple
    exactly once, sorts, then replays the result. nothing is kept between
    traversals. keys are compared with ``<`` and ``>`` only; elements that tie
    on every key keep their input order.
    """

    def __init__(self, source: Source[T], sort_keys: List[SortKey]):
        self._source = source
        self._sort_keys = sort_keys

    @property
    def sort_keys(self) -> List[SortKey]:
        return list(self._sort_keys)

    def then_by(self, key_selector: KeySelector[T, K], descending: bool = False) -> 'OrderBySource[T]':
        """same upstream, one more key level. self is left untouched."""
        return OrderBySource(self._source, self._sort_keys + [SortKey(key_selector, descending)])

    def __iter__(self) -> Iterator[T]:
        yield from self._compute_results()

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        for value in self._compute_results():
            if not iteratee(value):
                return False
        return True

    def _compute_results(self) -> List[T]:
        sort_keys = self._sort_keys
        key_lists = []
        values = []

        def collect(value):
            key_lists.append([sort_key.key_selector(value) for sort_key in sort_keys])
            values.append(value)
            return True

        iterate_over(self._source, collect)

        def compare(a_index, b_index):
            a_keys = key_lists[a_index]
            b_keys = key_lists[b_index]
            for i, sort_key in enumerate(sort_keys):
                if a_keys[i] < b_keys[i]:
                    return 1 if sort_key.descending else -1
                if a_keys[i] > b_keys[i]:
                    return -1 if sort_key.descending else 1
            return a_index - b_index

        order = sorted(range(len(values)), key=cmp_to_key(compare))
        logger.debug("sorted %d elements on %d key(s)", len(values), len(sort_keys))
        return [values[i] for i in order]
