from __future__ import annotations
from .base import Source, iterate_over
from ..types import *


class DistinctSource(Source[T]):
    """
    yields the first element seen for each key, in order of first appearance.
    the seen-key set belongs to one traversal and is rebuilt on the next.
    """

    def __init__(self, source: Source[T], key_selector: Optional[KeySelector[T, K]] = None):
        self._source = source
        self._key_selector = key_selector if key_selector is not None else (lambda value: value)

    def __iter__(self) -> Iterator[T]:
        key_selector = self._key_selector
        found_keys = set()
        for value in self._source:
            key = key_selector(value)
            if key not in found_keys:
                found_keys.add(key)
                yield value

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        key_selector = self._key_selector
        found_keys = set()

        def visit(value):
            key = key_selector(value)
            if key in found_keys:
                return True
            found_keys.add(key)
            return iteratee(value)

        return iterate_over(self._source, visit)


class WithoutSource(Source[T]):
    """drops every element that is a member of a fixed exclusion set"""

    def __init__(self, source: Source[T], exclusions: Set[T]):
        self._source = source
        self._exclusions = exclusions

    def __iter__(self) -> Iterator[T]:
        exclusions = self._exclusions
        for value in self._source:
            if value not in exclusions:
                yield value

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        exclusions = self._exclusions
        return iterate_over(self._source, lambda value: iteratee(value) if value not in exclusions else True)
