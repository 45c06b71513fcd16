from __future__ import annotations
import logging
from .base import Source, array_of, iterate_over, source_of
from ..types import *

logger = logging.getLogger(__name__)


class ThruSource(Source[U]):
    """
    materialize the upstream into a fresh list, hand it to a transformer and
    replay whatever comes back. the transformer may mutate the list in place.
    runs again on every traversal.
    """

    def __init__(self, source: Source[T], transformer: Callable[[List[T]], Queryable[U]]):
        self._source = source
        self._transformer = transformer

    def _transformed(self) -> Source[U]:
        values = array_of(self._source)
        logger.debug("materialized %d elements for %r", len(values), self._transformer)
        return source_of(self._transformer(values))

    def __iter__(self) -> Iterator[U]:
        yield from self._transformed()

    def for_each(self, iteratee: Iteratee[U]) -> bool:
        return iterate_over(self._transformed(), iteratee)


class MemoSource(Source[T]):
    """
    evaluates its upstream at most once and replays it to every traversal.

    caching is incremental: a traversal that stops early leaves the cache
    partially filled, and the next traversal that needs more continues the
    same upstream cursor from where it was left. an upstream error empties
    the cache, so the next traversal evaluates the upstream again.
    """

    def __init__(self, source: Source[T]):
        self._source = source
        self._cache: List[T] = []
        self._source_iterator: Optional[Iterator[T]] = None
        self._is_fully_enumerated = False

    def _fetch_next(self) -> bool:
        """pull one more upstream element into the cache. false once exhausted."""
        if self._is_fully_enumerated:
            return False
        if self._source_iterator is None:
            self._source_iterator = iter(self._source)
        sentinel = object()
        try:
            value = next(self._source_iterator, sentinel)
        except BaseException:
            # a failed upstream cursor is dead; start over on the next traversal
            self._source_iterator = None
            self._cache.clear()
            raise
        if value is sentinel:
            self._is_fully_enumerated = True
            self._source_iterator = None
            logger.debug("memoized %d elements", len(self._cache))
            return False
        self._cache.append(value)
        return True

    def __iter__(self) -> Iterator[T]:
        index = 0
        while index < len(self._cache) or self._fetch_next():
            yield self._cache[index]
            index += 1

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        index = 0
        while index < len(self._cache) or self._fetch_next():
            if not iteratee(self._cache[index]):
                return False
            index += 1
        return True
