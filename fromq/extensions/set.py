from __future__ import annotations
import typing
from ..sources import DistinctSource, WithoutSource, source_of, iterate_over
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class SetAccessor(Generic[T]):
    """
    set-style filters: first-occurrence dedup and exclusion.
    membership uses python hashing and equality, so keys and values must be hashable.
    """
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def distinct(self, key_selector: Optional[KeySelector[T, K]] = None) -> 'Query[T]':
        """return distinct elements. preserves order of first appearance."""
        from ..query import Query
        return Query(DistinctSource(self._query._source, key_selector))

    def without(self, *values: T) -> 'Query[T]':
        """drop every occurrence of the given values"""
        from ..query import Query
        return Query(WithoutSource(self._query._source, set(values)))

    def except_(self, *blacklists: Queryable[T]) -> 'Query[T]':
        """
        drop every element found in any of the blacklists.
        the blacklists are read once, when this is called.
        """
        from ..query import Query
        exclusions = set()
        for blacklist in blacklists:
            iterate_over(source_of(blacklist), lambda value: exclusions.add(value) or True)
        return Query(WithoutSource(self._query._source, exclusions))
