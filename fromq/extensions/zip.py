from __future__ import annotations
import typing
from ..sources import ZipSource, source_of
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class ZipAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def zip_with(self, other: Queryable[U], result_selector: ZipSelector[T, U, V]) -> 'Query[V]':
        """zip two sequences with custom result selector, stopping at the shorter one"""
        from ..query import Query
        return Query(ZipSource(self._query._source, source_of(other), result_selector))

    def zip(self, other: Queryable[U]) -> 'Query[Tuple[T, U]]':
        """zip two sequences into pairs"""
        return self.zip_with(other, lambda t, u: (t, u))
