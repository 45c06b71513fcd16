from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

class JoinAccessor(Generic[T]):
    """
    predicate joins. every left element runs a fresh filtered query over the
    join source (nested loop, o(n * m)), so the join source must be re-iterable.
    """
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def join(self, join_source: Queryable[U], predicate: JoinPredicate[T, U],
             selector: ZipSelector[T, U, V]) -> 'Query[V]':
        """inner join: one result per matching (left, right) pair, in left-then-right order"""
        from ..factories import from_
        return self._query.select_many(
            lambda l_value: from_(join_source)
                .where(lambda r_value: predicate(l_value, r_value))
                .select(lambda r_value: selector(l_value, r_value)))

    def group_join(self, join_source: Queryable[U], predicate: JoinPredicate[T, U],
                   selector: Callable[[T, 'Query[U]'], V]) -> 'Query[V]':
        """one result per left element, paired with a lazy query of its matches"""
        from ..factories import from_
        def pair_with_matches(l_value):
            r_values = from_(join_source).where(lambda r_value: predicate(l_value, r_value))
            return selector(l_value, r_values)
        return self._query.select(pair_with_matches)
