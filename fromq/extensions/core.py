from __future__ import annotations
import typing
from ..sources import (
    ConcatSource, WhereSource, SelectSource, SelectManySource, OrderBySource, SortKey,
    SkipSource, SkipLastSource, SkipWhileSource, TakeSource, TakeWhileSource,
    FatMapSource, ThruSource, WindowBuffer
)
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query, OrderedQuery


class _CoreOperations(Generic[T]):
    def where(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """filter elements based on a predicate"""
        from ..query import Query
        return Query(WhereSource(self._source, predicate))

    def select(self: 'Query[T]', selector: Selector[T, U]) -> 'Query[U]':
        """project each element to a new form"""
        from ..query import Query
        return Query(SelectSource(self._source, selector))

    def select_many(self: 'Query[T]', selector: Selector[T, Queryable[U]]) -> 'Query[U]':
        """project each element to a sequence and flatten one level"""
        from ..query import Query
        return Query(SelectManySource(self._source, selector))

    def concat(self: 'Query[T]', *sources: Queryable[T]) -> 'Query[T]':
        """append whole sequences after this one"""
        from ..query import Query
        return Query(ConcatSource(self._source, *sources))

    def plus(self: 'Query[T]', *values: T) -> 'Query[T]':
        """append individual values after this sequence"""
        from ..query import Query
        return Query(ConcatSource(self._source, values))

    def order_by(self: 'Query[T]', key_selector: KeySelector[T, K], direction: str = ASCENDING) -> 'OrderedQuery[T]':
        """sort elements by a key. this stage materializes its upstream."""
        from ..query import OrderedQuery, _is_descending
        descending = _is_descending(direction)
        return OrderedQuery(OrderBySource(self._source, [SortKey(key_selector, descending)]))

    def order_by_descending(self: 'Query[T]', key_selector: KeySelector[T, K]) -> 'OrderedQuery[T]':
        """sort elements by a key in descending order"""
        from ..query import OrderedQuery
        return OrderedQuery(OrderBySource(self._source, [SortKey(key_selector, True)]))

    def skip(self: 'Query[T]', count: int) -> 'Query[T]':
        """skip the first 'count' elements"""
        from ..query import Query
        return Query(SkipSource(self._source, count))

    def skip_last(self: 'Query[T]', count: int) -> 'Query[T]':
        """drop the last 'count' elements. a non-positive count gives an empty sequence."""
        from ..query import Query
        return Query(SkipLastSource(self._source, count))

    def skip_while(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """skip elements while predicate is true"""
        from ..query import Query
        return Query(SkipWhileSource(self._source, predicate))

    def take(self: 'Query[T]', count: int) -> 'Query[T]':
        """take the first 'count' elements"""
        from ..query import Query
        return Query(TakeSource(self._source, count))

    def take_last(self: 'Query[T]', count: int) -> 'Query[T]':
        """take the last 'count' elements"""
        # the start of the tail is only known once the final element has been seen
        return self.thru(lambda values: values[-count:] if count > 0 else [])

    def take_while(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """take elements while predicate is true"""
        from ..query import Query
        return Query(TakeWhileSource(self._source, predicate))

    def reverse(self: 'Query[T]') -> 'Query[T]':
        """inverts the order of the elements in a sequence"""
        def reverse_data(values):
            values.reverse()
            return values
        return self.thru(reverse_data)

    def thru(self: 'Query[T]', transformer: Callable[[List[T]], Queryable[U]]) -> 'Query[U]':
        """
        materialize the sequence into a list, pass it through transformer and
        query the result. the list is new on every traversal, so the
        transformer may modify it in place.
        """
        from ..query import Query
        return Query(ThruSource(self._source, transformer))

    def fat_map(self: 'Query[T]', selector: Selector[WindowBuffer[T], Queryable[U]],
                window_size: int = 1) -> 'Query[U]':
        """
        sliding-window flat map. selector receives a window centered on each
        element in turn (``window.value``) holding up to window_size neighbours
        on each side, and returns zero or more results.
        """
        from ..query import Query
        return Query(FatMapSource(self._source, selector, window_size))

    def window_map(self: 'Query[T]', selector: Selector[WindowBuffer[T], U],
                   window_size: int = 1) -> 'Query[U]':
        """sliding-window map: exactly one result per input element"""
        from ..query import Query
        return Query(FatMapSource(self._source, selector, window_size, flatten=False))
