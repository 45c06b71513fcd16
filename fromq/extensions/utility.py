from __future__ import annotations
import typing
import numpy as np
from ..sources import IntersperseSource, MemoSource
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query


class UtilityAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def intersperse(self, separator: T) -> 'Query[T]':
        """intersperse separator between elements"""
        from ..query import Query
        return Query(IntersperseSource(self._query._source, separator))

    def intercalate(self: 'UtilityAccessor[Queryable[U]]', separator: Queryable[U]) -> 'Query[U]':
        """join a sequence of sequences, with the separator sequence between each pair"""
        return self.intersperse(separator).select_many(lambda values: values)

    def besides(self, action: Callable[[T], Any]) -> 'Query[T]':
        """
        performs a side-effect action for each element as it passes through the
        sequence without modifying it. lazy: runs only as elements are pulled.
        """
        def tap(item):
            action(item)
            return item
        return self._query.select(tap)

    def invoke(self: 'UtilityAccessor[Callable[..., U]]', *args, **kwargs) -> 'Query[U]':
        """call every element (a callable) with the same arguments"""
        return self._query.select(lambda func: func(*args, **kwargs))

    def apply(self: 'UtilityAccessor[Callable[[V], U]]', values: Queryable[V]) -> 'Query[U]':
        """
        applies each function in this sequence to every value, function-major:
        [f, g].apply([1, 2]) -> [f(1), f(2), g(1), g(2)]
        """
        from ..factories import from_
        return self._query.select_many(lambda func: from_(values).select(func))

    def memoize(self) -> 'Query[T]':
        """
        returns a new query that evaluates this one at most once and replays
        the cached elements on later traversals. this operation is LAZY: the
        cache fills only as the new query is iterated.
        """
        from ..query import Query
        return Query(MemoSource(self._query._source))

    def shuffle(self, random_state: RandomState = None) -> 'Query[T]':
        """
        random permutation (fisher-yates). random_state is anything
        numpy.random.default_rng accepts; an int seed repeats the same order
        on every traversal.
        """
        def shuffle_data(values):
            rng = np.random.default_rng(random_state)
            for i in range(len(values) - 1):
                pick = i + int(rng.integers(len(values) - i))
                values[i], values[pick] = values[pick], values[i]
            return values
        return self._query.thru(shuffle_data)

    def sample(self, count: int, random_state: RandomState = None) -> 'Query[T]':
        """random sampling without replacement, clamped to the sequence length"""
        def sample_data(values):
            rng = np.random.default_rng(random_state)
            n_samples = min(max(count, 0), len(values))
            for i in range(n_samples):
                pick = i + int(rng.integers(len(values) - i))
                values[i], values[pick] = values[pick], values[i]
            del values[n_samples:]
            return values
        return self._query.thru(sample_data)

    def random(self, count: int, random_state: RandomState = None) -> 'Query[T]':
        """random sampling with replacement; may repeat elements. empty input gives nothing."""
        def random_data(values):
            if count <= 0 or not values:
                return []
            rng = np.random.default_rng(random_state)
            return [values[int(index)] for index in rng.integers(len(values), size=count)]
        return self._query.thru(random_data)
