import typing
from itertools import count as _count, repeat as _repeat
from .types import *
from .sources import ConcatSource, FactorySource, source_of

if typing.TYPE_CHECKING:
    from .query import Query

def from_(*sources: Queryable[T]) -> 'Query[T]':
    """
    create a query over one or more sources. several sources are concatenated
    in the order given. sequences are read by index and can be traversed any
    number of times; a bare iterator can only be traversed once.
    """
    from .query import Query
    if len(sources) == 1:
        return Query(source_of(sources[0]))
    return Query(ConcatSource(*sources))

def from_range(start: int, count: int) -> 'Query[int]':
    """create query over count consecutive integers"""
    return from_(range(start, start + max(count, 0)))

def repeat(item: T, count: Optional[int] = None) -> 'Query[T]':
    """create query with repeated item; endless when count is None"""
    from .query import Query
    if count is None:
        return Query(FactorySource(lambda: _repeat(item)))
    return Query(FactorySource(lambda: _repeat(item, max(count, 0))))

def empty() -> 'Query[Any]':
    """create empty query"""
    return from_(())

def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'Query[T]':
    """
    lazily generate elements by calling a function. the function runs once
    per element per traversal; endless when count is None.
    """
    from .query import Query
    def generate_data():
        counter = _count() if count is None else range(count)
        for _ in counter:
            yield generator_func()
    return Query(FactorySource(generate_data))

# --- aliases ---
query = from_
Q = from_
