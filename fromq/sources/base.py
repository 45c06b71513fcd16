from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Iterable as _IterableABC, Sequence as _SequenceABC
from ..types import *


# --- abstract base class ---

class Source(ABC, Generic[T]):
    """
    one stage of a query pipeline.
    a stage can always be pulled (``__iter__``) and pushed (``for_each``).
    stages with a cheaper push path override ``for_each``; the default
    drives the pull cursor and checks the continuation flag per element.
    """

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        """pull traversal: a fresh cursor over the stage's elements"""
        pass

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        """
        push traversal: call iteratee for every element until it returns false.
        returns false if and only if the iteratee asked to stop.
        """
        for value in self:
            if not iteratee(value):
                return False
        return True


# --- dispatch helpers ---

def iterate_over(source: Iterable[T], iteratee: Iteratee[T]) -> bool:
    """push every element of source into iteratee, preferring the push path"""
    if isinstance(source, Source):
        return source.for_each(iteratee)
    for value in source:
        if not iteratee(value):
            return False
    return True


def array_of(source: Iterable[T]) -> List[T]:
    """materialize a source into a new list using its push path"""
    values = []
    def append(value):
        values.append(value)
        return True
    iterate_over(source, append)
    return values


def source_of(queryable: Queryable[T]) -> 'Source[T]':
    """adapt anything queryable to a stage. queries are unwrapped, never re-wrapped."""
    from ..query import Query
    if isinstance(queryable, Source):
        return queryable
    if isinstance(queryable, Query):
        return queryable._source
    if isinstance(queryable, _SequenceABC):
        return ArrayLikeSource(queryable)
    if isinstance(queryable, _IterableABC):
        return IterableSource(queryable)
    raise TypeError(f"object of type '{type(queryable).__name__}' is not queryable")


# --- raw collection adapters ---

class ArrayLikeSource(Source[T]):
    """indexable sequence adapter. restartable; length is re-read on every traversal."""

    def __init__(self, array: Sequence[T]):
        self._array = array

    def __iter__(self) -> Iterator[T]:
        array = self._array
        for i in range(len(array)):
            yield array[i]

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        array = self._array
        for i in range(len(array)):
            if not iteratee(array[i]):
                return False
        return True


class IterableSource(Source[T]):
    """
    adapter for any other iterable. restartable only if the wrapped
    iterable is: a generator or iterator is consumed by the first traversal.
    """

    def __init__(self, iterable: Iterable[T]):
        self._iterable = iterable

    def __iter__(self) -> Iterator[T]:
        return iter(self._iterable)


class FactorySource(Source[T]):
    """calls a zero-argument factory for a fresh iterable on every traversal"""

    def __init__(self, factory: Callable[[], Iterable[T]]):
        self._factory = factory

    def __iter__(self) -> Iterator[T]:
        return iter(self._factory())
