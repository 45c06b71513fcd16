from __future__ import annotations
from .base import Source, iterate_over, source_of
from ..types import *


class ConcatSource(Source[T]):
    """visits each source in order, exhausting one before starting the next"""

    def __init__(self, *sources: Queryable[T]):
        self._sources = [source_of(source) for source in sources]

    def __iter__(self) -> Iterator[T]:
        for source in self._sources:
            yield from source

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        for source in self._sources:
            if not iterate_over(source, iteratee):
                return False
        return True


class WhereSource(Source[T]):
    def __init__(self, source: Source[T], predicate: Predicate[T]):
        self._source = source
        self._predicate = predicate

    def __iter__(self) -> Iterator[T]:
        predicate = self._predicate
        for value in self._source:
            if predicate(value):
                yield value

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        predicate = self._predicate
        return iterate_over(self._source, lambda value: iteratee(value) if predicate(value) else True)


class SelectSource(Source[U]):
    def __init__(self, source: Source[T], selector: Selector[T, U]):
        self._source = source
        self._selector = selector

    def __iter__(self) -> Iterator[U]:
        selector = self._selector
        for value in self._source:
            yield selector(value)

    def for_each(self, iteratee: Iteratee[U]) -> bool:
        selector = self._selector
        return iterate_over(self._source, lambda value: iteratee(selector(value)))


class SelectManySource(Source[U]):
    """flattens exactly one level: selector results are not flattened further"""

    def __init__(self, source: Source[T], selector: Selector[T, Queryable[U]]):
        self._source = source
        self._selector = selector

    def __iter__(self) -> Iterator[U]:
        selector = self._selector
        for value in self._source:
            yield from source_of(selector(value))

    def for_each(self, iteratee: Iteratee[U]) -> bool:
        selector = self._selector
        return iterate_over(self._source, lambda value: iterate_over(source_of(selector(value)), iteratee))


class IntersperseSource(Source[T]):
    def __init__(self, source: Source[T], separator: T):
        self._source = source
        self._separator = separator

    def __iter__(self) -> Iterator[T]:
        first_element = True
        for value in self._source:
            if not first_element:
                yield self._separator
            yield value
            first_element = False

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        first_element = True

        def visit(value):
            nonlocal first_element
            if not first_element and not iteratee(self._separator):
                return False
            first_element = False
            return iteratee(value)

        return iterate_over(self._source, visit)
