from __future__ import annotations
from collections import deque
from .base import Source, iterate_over
from ..types import *


class SkipSource(Source[T]):
    def __init__(self, source: Source[T], count: int):
        self._source = source
        self._count = count

    def __iter__(self) -> Iterator[T]:
        skips_left = self._count
        for value in self._source:
            if skips_left > 0:
                skips_left -= 1
                continue
            yield value

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        skips_left = self._count

        def visit(value):
            nonlocal skips_left
            if skips_left > 0:
                skips_left -= 1
                return True
            return iteratee(value)

        return iterate_over(self._source, visit)


class SkipLastSource(Source[T]):
    """
    holds back the last ``count`` elements using a buffer of exactly that size,
    so it runs ``count`` elements behind its upstream.
    a non-positive count yields nothing.
    """

    def __init__(self, source: Source[T], count: int):
        self._source = source
        self._count = count

    def __iter__(self) -> Iterator[T]:
        count = self._count
        if count <= 0:
            return
        buffer = deque()
        for value in self._source:
            if len(buffer) == count:
                yield buffer.popleft()
            buffer.append(value)

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        count = self._count
        if count <= 0:
            return True
        buffer = deque()

        def visit(value):
            keep_going = True
            if len(buffer) == count:
                keep_going = iteratee(buffer.popleft())
            buffer.append(value)
            return keep_going

        return iterate_over(self._source, visit)


class SkipWhileSource(Source[T]):
    def __init__(self, source: Source[T], predicate: Predicate[T]):
        self._source = source
        self._predicate = predicate

    def __iter__(self) -> Iterator[T]:
        on_the_take = False
        for value in self._source:
            if not on_the_take and not self._predicate(value):
                on_the_take = True
            if on_the_take:
                yield value

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        on_the_take = False

        def visit(value):
            nonlocal on_the_take
            if not on_the_take:
                if self._predicate(value):
                    return True
                on_the_take = True
            return iteratee(value)

        return iterate_over(self._source, visit)


class TakeSource(Source[T]):
    """
    stops its upstream right after the last wanted element, on both paths,
    so element ``count + 1`` is never produced upstream.
    """

    def __init__(self, source: Source[T], count: int):
        self._source = source
        self._count = count

    def __iter__(self) -> Iterator[T]:
        takes_left = self._count
        if takes_left <= 0:
            return
        for value in self._source:
            yield value
            takes_left -= 1
            if takes_left <= 0:
                return

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        takes_left = self._count
        if takes_left <= 0:
            return True
        keep_going = True

        def visit(value):
            nonlocal takes_left, keep_going
            takes_left -= 1
            keep_going = iteratee(value)
            return keep_going and takes_left > 0

        iterate_over(self._source, visit)
        return keep_going


class TakeWhileSource(Source[T]):
    def __init__(self, source: Source[T], predicate: Predicate[T]):
        self._source = source
        self._predicate = predicate

    def __iter__(self) -> Iterator[T]:
        for value in self._source:
            if not self._predicate(value):
                return
            yield value

    def for_each(self, iteratee: Iteratee[T]) -> bool:
        keep_going = True

        def visit(value):
            nonlocal keep_going
            if not self._predicate(value):
                return False
            keep_going = iteratee(value)
            return keep_going

        iterate_over(self._source, visit)
        return keep_going
