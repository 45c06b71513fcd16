from __future__ import annotations
from .base import Source, iterate_over
from ..types import *


class ZipSource(Source[V]):
    """
    walks two sources in lockstep and stops as soon as either runs out.
    the left side is pushed, the right side is pulled one element at a time.
    """

    def __init__(self, left_source: Source[T], right_source: Source[U], selector: ZipSelector[T, U, V]):
        self._left_source = left_source
        self._right_source = right_source
        self._selector = selector

    def __iter__(self) -> Iterator[V]:
        sentinel = object()
        right = iter(self._right_source)
        for value in self._left_source:
            other = next(right, sentinel)
            if other is sentinel:
                return
            yield self._selector(value, other)

    def for_each(self, iteratee: Iteratee[V]) -> bool:
        sentinel = object()
        right = iter(self._right_source)
        keep_going = True

        def visit(value):
            nonlocal keep_going
            other = next(right, sentinel)
            if other is sentinel:
                return False
            keep_going = iteratee(self._selector(value, other))
            return keep_going

        iterate_over(self._left_source, visit)
        return keep_going
