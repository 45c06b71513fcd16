from __future__ import annotations
import typing
import math
from ..sources import iterate_over
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

Number = Union[int, float]


class StatsAccessor(Generic[T]):
    """numeric folds. one push traversal each; nothing is materialized."""

    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def _values(self, selector: Optional[Selector[T, Number]]) -> Iterable[Number]:
        return self._query.select(selector) if selector else self._query

    def sum(self, selector: Optional[Selector[T, Number]] = None) -> Number:
        """calc sum; 0 for an empty sequence"""
        total = 0
        def add(value):
            nonlocal total
            total += value
            return True
        iterate_over(self._values(selector).source, add)
        return total

    def average(self, selector: Optional[Selector[T, Number]] = None) -> float:
        """calc average. an empty sequence gives math.nan rather than raising."""
        count, total = 0, 0
        def add(value):
            nonlocal count, total
            count += 1
            total += value
            return True
        iterate_over(self._values(selector).source, add)
        return total / count if count > 0 else math.nan
