from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..sources import array_of, iterate_over, source_of
from ..types import *

if typing.TYPE_CHECKING:
    from ..query import Query

_MISSING = object()


class TerminalAccessor(Generic[T]):
    """
    terminal reducers. each one runs the pipeline through its push path and
    stops the upstream as soon as the answer is known.
    """
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def _push(self, iteratee: Iteratee[T]) -> bool:
        return iterate_over(self._query._source, iteratee)

    # --- conversions ---

    def list(self) -> List[T]:
        """convert to list"""
        return array_of(self._query._source)

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self.list())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary; later keys overwrite earlier ones"""
        val_sel = value_selector if value_selector else lambda item: item
        result = {}
        def put(item):
            result[key_selector(item)] = val_sel(item)
            return True
        self._push(put)
        return result

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    # --- counting and membership ---

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        n = 0
        def tally(item):
            nonlocal n
            if predicate is None or predicate(item):
                n += 1
            return True
        self._push(tally)
        return n

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition; without one, whether there are any elements"""
        found_it = False
        def check(item):
            nonlocal found_it
            found_it = predicate is None or bool(predicate(item))
            return not found_it
        self._push(check)
        return found_it

    def all(self, predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return self._push(lambda item: bool(predicate(item)))

    def any_in(self, values: Queryable[T]) -> bool:
        """check if any element is one of values"""
        value_set = set(source_of(values))
        return self.any(lambda item: item in value_set)

    def all_in(self, values: Queryable[T]) -> bool:
        """check if every element is one of values"""
        value_set = set(source_of(values))
        return self.all(lambda item: item in value_set)

    def any_is(self, value: T) -> bool:
        """check if value occurs in the sequence. nan matches nan."""
        if value != value:
            return self.any(lambda item: item != item)
        return self.any(lambda item: item == value)

    # --- element access ---

    def first(self, predicate: Optional[Predicate[T]] = None, default: Optional[T] = None) -> Optional[T]:
        """get first (matching) element, or default"""
        result = default
        def check(item):
            nonlocal result
            if predicate is None or predicate(item):
                result = item
                return False
            return True
        self._push(check)
        return result

    def last(self, predicate: Optional[Predicate[T]] = None, default: Optional[T] = None) -> Optional[T]:
        """get last (matching) element, or default"""
        result = default
        def check(item):
            nonlocal result
            if predicate is None or predicate(item):
                result = item
            return True
        self._push(check)
        return result

    def single(self, predicate: Optional[Predicate[T]] = None, default: Optional[T] = None) -> Optional[T]:
        """get the only (matching) element, or default if none; erroring if more than one"""
        matches = 0
        result = default
        def check(item):
            nonlocal matches, result
            if predicate is None or predicate(item):
                matches += 1
                if matches > 1:
                    raise ValueError("sequence contains more than one matching element")
                result = item
            return True
        self._push(check)
        return result

    def element_at(self, position: int, default: Optional[T] = None) -> Optional[T]:
        """get the element at a zero-based position, or default if the sequence is shorter"""
        if position < 0:
            return default
        index = 0
        result = default
        def check(item):
            nonlocal index, result
            if index == position:
                result = item
                return False
            index += 1
            return True
        self._push(check)
        return result

    # --- folds ---

    def aggregate(self, accumulator: Accumulator[U, T], seed: U = _MISSING) -> U:
        """
        applies accumulator function over sequence. without a seed the first
        element is the seed, and an empty sequence is an error.
        """
        acc = seed
        def fold(item):
            nonlocal acc
            acc = item if acc is _MISSING else accumulator(acc, item)
            return True
        self._push(fold)
        if acc is _MISSING:
            raise ValueError("cannot aggregate empty sequence without seed")
        return acc

    def for_each(self, action: Callable[[T], Any]) -> None:
        """performs action on each element. this is an EAGER operation."""
        def visit(item):
            action(item)
            return True
        self._push(visit)

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements into lists by key, keys in order of first appearance"""
        groups: Dict[K, List[T]] = {}
        def add(item):
            groups.setdefault(key_selector(item), []).append(item)
            return True
        self._push(add)
        return groups

    def count_by(self, key_selector: KeySelector[T, K]) -> Dict[K, int]:
        """count elements per key, keys in order of first appearance"""
        counts: Dict[K, int] = {}
        def add(item):
            key = key_selector(item)
            counts[key] = counts.get(key, 0) + 1
            return True
        self._push(add)
        return counts
