from __future__ import annotations

from .types import *
from .sources import Source, OrderBySource

# --- core functionality ---
from .extensions.core import _CoreOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.zip import ZipAccessor
from .extensions.utility import UtilityAccessor
from .extensions.stats import StatsAccessor
from .extensions.terminal import TerminalAccessor


# --- main query class ---

class Query(_CoreOperations[T]):
    """
    a lazy, composable query over a sequence.

    a query wraps exactly one pipeline stage and never changes it: every
    operator returns a new query around a new stage, sharing the upstream
    stages read-only. nothing runs until the query is iterated or a
    terminal operator under ``.to`` / ``.stats`` is called.
    """

    def __init__(self, source: Source[T]):
        self._source = source
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.zip = ZipAccessor(self)
        self.util = UtilityAccessor(self)
        self.stats = StatsAccessor(self)
        self.to = TerminalAccessor(self)

    @property
    def source(self) -> Source[T]:
        """the pipeline stage this query wraps"""
        return self._source

    def __iter__(self) -> Iterator[T]:
        return iter(self._source)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({type(self._source).__name__})"


# --- ordered query class ---

class OrderedQuery(Query[T]):
    """a sorted query. then_by adds key levels to the same sort instead of sorting again."""

    def __init__(self, source: OrderBySource[T]):
        super().__init__(source)

    def then_by(self, key_selector: KeySelector[T, K], direction: str = ASCENDING) -> 'OrderedQuery[T]':
        """secondary sort; ties on every earlier key are broken by this one"""
        descending = _is_descending(direction)
        return OrderedQuery(self._source.then_by(key_selector, descending))

    def then_by_descending(self, key_selector: KeySelector[T, K]) -> 'OrderedQuery[T]':
        """secondary sort descending"""
        return OrderedQuery(self._source.then_by(key_selector, True))


def _is_descending(direction: str) -> bool:
    if direction not in (ASCENDING, DESCENDING):
        raise ValueError(f"sort direction must be '{ASCENDING}' or '{DESCENDING}', got {direction!r}")
    return direction == DESCENDING
