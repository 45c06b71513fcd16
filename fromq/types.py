from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Sequence, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')
R = TypeVar('R')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]

# push-mode callback: returning false stops the traversal
Iteratee = Callable[[T], bool]

JoinPredicate = Callable[[T, U], bool]
ZipSelector = Callable[[T, U], V]

# anything from_() accepts: an indexable sequence or any iterable
Queryable = Union[Sequence[T], Iterable[T]]

# anything numpy.random.default_rng() accepts
RandomState = Any

ASCENDING = 'asc'
DESCENDING = 'desc'
