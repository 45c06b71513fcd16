"""pipeline stages. each wraps one or two upstream stages and implements the Source contract."""

from .base import (
    Source,
    ArrayLikeSource,
    IterableSource,
    FactorySource,
    iterate_over,
    array_of,
    source_of
)
from .core import ConcatSource, WhereSource, SelectSource, SelectManySource, IntersperseSource
from .set import DistinctSource, WithoutSource
from .bounds import SkipSource, SkipLastSource, SkipWhileSource, TakeSource, TakeWhileSource
from .ordering import OrderBySource, SortKey
from .window import WindowBuffer, FatMapSource
from .zip import ZipSource
from .buffer import ThruSource, MemoSource

__all__ = [
    "Source",
    "ArrayLikeSource",
    "IterableSource",
    "FactorySource",
    "iterate_over",
    "array_of",
    "source_of",
    "ConcatSource",
    "WhereSource",
    "SelectSource",
    "SelectManySource",
    "IntersperseSource",
    "DistinctSource",
    "WithoutSource",
    "SkipSource",
    "SkipLastSource",
    "SkipWhileSource",
    "TakeSource",
    "TakeWhileSource",
    "OrderBySource",
    "SortKey",
    "WindowBuffer",
    "FatMapSource",
    "ZipSource",
    "ThruSource",
    "MemoSource"
]
