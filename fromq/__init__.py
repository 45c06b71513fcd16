r"""
   ___                   ___
  / _|_ __ ___  _ __ ___/ _ \
 | |_| '__/ _ \| '_ ` _ \ | | |
 |  _| | | (_) | | | | | | |_| |
 |_| |_|  \___/|_| |_| |_|\__\_\
"""

import logging

# expose the main classes
from .query import Query, OrderedQuery

# expose the factory functions
from .factories import (
    from_,
    from_range,
    repeat,
    empty,
    generate,
    query,
    Q
)

# expose the stage contract for custom sources
from .sources import (
    Source,
    WindowBuffer,
    iterate_over
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Query",
    "OrderedQuery",
    "from_",
    "from_range",
    "repeat",
    "empty",
    "generate",
    "query",
    "Q",
    "Source",
    "WindowBuffer",
    "iterate_over"
]
