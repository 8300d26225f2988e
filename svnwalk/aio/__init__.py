"""Asynchronous implementation of svnwalk.

Native async/await versions of the walker and the svn accessor. The walk
itself stays sequential; async only means the event loop is free while an
svn call is running, and that each call can be cancelled on its own.
"""

# Core abstractions
from .core import (
    AsyncNodeAccessor,
    AsyncTreeWalker,
)

# Accessors
from .accessors import AsyncSvnAccessor

# High-level API
from .api import (
    walk_async,
    stat_async,
    get_tree_paths_async,
)

__all__ = [
    # Core abstractions
    'AsyncNodeAccessor',
    'AsyncTreeWalker',
    # Accessors
    'AsyncSvnAccessor',
    # High-level API
    'walk_async',
    'stat_async',
    'get_tree_paths_async',
]
