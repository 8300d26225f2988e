"""Synchronous implementation of svnwalk.

All components here operate in a blocking, synchronous manner: one svn
subprocess at a time, one node fully processed before the next.
"""

# Core components
from .._common.node import RemoteNode, SvnNode
from .core.accessor import NodeAccessor
from .core.walker import TreeWalker

# Accessors
from .accessors.svn import SvnAccessor

# High-level API
from .api import (
    walk,
    stat,
    get_tree_paths,
)

__all__ = [
    # Core
    'RemoteNode',
    'SvnNode',
    'NodeAccessor',
    'TreeWalker',
    # Accessors
    'SvnAccessor',
    # API
    'walk',
    'stat',
    'get_tree_paths',
]
