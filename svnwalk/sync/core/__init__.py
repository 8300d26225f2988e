"""Core abstractions for svnwalk.

This module contains the node and accessor base classes and the walker
that drives them.
"""

from ..._common.node import RemoteNode, SvnNode, DIRECTORY_KIND, FILE_KIND
from .accessor import NodeAccessor
from .walker import TreeWalker

__all__ = [
    "RemoteNode",
    "SvnNode",
    "DIRECTORY_KIND",
    "FILE_KIND",
    "NodeAccessor",
    "TreeWalker",
]
