"""Node accessors for specific remote systems.

Accessors implement the NodeAccessor interface, which is all the walker
needs from a remote tree.
"""

from .svn import SvnAccessor

__all__ = [
    "SvnAccessor",
]
