"""Core async abstractions for svnwalk."""

from .accessor import AsyncNodeAccessor
from .walker import AsyncTreeWalker

__all__ = [
    "AsyncNodeAccessor",
    "AsyncTreeWalker",
]
