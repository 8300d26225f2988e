"""Async node accessors for specific remote systems."""

from .svn import AsyncSvnAccessor

__all__ = [
    "AsyncSvnAccessor",
]
