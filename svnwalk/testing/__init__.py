"""Testing utilities for svnwalk consumers."""

from .fixtures import InMemoryAccessor, AsyncInMemoryAccessor

__all__ = ['InMemoryAccessor', 'AsyncInMemoryAccessor']
