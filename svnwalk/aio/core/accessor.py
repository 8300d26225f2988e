"""Async node accessor abstraction.

Same contract as the sync NodeAccessor, with coroutine methods. Each call is
an independent awaitable, so cancelling one never touches calls that already
finished or have not started.
"""

from abc import ABC, abstractmethod
from typing import List

from ..._common.node import RemoteNode


class AsyncNodeAccessor(ABC):
    """Abstract base class for async node accessors.

    Failures are raised as AccessorError subclasses, exactly as for
    the sync NodeAccessor.
    """

    @abstractmethod
    async def stat(self, path: str) -> RemoteNode:
        """Resolve one node's identity and kind.

        Args:
            path: URL or path of the node

        Returns:
            A fresh, immutable node
        """
        pass

    @abstractmethod
    async def children(self, node: RemoteNode) -> List[str]:
        """List the immediate child names of a directory node.

        Raises:
            NodeNotDirectoryError: If node is not a directory
        """
        pass
