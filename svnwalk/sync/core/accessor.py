"""NodeAccessor abstraction for svnwalk.

The accessor is the only thing the walker knows about the remote system.
It is passed to the walker explicitly, so tests can hand in a fake and never
spawn a process.
"""

from abc import ABC, abstractmethod
from typing import List

from ..._common.node import RemoteNode


class NodeAccessor(ABC):
    """Resolves node metadata and directory listings from a remote tree.

    Implementations report failures by raising AccessorError subclasses:

    - StatFailedError for generic failures
    - AccessForbiddenError when the remote denies access
    - AccessorTimeoutError when a single call exceeds its bound
    - NodeNotDirectoryError when children() is called on a non-directory

    The walker passes those to the visitor. Any other exception is treated
    as a bug and propagates out of the walk.
    """

    @abstractmethod
    def stat(self, path: str) -> RemoteNode:
        """Resolve one node's identity and kind.

        Args:
            path: URL or path of the node

        Returns:
            A fresh, immutable node
        """
        pass

    @abstractmethod
    def children(self, node: RemoteNode) -> List[str]:
        """List the immediate child names of a directory node.

        Names carry no trailing separator. They are returned in the order the
        underlying listing produced them; the walker keeps that order.

        Args:
            node: A node previously returned by stat()

        Returns:
            Child names

        Raises:
            NodeNotDirectoryError: If node is not a directory
        """
        pass
