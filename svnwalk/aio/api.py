"""High-level async API for svnwalk.

Async counterparts of svnwalk.sync.api with the same contracts.
"""

import logging
from typing import List, Optional

from .._common.errors import SKIP_SUBTREE
from .._common.node import RemoteNode
from .core.accessor import AsyncNodeAccessor
from .core.walker import AsyncTreeWalker, AsyncVisitor
from .accessors.svn import AsyncSvnAccessor


logger = logging.getLogger(__name__)


async def walk_async(root: str,
                     visitor: AsyncVisitor,
                     accessor: Optional[AsyncNodeAccessor] = None) -> Optional[Exception]:
    """Walk the remote tree rooted at root, calling visitor for every node.

    Args:
        root: URL or path of the root node
        visitor: Called as visitor(path, node, err); may be async
        accessor: AsyncNodeAccessor to use (defaults to AsyncSvnAccessor())

    Returns:
        None, or the exception the visitor returned to stop the walk

    Example:
        >>> async def show(path, node, err):
        ...     print(path)
        >>> await walk_async("https://svn.example.com/repo/trunk", show)
    """
    return await AsyncTreeWalker(accessor or AsyncSvnAccessor()).walk(root, visitor)


async def stat_async(url: str, accessor: Optional[AsyncNodeAccessor] = None) -> RemoteNode:
    """Resolve a single node.

    Raises:
        AccessorError: If the accessor could not resolve the node
    """
    return await (accessor or AsyncSvnAccessor()).stat(url)


async def get_tree_paths_async(root: str,
                               accessor: Optional[AsyncNodeAccessor] = None,
                               skip_errors: bool = True) -> List[str]:
    """Collect the path of every node under root, in walk order.

    See svnwalk.sync.api.get_tree_paths.
    """
    paths: List[str] = []

    def collect(path, node, err):
        if err is not None:
            if not skip_errors:
                return err
            logger.info("Skipping '%s': %s", path, err)
            return SKIP_SUBTREE
        paths.append(path)
        return None

    result = await walk_async(root, collect, accessor)
    if result is not None:
        raise result
    return paths
