"""High-level synchronous API for svnwalk.

Simple functions for common operations. Each takes an optional accessor;
when none is given a fresh SvnAccessor is built for the call, so there is no
shared module-level state to swap out in tests.
"""

import logging
from typing import List, Optional

from .._common.errors import SKIP_SUBTREE
from .._common.node import RemoteNode
from .core.accessor import NodeAccessor
from .core.walker import TreeWalker, Visitor
from .accessors.svn import SvnAccessor


logger = logging.getLogger(__name__)


def walk(root: str,
         visitor: Visitor,
         accessor: Optional[NodeAccessor] = None) -> Optional[Exception]:
    """Walk the remote tree rooted at root, calling visitor for every node.

    Args:
        root: URL or path of the root node
        visitor: Called as visitor(path, node, err)
        accessor: NodeAccessor to use (defaults to SvnAccessor())

    Returns:
        None, or the exception the visitor returned to stop the walk

    Example:
        >>> def show(path, node, err):
        ...     if err is not None:
        ...         return err
        ...     print(path)
        >>> walk("https://svn.example.com/repo/trunk", show)
    """
    return TreeWalker(accessor or SvnAccessor()).walk(root, visitor)


def stat(url: str, accessor: Optional[NodeAccessor] = None) -> RemoteNode:
    """Resolve a single node.

    Raises:
        AccessorError: If the accessor could not resolve the node
    """
    return (accessor or SvnAccessor()).stat(url)


def get_tree_paths(root: str,
                   accessor: Optional[NodeAccessor] = None,
                   skip_errors: bool = True) -> List[str]:
    """Collect the path of every node under root, in walk order.

    Args:
        root: URL or path of the root node
        accessor: NodeAccessor to use (defaults to SvnAccessor())
        skip_errors: If True, nodes whose stat or listing failed are left
            out and their subtrees skipped. If False, the first accessor
            error is raised.

    Returns:
        List of paths in depth-first order

    Raises:
        AccessorError: On the first failure, when skip_errors is False
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

    result = walk(root, collect, accessor)
    if result is not None:
        raise result
    return paths
