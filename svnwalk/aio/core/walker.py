"""Async depth-first tree walker.

Identical semantics to the sync TreeWalker. The walk is still strictly
sequential: each accessor call is awaited before the next one starts, so a
subtree is always finished before its next sibling.
"""

import inspect
import logging
from typing import Any, Callable, Optional

from ..._common.errors import AccessorError, SkipSubtree
from ..._common.node import RemoteNode
from ..._common.paths import clean, join
from .accessor import AsyncNodeAccessor


logger = logging.getLogger(__name__)

# Plain function or coroutine function
AsyncVisitor = Callable[[str, Optional[RemoteNode], Optional[Exception]], Any]


class AsyncTreeWalker:
    """Walks a remote tree through an AsyncNodeAccessor.

    The visitor may be a regular function or a coroutine function; if it
    returns an awaitable, the result is awaited.
    """

    def __init__(self, accessor: AsyncNodeAccessor):
        """Initialize walker with an accessor.

        Args:
            accessor: AsyncNodeAccessor for resolving nodes and listings
        """
        self.accessor = accessor

    async def walk(self, root: str, visitor: AsyncVisitor) -> Optional[Exception]:
        """Walk the tree rooted at root.

        Returns:
            None if the walk completed (or was skipped at the root),
            otherwise the exception the visitor returned to stop it
        """
        root = clean(root)
        try:
            node = await self.accessor.stat(root)
        except AccessorError as err:
            logger.debug("Stat failed for root '%s': %s", root, err)
            result = await self._visit(visitor, root, None, err)
        else:
            result = await self._walk(root, node, visitor)

        if isinstance(result, SkipSubtree):
            return None
        return result

    async def _visit(self, visitor, path, node, err):
        result = visitor(path, node, err)
        if inspect.isawaitable(result):
            result = await result
        return result

    async def _walk(self, path: str, node: RemoteNode, visitor: AsyncVisitor) -> Optional[Exception]:
        """Recursively descend path, calling visitor."""
        if not node.is_dir():
            return await self._visit(visitor, path, node, None)

        names = []
        child_err = None
        try:
            names = await self.accessor.children(node)
        except AccessorError as err:
            logger.debug("Listing failed for '%s': %s", path, err)
            child_err = err

        visit_err = await self._visit(visitor, path, node, child_err)
        if child_err is not None or visit_err is not None:
            return visit_err

        for name in names:
            child_path = join(path, name)
            try:
                child = await self.accessor.stat(child_path)
            except AccessorError as err:
                logger.debug("Stat failed for '%s': %s", child_path, err)
                result = await self._visit(visitor, child_path, None, err)
                if result is not None and not isinstance(result, SkipSubtree):
                    return result
                continue

            result = await self._walk(child_path, child, visitor)
            if result is None:
                continue
            if isinstance(result, SkipSubtree):
                logger.debug("Skipped subtree '%s'", child_path)
                continue
            logger.debug("Walk stopped at '%s': %r", child_path, result)
            return result

        return None
