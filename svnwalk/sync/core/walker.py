"""Depth-first tree walker for svnwalk.

The walker visits the root, then each directory's children in listing order,
fully finishing one subtree before the next sibling. Nodes are fetched
lazily: one stat per node, one listing per directory.
"""

import logging
from typing import Callable, Optional

from ..._common.errors import AccessorError, SkipSubtree
from ..._common.paths import clean, join
from ..._common.node import RemoteNode
from .accessor import NodeAccessor


logger = logging.getLogger(__name__)

Visitor = Callable[[str, Optional[RemoteNode], Optional[Exception]], Optional[Exception]]


class TreeWalker:
    """Walks a remote tree through a NodeAccessor, calling a visitor per node.

    The visitor is called exactly once for every node the walk reaches,
    including nodes whose stat or listing failed. Its return value steers the
    walk:

    - None: keep going
    - a SkipSubtree instance: don't descend into this node
    - any other exception instance: stop and return it from walk()
    """

    def __init__(self, accessor: NodeAccessor):
        """Initialize walker with an accessor.

        Args:
            accessor: NodeAccessor for resolving nodes and listings
        """
        self.accessor = accessor

    def walk(self, root: str, visitor: Visitor) -> Optional[Exception]:
        """Walk the tree rooted at root.

        Args:
            root: URL or path of the root node
            visitor: Called as visitor(path, node, err) for every node

        Returns:
            None if the walk completed (or was skipped at the root),
            otherwise the exception the visitor returned to stop it
        """
        root = clean(root)
        try:
            node = self.accessor.stat(root)
        except AccessorError as err:
            logger.debug("Stat failed for root '%s': %s", root, err)
            result = visitor(root, None, err)
        else:
            result = self._walk(root, node, visitor)

        if isinstance(result, SkipSubtree):
            return None
        return result

    def _walk(self, path: str, node: RemoteNode, visitor: Visitor) -> Optional[Exception]:
        """Recursively descend path, calling visitor."""
        if not node.is_dir():
            return visitor(path, node, None)

        names = []
        child_err = None
        try:
            names = self.accessor.children(node)
        except AccessorError as err:
            logger.debug("Listing failed for '%s': %s", path, err)
            child_err = err

        visit_err = visitor(path, node, child_err)
        # A failed listing can't be descended; a non-None verdict means the
        # visitor wants to skip or stop. Either way the verdict is returned.
        if child_err is not None or visit_err is not None:
            return visit_err

        for name in names:
            child_path = join(path, name)
            try:
                child = self.accessor.stat(child_path)
            except AccessorError as err:
                logger.debug("Stat failed for '%s': %s", child_path, err)
                result = visitor(child_path, None, err)
                if result is not None and not isinstance(result, SkipSubtree):
                    return result
                continue

            result = self._walk(child_path, child, visitor)
            if result is None:
                continue
            if isinstance(result, SkipSubtree):
                logger.debug("Skipped subtree '%s'", child_path)
                continue
            logger.debug("Walk stopped at '%s': %r", child_path, result)
            return result

        return None

