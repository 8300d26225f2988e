"""Test fixtures for svnwalk consumers.

In-memory accessors that stand in for a real repository, so walk logic can
be tested without spawning svn.

Example:
    accessor = InMemoryAccessor({
        "root": {
            "x": None,               # file
            "y": {"z": None},        # directory with one file
        }
    })
    walk("root", visitor, accessor)
    assert accessor.stat_calls == ["root", "root/x", "root/y", "root/y/z"]
"""

from typing import Any, Dict, List, Mapping, Optional

from .._common.errors import AccessorError, NodeNotDirectoryError, StatFailedError
from .._common.node import DIRECTORY_KIND, FILE_KIND, SvnNode
from .._common.paths import join
from ..aio.core.accessor import AsyncNodeAccessor
from ..sync.core.accessor import NodeAccessor


class InMemoryAccessor(NodeAccessor):
    """NodeAccessor over a nested dict.

    Args:
        tree: Mapping of root path to its contents. A dict value is a
            directory (children in insertion order); any other value is a
            file.
        stat_errors: path -> error raised by stat(path)
        children_errors: path -> error raised by children() for that path

    Attributes:
        stat_calls: Paths passed to stat(), in call order
        children_calls: Identifiers passed to children(), in call order
    """

    def __init__(self,
                 tree: Mapping[str, Any],
                 stat_errors: Optional[Dict[str, AccessorError]] = None,
                 children_errors: Optional[Dict[str, AccessorError]] = None):
        self._entries: Dict[str, Any] = {}
        for root, contents in tree.items():
            self._index(root, contents)
        self.stat_errors = dict(stat_errors or {})
        self.children_errors = dict(children_errors or {})
        self.stat_calls: List[str] = []
        self.children_calls: List[str] = []

    def _index(self, path: str, contents: Any) -> None:
        self._entries[path] = contents
        if isinstance(contents, Mapping):
            for name, child in contents.items():
                self._index(join(path, name), child)

    def stat(self, path: str) -> SvnNode:
        self.stat_calls.append(path)
        if path in self.stat_errors:
            raise self.stat_errors[path]
        if path not in self._entries:
            raise StatFailedError(f"{path} does not exist", url=path)
        kind = DIRECTORY_KIND if isinstance(self._entries[path], Mapping) else FILE_KIND
        return SvnNode(url=path, name=path.rsplit("/", 1)[-1], kind=kind)

    def children(self, node) -> List[str]:
        path = node.identifier()
        self.children_calls.append(path)
        if not node.is_dir():
            raise NodeNotDirectoryError(
                "sub directories can't be found for non directory node type",
                url=path,
            )
        if path in self.children_errors:
            raise self.children_errors[path]
        return list(self._entries[path])


class AsyncInMemoryAccessor(AsyncNodeAccessor):
    """Async wrapper around InMemoryAccessor with the same arguments."""

    def __init__(self, tree: Mapping[str, Any], **kwargs):
        self.sync = InMemoryAccessor(tree, **kwargs)

    @property
    def stat_calls(self) -> List[str]:
        return self.sync.stat_calls

    @property
    def children_calls(self) -> List[str]:
        return self.sync.children_calls

    async def stat(self, path: str) -> SvnNode:
        return self.sync.stat(path)

    async def children(self, node) -> List[str]:
        return self.sync.children(node)
