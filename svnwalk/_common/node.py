"""Node data types for svnwalk.

A node is a plain data container produced by one accessor stat call. It has
no parent reference and no link back to the accessor; listing children is the
accessor's job, not the node's.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, Optional


DIRECTORY_KIND = "directory"
FILE_KIND = "file"


class RemoteNode(ABC):
    """Abstract base class for entries of a remote tree.

    The walker only needs identifier() and is_dir(). Everything else is
    metadata for the visitor.
    """

    @abstractmethod
    def identifier(self) -> str:
        """Return the URL/path identifying this node."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the node."""
        pass

    @property
    @abstractmethod
    def kind(self) -> str:
        """Node kind, e.g. "directory" or "file"."""
        pass

    def is_dir(self) -> bool:
        """Check whether children may be listed for this node.

        kind == "directory" is the sole determinant.
        """
        return self.kind == DIRECTORY_KIND

    @abstractmethod
    def metadata(self) -> Dict[str, Any]:
        """Return the node's metadata as a dictionary."""
        pass

    def __str__(self) -> str:
        return self.identifier()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.identifier()!r}, kind={self.kind!r})"

    def __eq__(self, other: object) -> bool:
        """Nodes are equal if they have the same identifier."""
        if not isinstance(other, RemoteNode):
            return NotImplemented
        return self.identifier() == other.identifier()

    def __hash__(self) -> int:
        return hash(self.identifier())


@dataclass(frozen=True, eq=False, repr=False)
class SvnNode(RemoteNode):
    """Node resolved from `svn info` output.

    `path` is what the node was stat'ed with and `url` is the repository URL
    svn reported for it. For a working copy the two differ; the node is
    identified, and listed, by `path`. Everything except path, name and kind
    is an opaque metadata bag that the walk algorithm never looks at.
    """

    url: str
    name: str = ""
    kind: str = ""
    path: Optional[str] = None
    revision: Optional[str] = None
    last_changed_author: Optional[str] = None
    last_changed_revision: Optional[str] = None
    last_changed_date: Optional[str] = None
    repository_root: Optional[str] = None
    repository_uuid: Optional[str] = None

    def identifier(self) -> str:
        return self.path or self.url

    def metadata(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'url': self.url,
            'path': self.identifier(),
            'type': self.kind,
            'is_dir': self.is_dir(),
            'revision': self.revision,
            'last_changed_author': self.last_changed_author,
            'last_changed_revision': self.last_changed_revision,
            'last_changed_date': self.last_changed_date,
            'repository_root': self.repository_root,
            'repository_uuid': self.repository_uuid,
        }
