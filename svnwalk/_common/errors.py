"""Error taxonomy for svnwalk.

Accessors raise subclasses of AccessorError. The walker catches exactly those
and hands them to the visitor untouched; everything else propagates.

SkipSubtree and StopWalk are not failures. Visitors *return* them to steer
the walk:

    def visitor(path, node, err):
        if isinstance(err, AccessForbiddenError):
            return SKIP_SUBTREE
        if err is not None:
            return err
        return None
"""

from typing import Optional


class SvnWalkError(Exception):
    """Base class for every svnwalk error and sentinel."""


class AccessorError(SvnWalkError):
    """A node accessor could not resolve a node or list its children.

    Attributes:
        url: The path/URL the accessor was working on, if known
    """

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class StatFailedError(AccessorError):
    """Generic accessor failure: process error, network error, bad output."""

    def __init__(self,
                 message: str,
                 url: Optional[str] = None,
                 returncode: Optional[int] = None,
                 stderr: str = ""):
        super().__init__(message, url)
        self.returncode = returncode
        self.stderr = stderr


class AccessForbiddenError(AccessorError, PermissionError):
    """The remote explicitly denied access to the URL."""


class AccessorTimeoutError(AccessorError, TimeoutError):
    """A single accessor call exceeded its time bound."""


class NodeNotDirectoryError(AccessorError, NotADirectoryError):
    """Children were requested for a node that is not a directory."""


class SkipSubtree(SvnWalkError):
    """Returned by a visitor: do not descend into this node."""


class StopWalk(SvnWalkError):
    """Returned by a visitor: stop the walk and hand this back to the caller."""


SKIP_SUBTREE = SkipSubtree("skip this directory")
STOP_WALK = StopWalk("stop walking")


__all__ = [
    'SvnWalkError',
    'AccessorError',
    'StatFailedError',
    'AccessForbiddenError',
    'AccessorTimeoutError',
    'NodeNotDirectoryError',
    'SkipSubtree',
    'StopWalk',
    'SKIP_SUBTREE',
    'STOP_WALK',
]
