"""svnwalk - walk remote Subversion trees with a visitor callback.

svnwalk enumerates a repository reachable only through the `svn` client,
calling a visitor once per node, in the style of os.walk / filepath.Walk.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous:
    from svnwalk.sync import walk

Asynchronous:
    from svnwalk.aio import walk_async
━━━━━━━━━━━━━━━━━━━━━━━━━━

Errors and sentinels shared by both live at the top level.
"""

__version__ = "0.1.0"

from . import sync
from . import aio

from ._common.errors import (
    SvnWalkError,
    AccessorError,
    StatFailedError,
    AccessForbiddenError,
    AccessorTimeoutError,
    NodeNotDirectoryError,
    SkipSubtree,
    StopWalk,
    SKIP_SUBTREE,
    STOP_WALK,
)
from ._common.config import AccessorConfig
from ._common.node import RemoteNode, SvnNode
from ._common.paths import join, clean
from ._common.visitors import skip_forbidden, CollectErrorsVisitor

__all__ = [
    "__version__",
    "sync",
    "aio",
    "SvnWalkError",
    "AccessorError",
    "StatFailedError",
    "AccessForbiddenError",
    "AccessorTimeoutError",
    "NodeNotDirectoryError",
    "SkipSubtree",
    "StopWalk",
    "SKIP_SUBTREE",
    "STOP_WALK",
    "AccessorConfig",
    "RemoteNode",
    "SvnNode",
    "join",
    "clean",
    "skip_forbidden",
    "CollectErrorsVisitor",
]
