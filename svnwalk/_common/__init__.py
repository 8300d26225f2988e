"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations: the error taxonomy, path helpers, accessor
configuration, node data types, svn output parsing and visitor policies.

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .errors import (
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
from .paths import join, clean
from .config import AccessorConfig, DEFAULT_TIMEOUT
from .node import RemoteNode, SvnNode, DIRECTORY_KIND, FILE_KIND
from .visitors import skip_forbidden, CollectErrorsVisitor

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
    'join',
    'clean',
    'AccessorConfig',
    'DEFAULT_TIMEOUT',
    'RemoteNode',
    'SvnNode',
    'DIRECTORY_KIND',
    'FILE_KIND',
    'skip_forbidden',
    'CollectErrorsVisitor',
]
