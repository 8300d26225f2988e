"""Reusable visitor policies.

The walker never decides on its own whether an accessor error is fatal;
that is the visitor's job. These wrappers package the common decisions so
callers don't have to rewrite them.

Both wrappers work with sync and async visitors: they return whatever the
wrapped visitor returns (a coroutine, for async ones), and the async walker
awaits it.
"""

import functools
import logging
from typing import Any, Callable, List, Optional, Tuple

from .errors import SKIP_SUBTREE, AccessForbiddenError


logger = logging.getLogger(__name__)

Visitor = Callable[[str, Any, Optional[Exception]], Any]


def skip_forbidden(visitor: Visitor) -> Visitor:
    """Wrap a visitor so forbidden nodes are logged and skipped.

    The wrapped visitor is not called for AccessForbiddenError; every other
    call, including other errors, is delegated unchanged.
    """

    @functools.wraps(visitor)
    def wrapper(path, node, err):
        if isinstance(err, AccessForbiddenError):
            logger.warning("Skipping inaccessible path '%s': %s", path, err)
            return SKIP_SUBTREE
        return visitor(path, node, err)

    return wrapper


class CollectErrorsVisitor:
    """Visitor that records every error and keeps walking.

    Args:
        visitor: Optional visitor called for error-free visits. Its return
            value is passed back to the walker.

    Attributes:
        visited: Every path the walker reported, in order
        errors: (path, error) pairs for every visit that carried an error
    """

    def __init__(self, visitor: Optional[Visitor] = None):
        self.visitor = visitor
        self.visited: List[str] = []
        self.errors: List[Tuple[str, Exception]] = []

    def __call__(self, path, node, err):
        self.visited.append(path)
        if err is not None:
            logger.debug("Collected error at '%s': %s", path, err)
            self.errors.append((path, err))
            return None
        if self.visitor is not None:
            return self.visitor(path, node, err)
        return None

    def get_statistics(self) -> dict:
        """Summarize what was collected."""
        return {
            'visited': len(self.visited),
            'total_errors': len(self.errors),
            'forbidden': sum(1 for _, e in self.errors
                             if isinstance(e, AccessForbiddenError)),
            'errors': list(self.errors),
        }
