"""Subversion accessor for svnwalk.

Resolves nodes with `svn info` and lists directories with `svn ls`. Each call
is one subprocess with its own timeout; nothing is cached or retried.
"""

import logging
import subprocess
from typing import List, Optional

from ..._common.config import AccessorConfig, resolve_config
from ..._common.errors import (
    AccessForbiddenError,
    AccessorTimeoutError,
    NodeNotDirectoryError,
    StatFailedError,
)
from ..._common.paths import clean
from ..._common.svn_output import (
    is_access_forbidden,
    node_fields_from_info,
    parse_info,
    parse_ls,
)
from ..._common.node import RemoteNode, SvnNode
from ..core.accessor import NodeAccessor


logger = logging.getLogger(__name__)


class SvnAccessor(NodeAccessor):
    """NodeAccessor backed by the `svn` command-line client."""

    def __init__(self, config: Optional[AccessorConfig] = None):
        """Initialize svn accessor.

        Args:
            config: How to invoke svn (defaults to AccessorConfig())

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = resolve_config(config)

    def stat(self, path: str) -> SvnNode:
        """Resolve a node with `svn info`."""
        url = clean(path)
        stdout = self._run("info", url)
        fields = node_fields_from_info(parse_info(stdout))
        if "kind" not in fields:
            raise StatFailedError(f"svn info returned no node kind for {url}", url=url)
        fields.setdefault("url", url)
        fields["path"] = url
        return SvnNode(**fields)

    def children(self, node: RemoteNode) -> List[str]:
        """List a directory with `svn ls` on the path it was stat'ed with."""
        if not node.is_dir():
            raise NodeNotDirectoryError(
                "sub directories can't be found for non directory node type",
                url=node.identifier(),
            )
        return parse_ls(self._run("ls", node.identifier()))

    def _run(self, subcommand: str, url: str) -> str:
        """Run one svn subcommand and return its stdout.

        Raises:
            AccessorTimeoutError: If the call exceeds config.timeout
            AccessForbiddenError: If svn reports E175013
            StatFailedError: For any other failure
        """
        cmd = self.config.build_command(subcommand, url)
        logger.debug("Running %s", cmd)

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self.config.timeout,
                env=self.config.build_env(),
            )
        except subprocess.TimeoutExpired:
            raise AccessorTimeoutError(
                f"svn {subcommand} command timed out after {self.config.timeout}s",
                url=url,
            ) from None
        except OSError as e:
            raise StatFailedError(
                f"Failed to run svn {subcommand}: {e}", url=url
            ) from e

        if result.returncode != 0:
            if is_access_forbidden(result.stderr):
                raise AccessForbiddenError(
                    "access to given svn url is forbidden", url=url
                )
            logger.warning(
                "svn %s failed for '%s' (exit %s): %s",
                subcommand, url, result.returncode, result.stderr.strip(),
            )
            raise StatFailedError(
                f"svn {subcommand} failed with exit code {result.returncode}",
                url=url,
                returncode=result.returncode,
                stderr=result.stderr,
            )

        return result.stdout
