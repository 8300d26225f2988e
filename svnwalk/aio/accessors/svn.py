"""Async Subversion accessor.

Runs `svn info` / `svn ls` with asyncio subprocesses. Every call is bounded by
asyncio.wait_for; when it times out or is cancelled, the svn process belonging
to that call is killed and reaped before the error propagates.
"""

import asyncio
import logging
from typing import List, Optional

from ..._common.config import AccessorConfig, resolve_config
from ..._common.errors import (
    AccessForbiddenError,
    AccessorTimeoutError,
    NodeNotDirectoryError,
    StatFailedError,
)
from ..._common.node import RemoteNode, SvnNode
from ..._common.paths import clean
from ..._common.svn_output import (
    is_access_forbidden,
    node_fields_from_info,
    parse_info,
    parse_ls,
)
from ..core.accessor import AsyncNodeAccessor


logger = logging.getLogger(__name__)


class AsyncSvnAccessor(AsyncNodeAccessor):
    """AsyncNodeAccessor backed by the `svn` command-line client."""

    def __init__(self, config: Optional[AccessorConfig] = None):
        """Initialize async svn accessor.

        Args:
            config: How to invoke svn (defaults to AccessorConfig())

        Raises:
            ValueError: If the configuration is invalid
        """
        self.config = resolve_config(config)

    async def stat(self, path: str) -> SvnNode:
        """Resolve a node with `svn info`."""
        url = clean(path)
        stdout = await self._run("info", url)
        fields = node_fields_from_info(parse_info(stdout))
        if "kind" not in fields:
            raise StatFailedError(f"svn info returned no node kind for {url}", url=url)
        fields.setdefault("url", url)
        fields["path"] = url
        return SvnNode(**fields)

    async def children(self, node: RemoteNode) -> List[str]:
        """List a directory with `svn ls` on the path it was stat'ed with."""
        if not node.is_dir():
            raise NodeNotDirectoryError(
                "sub directories can't be found for non directory node type",
                url=node.identifier(),
            )
        return parse_ls(await self._run("ls", node.identifier()))

    async def _run(self, subcommand: str, url: str) -> str:
        """Run one svn subcommand and return its stdout.

        Raises:
            AccessorTimeoutError: If the call exceeds config.timeout
            AccessForbiddenError: If svn reports E175013
            StatFailedError: For any other failure
            asyncio.CancelledError: If the awaiting task is cancelled
        """
        cmd = self.config.build_command(subcommand, url)
        logger.debug("Running %s", cmd)

        try:
            proc = await asyncio.create_subprocess_exec(
                *cmd,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=self.config.build_env(),
            )
        except OSError as e:
            raise StatFailedError(
                f"Failed to run svn {subcommand}: {e}", url=url
            ) from e

        try:
            stdout, stderr = await asyncio.wait_for(
                proc.communicate(), timeout=self.config.timeout
            )
        except asyncio.TimeoutError:
            await self._kill(proc)
            raise AccessorTimeoutError(
                f"svn {subcommand} command timed out after {self.config.timeout}s",
                url=url,
            ) from None
        except asyncio.CancelledError:
            await self._kill(proc)
            raise

        out = stdout.decode(errors="replace")
        err = stderr.decode(errors="replace")

        if proc.returncode != 0:
            if is_access_forbidden(err):
                raise AccessForbiddenError(
                    "access to given svn url is forbidden", url=url
                )
            logger.warning(
                "svn %s failed for '%s' (exit %s): %s",
                subcommand, url, proc.returncode, err.strip(),
            )
            raise StatFailedError(
                f"svn {subcommand} failed with exit code {proc.returncode}",
                url=url,
                returncode=proc.returncode,
                stderr=err,
            )

        return out

    @staticmethod
    async def _kill(proc) -> None:
        """Kill a still-running svn process and reap it."""
        if proc.returncode is None:
            try:
                proc.kill()
            except ProcessLookupError:
                pass
        await proc.wait()
