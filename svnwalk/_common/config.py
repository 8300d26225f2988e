"""Configuration for svn node accessors.

AccessorConfig describes how the `svn` client is invoked. It is shared by the
sync and aio accessors, so it must not do any I/O itself.
"""

import os
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple


DEFAULT_TIMEOUT = 30.0

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass
class AccessorConfig:
    """How to run the svn client for one stat or list call."""

    svn_command: str = "svn"                  # Executable name or path
    timeout: float = DEFAULT_TIMEOUT          # Seconds, applied per call
    non_interactive: bool = True              # Never prompt for credentials
    extra_args: Tuple[str, ...] = ()          # e.g. ("--username", "bob")
    env: Optional[Dict[str, str]] = None      # Added on top of os.environ

    def build_command(self, subcommand: str, url: str) -> List[str]:
        """Build the argv for `svn <subcommand> ... <url>`.

        Args:
            subcommand: svn subcommand, e.g. "info" or "ls"
            url: Target URL or working-copy path

        Returns:
            Argument list suitable for subprocess
        """
        cmd = [self.svn_command, subcommand]
        if self.non_interactive:
            cmd.append("--non-interactive")
        cmd.extend(self.extra_args)
        cmd.append(url)
        return cmd

    def build_env(self) -> Optional[Dict[str, str]]:
        """Return the child environment, or None to inherit ours."""
        if not self.env:
            return None
        merged = dict(os.environ)
        merged.update(self.env)
        return merged

    def validate(self) -> List[str]:
        """Validate configuration for consistency.

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        if not self.svn_command:
            errors.append("svn_command cannot be empty")

        if self.timeout is None or self.timeout <= 0:
            errors.append("timeout must be positive")

        return errors

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'AccessorConfig':
        """Create config from SVNWALK_* environment variables.

        Recognized variables:
        - SVNWALK_SVN_COMMAND: svn executable
        - SVNWALK_TIMEOUT: per-call timeout in seconds
        - SVNWALK_NON_INTERACTIVE: true/false

        Raises:
            ValueError: If a variable holds an unparseable value
        """
        environ = os.environ if environ is None else environ
        config = cls()

        command = environ.get("SVNWALK_SVN_COMMAND")
        if command:
            config.svn_command = command

        timeout = environ.get("SVNWALK_TIMEOUT")
        if timeout:
            try:
                config.timeout = float(timeout)
            except ValueError:
                raise ValueError(f"SVNWALK_TIMEOUT must be a number, got {timeout!r}") from None

        flag = environ.get("SVNWALK_NON_INTERACTIVE")
        if flag:
            lowered = flag.strip().lower()
            if lowered in _TRUE_VALUES:
                config.non_interactive = True
            elif lowered in _FALSE_VALUES:
                config.non_interactive = False
            else:
                raise ValueError(
                    f"SVNWALK_NON_INTERACTIVE must be a boolean, got {flag!r}"
                )

        return config


def resolve_config(config: Optional[AccessorConfig]) -> AccessorConfig:
    """Return a validated config, defaulting to AccessorConfig().

    Raises:
        ValueError: If the configuration is invalid
    """
    config = config or AccessorConfig()
    errors = config.validate()
    if errors:
        raise ValueError("Invalid accessor configuration: " + "; ".join(errors))
    return config


__all__ = ['AccessorConfig', 'DEFAULT_TIMEOUT', 'resolve_config']
