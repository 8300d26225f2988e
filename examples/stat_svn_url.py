#!/usr/bin/env python3
"""
Print the svn metadata of a single URL.

Usage:
    python examples/stat_svn_url.py https://svn.example.com/repo/trunk
"""

import sys

from svnwalk import AccessorConfig, AccessorError
from svnwalk.logging_config import setup_logging
from svnwalk.sync import SvnAccessor, stat


def main():
    if len(sys.argv) != 2:
        print(__doc__)
        return 2

    setup_logging()
    accessor = SvnAccessor(AccessorConfig.from_env())

    try:
        node = stat(sys.argv[1], accessor)
    except AccessorError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    for key, value in node.metadata().items():
        print(f"{key:>22}: {value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
