#!/usr/bin/env python3
"""
Basic async walk: count files per last-changed author.

Usage:
    python examples/basic_async.py URL
"""

import asyncio
import sys
from collections import Counter

from svnwalk import AccessorConfig, CollectErrorsVisitor
from svnwalk.aio import AsyncSvnAccessor, walk_async
from svnwalk.logging_config import setup_logging


async def main():
    if len(sys.argv) != 2:
        print(__doc__)
        return 2

    setup_logging()
    authors = Counter()

    def count(path, node, err):
        if not node.is_dir():
            authors[node.last_changed_author or "?"] += 1

    # Errors are recorded instead of stopping the walk
    collector = CollectErrorsVisitor(count)
    accessor = AsyncSvnAccessor(AccessorConfig.from_env())

    await walk_async(sys.argv[1], collector, accessor)

    print("Files by last-changed author:")
    for author, n in authors.most_common():
        print(f"  {author:<20} {n:,}")

    stats = collector.get_statistics()
    if stats["total_errors"]:
        print(f"\n{stats['total_errors']} paths could not be read "
              f"({stats['forbidden']} forbidden)")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
