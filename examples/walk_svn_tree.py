#!/usr/bin/env python3
"""
Print a remote svn tree, skipping anything the server forbids.

This example demonstrates:
- Walking with a visitor callback
- Pruning subtrees with SKIP_SUBTREE
- Treating forbidden paths as non-fatal with skip_forbidden()

Usage:
    python examples/walk_svn_tree.py URL [MAX_DEPTH]
"""

import sys

from svnwalk import SKIP_SUBTREE, AccessorConfig, join, skip_forbidden
from svnwalk.logging_config import setup_logging
from svnwalk.sync import SvnAccessor, walk


def main():
    if len(sys.argv) < 2:
        print(__doc__)
        return 2

    root = sys.argv[1]
    max_depth = int(sys.argv[2]) if len(sys.argv) > 2 else None

    setup_logging()
    accessor = SvnAccessor(AccessorConfig.from_env())

    counts = {"dirs": 0, "files": 0}

    @skip_forbidden
    def show(path, node, err):
        if err is not None:
            # Anything other than "forbidden" stops the walk
            return err

        depth = join(path).count("/") - join(root).count("/")
        indent = "  " * depth
        if node.is_dir():
            counts["dirs"] += 1
            print(f"{indent}{node.name or path}/  (r{node.last_changed_revision}, "
                  f"{node.last_changed_author})")
            if max_depth is not None and depth >= max_depth:
                return SKIP_SUBTREE
        else:
            counts["files"] += 1
            print(f"{indent}{path.rsplit('/', 1)[-1]}")
        return None

    result = walk(root, show, accessor)
    if result is not None:
        print(f"\nWalk stopped: {result}", file=sys.stderr)
        return 1

    print(f"\nTotal: {counts['dirs']} directories, {counts['files']} files")
    return 0


if __name__ == "__main__":
    sys.exit(main())
