"""Command-line example for flattree.

Builds a tree of a chosen shape and prints its size. With no options it
builds a 5-node chain and prints ``nodes=5 edges=4``.

Usage:
    python -m flattree                        # nodes=5 edges=4
    python -m flattree --shape star --size 4  # nodes=4 edges=3
    python -m flattree --stats                # add leaves, root, depth...
"""

import argparse
import logging
import sys
from typing import List, Optional

from .api import get_tree_stats
from .core.builders import make_binary_tree, make_chain, make_star
from .core.metrics import count_edges, count_nodes

BUILDERS = {
    'chain': make_chain,
    'star': make_star,
    'binary': make_binary_tree,
}


def _non_negative(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"size must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="flattree-demo",
        description="Build a canonical tree and print its structural metrics."
    )
    parser.add_argument(
        "--shape", choices=sorted(BUILDERS), default="chain",
        help="Tree shape to build (default: chain)"
    )
    parser.add_argument(
        "--size", type=_non_negative, default=5,
        help="Number of nodes (default: 5)"
    )
    parser.add_argument(
        "--stats", action="store_true",
        help="Also print leaves, internal nodes, root, reachable count and depth"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Enable debug logging on stderr"
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the example. Always returns 0 once arguments parse."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    nodes = BUILDERS[args.shape](args.size)
    print(f"nodes={count_nodes(nodes)} edges={count_edges(nodes)}")

    if args.stats:
        stats = get_tree_stats(nodes)
        root = "none" if stats['root'] is None else stats['root']
        print(
            f"leaves={stats['leaf_nodes']} internal={stats['internal_nodes']} "
            f"root={root} reachable={stats['reachable_nodes']} "
            f"depth={stats['max_depth']}"
        )

    return 0


if __name__ == "__main__":
    sys.exit(main())
