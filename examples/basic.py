#!/usr/bin/env python3
"""
Basic flattree example.

Builds a 5-node chain and prints its node and edge counts:

    nodes=5 edges=4
"""

import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from flattree import make_chain, count_nodes, count_edges


def main():
    nodes = make_chain(5)
    print(f"nodes={count_nodes(nodes)} edges={count_edges(nodes)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
