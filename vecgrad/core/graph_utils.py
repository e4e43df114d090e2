# vecgrad/core/graph_utils.py
"""
Helpers for printing and analysing the expression graph behind a vector.
"""
from collections import Counter
from typing import Dict, Iterator, Union

from .node import Node
from .var import GradVec


def _root(x: Union[GradVec, Node]) -> Node:
    return x.node if isinstance(x, GradVec) else x


def walk(x: Union[GradVec, Node]) -> Iterator[Node]:
    """Yield every node reachable from `x` exactly once (by identity)."""
    seen = set()
    stack = [_root(x)]
    while stack:
        node = stack.pop()
        if id(node) in seen:
            continue
        seen.add(id(node))
        yield node
        stack.extend(reversed(node.children()))


def depth(x: Union[GradVec, Node]) -> int:
    """Longest path from `x` down to a leaf; a leaf has depth 0."""
    memo: Dict[int, int] = {}
    # iterative post-order; deep graphs would exhaust the recursion limit
    stack = [(_root(x), False)]
    while stack:
        node, expanded = stack.pop()
        if id(node) in memo:
            continue
        kids = node.children()
        if expanded or not kids:
            memo[id(node)] = 1 + max((memo[id(k)] for k in kids), default=-1)
            continue
        stack.append((node, True))
        stack.extend((k, False) for k in kids if id(k) not in memo)
    return memo[id(_root(x))]


def graph_summary(x: Union[GradVec, Node]) -> Dict:
    """
    Statistics about the graph behind `x`.

    Returns
    -------
    dict with keys 'nodes' (distinct nodes), 'edges' (parent->child links,
    counting repeats such as a*a twice), 'depth' and 'ops' (Counter of op tags).
    """
    nodes = list(walk(x))
    return {
        "nodes": len(nodes),
        "edges": sum(len(n.children()) for n in nodes),
        "depth": depth(x),
        "ops": Counter(n.op_tag for n in nodes),
    }


def print_graph_summary(x: Union[GradVec, Node]) -> Dict:
    """Print `graph_summary(x)` as a small table and return it."""
    stats = graph_summary(x)
    print("\n" + "=" * 40)
    print("COMPUTATION GRAPH SUMMARY")
    print("=" * 40)
    print(f"Total nodes:  {stats['nodes']:,}")
    print(f"Total edges:  {stats['edges']:,}")
    print(f"Depth:        {stats['depth']}")
    print()
    print("Operation breakdown:")
    for op_tag, count in stats["ops"].most_common():
        pct = 100.0 * count / stats["nodes"]
        print(f"  {op_tag:8s}: {count:6,} ({pct:5.1f}%)")
    print("=" * 40 + "\n")
    return stats
