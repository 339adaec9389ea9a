"""
Computation graph utilities
Printing and analysis of the graph reachable from a terminal ADVar.
"""

from collections import Counter
from typing import Dict, List

import numpy as np

from .engine import build_topo
from .var import ADVar


def _fan_outs(topo: List[ADVar]) -> List[int]:
    index = {id(v): i for i, v in enumerate(topo)}
    fan_outs = [0] * len(topo)
    for v in topo:
        for parent in v.node.parents:
            fan_outs[index[id(parent)]] += 1
    return fan_outs


def get_graph_stats(root: ADVar) -> Dict:
    """
    Graph statistics without printing.

    Edges are counted per operand slot, so `x + x` contributes two edges
    and a fan-out of 2 for `x`.
    """
    topo = build_topo(root)
    n_nodes = len(topo)
    n_edges = sum(len(v.node.parents) for v in topo)

    fan_ins = [len(v.node.parents) for v in topo]
    fan_outs = _fan_outs(topo)
    op_counter = Counter(v.node.op.value for v in topo)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for v in topo if v.is_leaf()),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter),
    }


def print_graph_summary(root: ADVar, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph reachable from `root`.

    Args:
        root: terminal ADVar
        detailed: also list every node (graphs of up to 100 nodes)

    Returns:
        the dict from `get_graph_stats`
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        _print_nodes(build_topo(root), n_nodes)

    print("="*70 + "\n")
    return stats


def print_computation_graph(root: ADVar, max_nodes: int = 20) -> None:
    """
    Print the graph in topological order, one line per node.

    Args:
        root: terminal ADVar
        max_nodes: print at most this many nodes
    """
    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    topo = build_topo(root)
    _print_nodes(topo, max_nodes)
    if len(topo) > max_nodes:
        print(f"... ({len(topo) - max_nodes} more nodes)")

    print("="*70 + "\n")


def _print_nodes(topo: List[ADVar], limit: int) -> None:
    index = {id(v): i for i, v in enumerate(topo)}
    for i, v in enumerate(topo[:limit]):
        tag = v.node.op.value
        if v.node.parents:
            parent_info = ", ".join(f"Node{index[id(p)]}" for p in v.node.parents)
            print(f"Node {i:4d}: {tag:12s} ({float(v.val):10.6f}) <- [{parent_info}]")
        else:
            print(f"Node {i:4d}: {tag:12s} ({float(v.val):10.6f}) [leaf/input]")


def analyze_graph_complexity(root: ADVar) -> str:
    """
    Text report on graph size and the most frequent operations.
    """
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"

    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
