# scalar_aad/aad/core/engine.py
from __future__ import annotations
import logging
from typing import Iterable, List

from .config import get_config
from .node import Op
from .var import ADVar

logger = logging.getLogger(__name__)


def build_topo(root: ADVar) -> List[ADVar]:
    """
    Depth-first post-order from `root`: every node appears after all of its
    parents, `root` last. Nodes already visited (by identity) are skipped, so
    a value shared by several consumers is listed once.

    Uses an explicit stack; the order is the same as the recursive
    "visit parents, then append self" formulation.
    """
    topo: List[ADVar] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        v, expanded = stack.pop()
        if expanded:
            topo.append(v)
            continue
        if id(v) in visited:
            continue
        visited.add(id(v))
        stack.append((v, True))
        # reversed so the first parent is expanded first
        for p in reversed(v.node.parents):
            if id(p) not in visited:
                stack.append((p, False))
    return topo


def zero_adjoints(values: Iterable[ADVar]):
    """Set the adjoint of every given ADVar to zero."""
    dtype = get_config().dtype
    for v in values:
        v.adj = dtype(0.0)


def backward(root: ADVar):
    """
    Run a single reverse pass from `root`.

    Seeds root.adj = 1 (overwriting), then applies each reachable node's local
    rule exactly once, terminal first. Every consumer of a node runs before
    the node itself, so its adjoint is complete when its own rule reads it.

    Adjoints of other nodes are not cleared: call `zero_adjoints` (or
    `Module.zero_grad`) between passes or contributions accumulate.
    """
    cfg = get_config()
    topo = build_topo(root)
    logger.debug("backward: %d nodes reachable from %r", len(topo), root)

    root.adj = cfg.dtype(1.0)
    with cfg.fp_guard():
        for v in reversed(topo):
            _propagate(v)


def _propagate(v: ADVar):
    """
    Local gradient rules, selected by op tag. Every update is an addition:
        p.adj += v.adj * (∂v/∂p)
    """
    node = v.node
    tag = node.op
    g = v.adj

    # ---------- Leaf: nothing upstream ----------
    if tag is Op.LEAF:
        return

    # ---------- Sum: ∂v/∂x = ∂v/∂y = 1 ----------
    if tag is Op.ADD:
        x, y = node.parents
        x.adj = x.adj + g
        y.adj = y.adj + g
        return

    # ---------- Product: ∂v/∂x = y, ∂v/∂y = x ----------
    if tag is Op.MUL:
        x, y = node.parents
        x.adj = x.adj + y.val * g
        y.adj = y.adj + x.val * g
        return

    # ---------- Power with constant exponent k ----------
    if tag is Op.POW:
        (x,) = node.parents
        dtype = type(x.val)
        k = dtype(node.exponent)
        x.adj = x.adj + k * x.val ** (k - dtype(1.0)) * g
        return

    # ---------- ReLU: indicator(v > 0) ----------
    if tag is Op.RELU:
        (x,) = node.parents
        dtype = type(x.val)
        x.adj = x.adj + dtype(v.val > 0) * g
        return

    raise ValueError(f"no backward rule for op {tag!r}")
