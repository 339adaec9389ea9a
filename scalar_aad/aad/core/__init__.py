# scalar_aad/aad/core/__init__.py

"""
Core public API for the AAD package.

Exports:
    ADVar          : The differentiable scalar used by the AAD system.
    Node, Op       : Provenance record and operation tags of an ADVar.
    AADConfig      : Engine settings; `get_config` / `use_config` read and swap them.
    build_topo     : Parents-first ordering of the graph reachable from a node.
    backward       : Run a single reverse pass to accumulate first-order adjoints.
    zero_adjoints  : Reset the adjoints of the given nodes to zero.
    grad, grads, grads_list : Convenience drivers returning input gradients.
    value          : Convenience: extract the primal value from an ADVar.
"""

from .config import AADConfig, get_config, use_config
from .node import Node, Op
from .var import ADVar
from .engine import backward, build_topo, zero_adjoints
from .seeds import grad, grads, grads_list, value

__all__ = [
    "ADVar", "Node", "Op",
    "AADConfig", "get_config", "use_config",
    "backward", "build_topo", "zero_adjoints",
    "grad", "grads", "grads_list", "value",
]
