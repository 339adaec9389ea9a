# scalar_aad/aad/core/var.py
from __future__ import annotations
import numbers
from typing import Any, Optional

import numpy as np

from .config import get_config
from .node import LEAF_NODE, Node, Op


class ADVar:
    """
    Active scalar variable for reverse-mode Automatic Differentiation (AD).

    Attributes
    ----------
    val : numpy scalar
        Forward (primal) value, stored in the configured dtype. Never reassigned.
    adj : numpy scalar
        Reverse-mode adjoint (gradient accumulator).
    node : Node
        How this variable was produced: op tag, parent ADVars and, for pow,
        the constant exponent. Leaves carry `LEAF_NODE`.
    name : Optional[str]
        Optional debug/pretty-print name.

    Identity is object identity; two ADVars with equal `val` are different
    graph vertices.
    """

    def __init__(self, val: Any, *, name: Optional[str] = None, _node: Node = LEAF_NODE):
        # bool is Integral; strings, sequences and None are not
        if not isinstance(val, numbers.Real):
            raise TypeError(
                f"ADVar only accepts real scalars (int, float, numpy scalar), "
                f"but got {type(val)}"
            )
        dtype = get_config().dtype
        self.val = dtype(val)
        self.adj = dtype(0.0)
        self.node = _node
        self.name = name

    def __repr__(self):
        label = f", name={self.name!r}" if self.name else ""
        return f"ADVar(val={float(self.val):.4f}, adj={float(self.adj):.4f}{label})"

    def __float__(self):
        return float(self.val)

    @property
    def op(self) -> Op:
        return self.node.op

    @property
    def parents(self):
        return self.node.parents

    def is_leaf(self) -> bool:
        return self.node.op is Op.LEAF

    # Accessors
    def get_data(self) -> float:
        return float(self.val)

    def get_grad(self) -> float:
        return float(self.adj)

    def set_grad(self, grad: float) -> None:
        self.adj = get_config().dtype(grad)

    def backward(self) -> None:
        """Seed this node's adjoint with 1 and run the reverse sweep."""
        from .engine import backward
        backward(self)

    # Operator overloading for arithmetic operations
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def pow(self, exponent):
        return self.__pow__(exponent)

    def relu(self):
        from ..ops.activation import relu
        return relu(self)
