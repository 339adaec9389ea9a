# scalar_aad/aad/core/node.py
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Tuple


class Op(str, Enum):
    """Operation tags. Only primitives get a tag; neg/sub/div are built from them."""
    LEAF = "leaf"
    ADD = "add"
    MUL = "mul"
    POW = "pow"
    RELU = "relu"


@dataclass(frozen=True)
class Node:
    """
    Provenance of one ADVar: the primitive that produced it.

    Attributes
    ----------
    op       : Op
        Operation tag; selects the local gradient rule in the backward dispatch.
    parents  : Tuple[Any, ...]
        The 0-2 ADVar operands, in operand order. Held by reference, so every
        downstream node shares the parent's storage.
    exponent : Optional[float]
        Constant exponent for `Op.POW`, None otherwise. Never differentiated.
    """
    op: Op
    parents: Tuple[Any, ...] = ()
    exponent: Optional[float] = None


LEAF_NODE = Node(Op.LEAF)
