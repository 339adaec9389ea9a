# scalar_aad/aad/ops/activation.py
import numpy as np

from ..core.config import get_config
from ..core.node import Node, Op
from ..core.var import ADVar
from .arithmetic import _as_ad


def relu(x):
    """
    Rectified linear unit: out.val = max(x.val, 0).
    The local partial is 1 only where out.val > 0, so x == 0 passes no gradient.
    """
    x = _as_ad(x)
    with get_config().fp_guard():
        val = np.maximum(x.val, type(x.val)(0))
    return ADVar(val, _node=Node(Op.RELU, (x,)))
