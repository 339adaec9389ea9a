# scalar_aad/aad/ops/arithmetic.py
import numbers

from ..core.config import get_config
from ..core.node import Node, Op
from ..core.var import ADVar


def _as_ad(x):
    """Ensure x is an ADVar; otherwise wrap it as a fresh leaf."""
    return x if isinstance(x, ADVar) else ADVar(x)


def _binary(x, y, f, tag):
    """
    Generic binary primitive:
      - wraps plain numbers as fresh leaves
      - computes out.val = f(x.val, y.val) eagerly
      - records (tag, (x, y)) on the output; the local partials are applied
        later by the engine's dispatch on `tag`
    """
    x = _as_ad(x)
    y = _as_ad(y)
    with get_config().fp_guard():
        val = f(x.val, y.val)
    return ADVar(val, _node=Node(tag, (x, y)))


def add(x, y): return _binary(x, y, lambda a, b: a + b, Op.ADD)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, Op.MUL)


def pow(x, exponent):
    """
    Power with a constant exponent:
      out.val = x.val ** exponent
      ∂out/∂x = exponent * x^(exponent-1)

    The exponent is a plain number and never receives a gradient.
    Negative bases with fractional exponents give nan, 0 ** negative gives inf.
    """
    if isinstance(exponent, ADVar):
        raise TypeError("pow() exponent must be a plain number, not an ADVar")
    if not isinstance(exponent, numbers.Real):
        raise TypeError(f"pow() exponent must be a real number, got {type(exponent)}")
    x = _as_ad(x)
    cfg = get_config()
    with cfg.fp_guard():
        val = x.val ** cfg.dtype(exponent)
    return ADVar(val, _node=Node(Op.POW, (x,), float(exponent)))


# Composite ops: no tags of their own, gradients come from the primitives.
def neg(x):
    return mul(x, -1.0)


def sub(x, y):
    return add(x, neg(y))


def div(x, y):
    return mul(x, pow(y, -1.0))
