# scalar_aad/aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
import numbers
from typing import Any, Callable, Dict, Iterable, List

from .var import ADVar
from .engine import backward, build_topo, zero_adjoints


def value(x: Any) -> Any:
    """Return the numeric value of an ADVar; pass through plain numbers unchanged."""
    return float(x.val) if isinstance(x, ADVar) else x


def _ensure_ad(v: Any, *, name: str) -> ADVar:
    """Wrap a plain value as ADVar if needed; otherwise return the ADVar itself."""
    return v if isinstance(v, ADVar) else ADVar(v, name=name)


def _run(y: Any, caller: str) -> None:
    if not isinstance(y, ADVar):
        if not isinstance(y, numbers.Real):
            raise ValueError(f"{caller} expects a scalar output, got {type(y)}")
        # constant output: nothing reachable, every input gradient stays 0
        return
    # Clear everything reachable so pre-existing ADVar inputs start from 0
    zero_adjoints(build_topo(y))
    backward(y)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[ADVar], ADVar], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds the graph and runs one reverse pass.
    """
    x = _ensure_ad(x0, name="x")
    x.adj = type(x.val)(0.0)
    _run(f(x), "grad(f, x0)")
    return float(x.adj)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, ADVar]], ADVar],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: ADVar} and returning an ADVar
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    vars_ad: Dict[str, ADVar] = {k: _ensure_ad(v, name=k) for k, v in inputs.items()}
    zero_adjoints(vars_ad.values())
    _run(f(vars_ad), "grads(f, inputs)")
    return {k: float(vars_ad[k].adj) for k in inputs.keys()}


def grads_list(f: Callable[[List[ADVar]], ADVar],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[ADVar] = [_ensure_ad(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    zero_adjoints(xs)
    _run(f(xs), "grads_list(f, x0_list)")
    return [float(x.adj) for x in xs]
