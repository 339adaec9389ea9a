"""
Neural network building blocks on top of the scalar AAD engine:
Neuron, Layer and MLP (Multi-Layer Perceptron).

Weights are drawn from a numpy Generator passed in by the caller, so a seeded
network is reproducible.
"""

import logging
from typing import List, Sequence, Union

import numpy as np

from ..aad.core.config import get_config
from ..aad.core.engine import zero_adjoints
from ..aad.core.var import ADVar

logger = logging.getLogger(__name__)

RNGLike = Union[None, int, np.random.Generator]


def _as_generator(rng: RNGLike) -> np.random.Generator:
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


class Module:
    """
    Base class: parameter enumeration and gradient reset.
    """

    def zero_grad(self):
        """
        Reset all parameter gradients to zero.
        Call before each backward pass; adjoints otherwise accumulate across passes.
        """
        zero_adjoints(self.parameters())

    def parameters(self) -> List[ADVar]:
        return []


class Neuron(Module):
    """
    act = sum_i w_i * x_i + b, followed by ReLU when `nonlin`.

    Args:
        nin: Number of inputs
        nonlin: If True apply ReLU, otherwise linear
        rng: numpy Generator or seed for the weight draw
    """

    def __init__(self, nin: int, nonlin: bool = True, rng: RNGLike = None):
        cfg = get_config()
        rng = _as_generator(rng)
        self.w = [ADVar(rng.uniform(cfg.init_low, cfg.init_high)) for _ in range(nin)]
        self.b = ADVar(0.0)
        self.nonlin = nonlin

    def __call__(self, x: Sequence) -> ADVar:
        if len(x) != len(self.w):
            raise ValueError(f"Neuron expects {len(self.w)} inputs, got {len(x)}")
        act = sum((wi * xi for wi, xi in zip(self.w, x)), ADVar(0.0)) + self.b
        return act.relu() if self.nonlin else act

    def parameters(self) -> List[ADVar]:
        return self.w + [self.b]

    def __repr__(self):
        return f"{'ReLU' if self.nonlin else 'Linear'}Neuron({len(self.w)})"


class Layer(Module):
    """
    `nout` independent neurons applied to the same input vector.
    """

    def __init__(self, nin: int, nout: int, nonlin: bool = True, rng: RNGLike = None):
        rng = _as_generator(rng)
        self.neurons = [Neuron(nin, nonlin=nonlin, rng=rng) for _ in range(nout)]

    def __call__(self, x: Sequence) -> List[ADVar]:
        return [n(x) for n in self.neurons]

    def parameters(self) -> List[ADVar]:
        return [p for n in self.neurons for p in n.parameters()]

    def __repr__(self):
        return f"Layer of [{', '.join(str(n) for n in self.neurons)}]"


class MLP(Module):
    """
    Chain of layers; layer i feeds layer i+1.

    MLP(2, [16, 16, 1]):
        Input(2) -> Layer(2->16) -> Layer(16->16) -> Layer(16->1)

    Hidden layers use ReLU, the last layer is linear so the output range is
    unconstrained.
    """

    def __init__(self, nin: int, nouts: Sequence[int], rng: RNGLike = None):
        rng = _as_generator(rng)
        self.sz = [nin] + list(nouts)
        n_layers = len(nouts)
        self.layers = [
            Layer(self.sz[i], self.sz[i + 1], nonlin=i != n_layers - 1, rng=rng)
            for i in range(n_layers)
        ]
        logger.debug("MLP %s: %d parameters", self.sz, len(self.parameters()))

    def __call__(self, x: Sequence) -> List[ADVar]:
        x = list(x)
        for layer in self.layers:
            x = layer(x)
        return x

    def evaluate(self, inputs: Sequence) -> List[ADVar]:
        return self(inputs)

    def parameters(self) -> List[ADVar]:
        return [p for layer in self.layers for p in layer.parameters()]

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
