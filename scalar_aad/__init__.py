# scalar_aad/__init__.py
# Scalar reverse-mode autodiff and a small MLP built on it

from .aad import (
    ADVar,
    AADConfig,
    get_config,
    use_config,
    backward,
    zero_adjoints,
    grad,
    grads,
    grads_list,
    value,
)
from .nn import Module, Neuron, Layer, MLP

__version__ = "0.1.0"

__all__ = [
    'ADVar',
    'AADConfig',
    'get_config',
    'use_config',
    'backward',
    'zero_adjoints',
    'grad',
    'grads',
    'grads_list',
    'value',
    'Module',
    'Neuron',
    'Layer',
    'MLP',
]
