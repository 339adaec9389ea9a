# scalar_aad/aad/__init__.py
# Automatic Adjoint Differentiation over scalar graphs

from .core.var import ADVar
from .core.config import AADConfig, get_config, use_config
from .core.engine import backward, build_topo, zero_adjoints
from .core.seeds import grad, grads, grads_list, value
from .core import graph_utils
from .ops import add, sub, mul, div, neg, pow, relu

__all__ = [
    # Core
    'ADVar',
    'AADConfig',
    'get_config',
    'use_config',
    # Engine
    'backward',
    'build_topo',
    'zero_adjoints',
    # Drivers
    'grad',
    'grads',
    'grads_list',
    'value',
    'graph_utils',
    # Ops
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'relu',
]
