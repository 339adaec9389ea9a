"""
Engine configuration

Shared settings for node construction, the backward pass and parameter
initialization. The active config is module-level state that can be swapped
temporarily with `use_config`.
"""

from __future__ import annotations
from contextlib import contextmanager, nullcontext
from dataclasses import dataclass, replace
from typing import Optional

import numpy as np


@dataclass(frozen=True)
class AADConfig:
    """
    Attributes
    ----------
    dtype : numpy scalar type
        Storage type for every value and adjoint. 32-bit by default.
    init_low, init_high : float
        Closed interval for random weight initialization.
    silence_fp_warnings : bool
        If True, inf/nan producing arithmetic runs under `np.errstate(all="ignore")`
        and propagates without RuntimeWarnings.
    """
    dtype: type = np.float32
    init_low: float = -1.0
    init_high: float = 1.0
    silence_fp_warnings: bool = True

    def fp_guard(self):
        """Context manager applied around forward ops and the backward sweep."""
        if self.silence_fp_warnings:
            return np.errstate(all="ignore")
        return nullcontext()


default_config = AADConfig()
_active = default_config


def get_config() -> AADConfig:
    return _active


@contextmanager
def use_config(config: Optional[AADConfig] = None, **overrides):
    """
    Temporarily switch the active config:
        with use_config(dtype=np.float64):
            ... build computation ...
            backward(y)
    """
    global _active
    prev = _active
    try:
        base = config or prev
        _active = replace(base, **overrides) if overrides else base
        yield _active
    finally:
        _active = prev
