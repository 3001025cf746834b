"""JAX helpers shared across the package.

64-bit mode is switched on at import so the sampled curves keep double
precision, matching the rest of the numpy/ROS pipeline (geometry_msgs uses
float64 everywhere).
"""

from functools import partial
from typing import Callable, Optional

import jax

jax.config.update("jax_enable_x64", True)


def jit(fun: Optional[Callable] = None, **jit_kwargs):
    """`jax.jit` usable both bare (`@jit`) and with options
    (`@jit(static_argnames=(...))`)."""
    if fun is None:
        return partial(jax.jit, **jit_kwargs)
    return jax.jit(fun, **jit_kwargs)
