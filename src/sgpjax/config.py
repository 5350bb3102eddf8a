"""Module-wide floating-point precision configuration.

Provides ``set_dtype`` and ``get_dtype`` to control the float dtype used
by the sgpjax propagation routines.  The default is ``jnp.float64``:
SGP4 is only meaningful when it reproduces the reference implementation to
sub-millimetre precision over multi-year horizons, which ``float32`` cannot
do.  Importing sgpjax therefore enables JAX's 64-bit mode
(``jax_enable_x64``).

Lower precision can still be selected with ``set_dtype`` (e.g. for
GPU batch runs where kilometre-level accuracy is sufficient).  Call it
**before** any JIT compilation, just like JAX's own
``jax.config.update("jax_enable_x64", True)``.  Under JIT, ``get_dtype()``
runs during tracing and its result is baked into the compiled program.
"""

from __future__ import annotations

import jax
import jax.numpy as jnp

_VALID_DTYPES = (jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64)

jax.config.update("jax_enable_x64", True)

_dtype = jnp.float64


def set_dtype(dtype) -> None:
    """Select the float dtype of propagation times, states and outputs.

    Initialization always runs in Python floats; only the traced
    propagation follows this setting.  Call it before compiling with
    ``jax.jit``: ``get_dtype()`` is read while tracing, so a compiled
    function keeps the dtype it was traced with unless its input dtypes
    change and force a retrace.

    Selecting ``jnp.float64`` turns JAX's 64-bit mode back on in case it
    was disabled after import.

    Args:
        dtype: One of ``jnp.float16``, ``jnp.bfloat16``, ``jnp.float32``,
            or ``jnp.float64``.

    Raises:
        ValueError: If *dtype* is not a supported float type.
    """
    global _dtype
    if dtype not in _VALID_DTYPES:
        raise ValueError(
            f"Unsupported dtype {dtype}. Must be one of: "
            f"jnp.float16, jnp.bfloat16, jnp.float32, jnp.float64"
        )
    if dtype == jnp.float64:
        jax.config.update("jax_enable_x64", True)
    _dtype = dtype


def get_dtype():
    """Return the current module-wide float dtype.

    Returns:
        The active float dtype (default ``jnp.float64``).
    """
    return _dtype


def get_kepler_tolerance() -> float:
    """Return the Kepler solver stopping tolerance for the configured dtype.

    The reference tolerance of ``1e-12`` rad is below the resolution of
    single and half precision, where the solver would otherwise always run
    to its iteration cap:

    - ``float64``:  1e-12 rad
    - ``float32``:  1e-6 rad
    - ``float16``, ``bfloat16``: 1e-3 rad

    Returns:
        float: Tolerance in radians.
    """
    if _dtype == jnp.float64:
        return 1e-12
    if _dtype == jnp.float32:
        return 1e-6
    return 1e-3
