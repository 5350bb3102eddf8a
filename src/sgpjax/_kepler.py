"""
Kepler equation solver for SGP4.

Solves for the sum ``E + omega`` of the eccentric anomaly and the argument
of perigee, given the projections ``axn = e cos(omega)`` and
``ayn = e sin(omega) + ...`` of the eccentricity vector.  The solver is a
clamped Newton iteration written with ``jax.lax.while_loop``, so it runs
under ``jax.jit`` and ``jax.vmap``.
"""

from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

MAX_ITERATIONS = 10
"""Iteration cap of the reference solver."""

TOLERANCE = 1.0e-12
"""Correction magnitude below which the iteration stops [rad]."""

MAX_CORRECTION = 0.95
"""Clamp applied to each Newton correction [rad]."""


class KeplerSolution(NamedTuple):
    """Result of :func:`solve_kepler_with_info`.

    Attributes:
        ew: Sum of eccentric anomaly and argument of perigee [rad].
        iterations: Number of Newton corrections evaluated.
        correction: Last computed (unclamped) correction [rad].
        converged: Whether the last correction fell below the tolerance
            the solver ran with.
    """

    ew: Array
    iterations: Array
    correction: Array
    converged: Array


def solve_kepler_with_info(
    p38: ArrayLike,
    axn: ArrayLike,
    ayn: ArrayLike,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> KeplerSolution:
    """Solve Kepler's equation and report convergence information.

    Each iteration computes the Newton correction
    ``(p38 - ayn cos ew + axn sin ew - ew) / (1 - axn cos ew - ayn sin ew)``.
    The iteration stops, without applying it, at the first correction whose
    magnitude is below *tolerance*.  Otherwise the correction is clamped to
    ``[-0.95, 0.95]`` and applied.  After *max_iterations* corrections the
    current value is returned whether or not it has converged.

    Args:
        p38: Initial estimate (mean anomaly plus argument of perigee,
            adjusted, reduced modulo 2pi) [rad].
        axn: ``e cos(omega)``.
        ayn: ``e sin(omega)`` plus the long-period J3 term.
        max_iterations: Maximum number of corrections.
        tolerance: Early-stop threshold on the correction magnitude [rad].

    Returns:
        A :class:`KeplerSolution`.

    Examples:
        ```python
        solution = solve_kepler_with_info(1.0, 0.1, 0.0)
        solution.converged  # Array(True)
        ```
    """
    p38 = jnp.asarray(p38)
    axn = jnp.asarray(axn, dtype=p38.dtype)
    ayn = jnp.asarray(ayn, dtype=p38.dtype)

    def correction(ew):
        cos_ew = jnp.cos(ew)
        sin_ew = jnp.sin(ew)
        return (p38 - ayn * cos_ew + axn * sin_ew - ew) / (1.0 - cos_ew * axn - sin_ew * ayn)

    def keep_iterating(carry):
        iteration, _, delta = carry
        return (iteration < max_iterations) & ~(jnp.abs(delta) < tolerance)

    def newton_step(carry):
        iteration, ew, _ = carry
        delta = correction(ew)
        ew = jnp.where(
            jnp.abs(delta) < tolerance,
            ew,
            ew + jnp.clip(delta, -MAX_CORRECTION, MAX_CORRECTION),
        )
        return iteration + 1, ew, delta

    init = (jnp.int32(0), p38, jnp.full_like(p38, jnp.inf))
    iterations, ew, delta = jax.lax.while_loop(keep_iterating, newton_step, init)
    return KeplerSolution(
        ew=ew, iterations=iterations, correction=delta, converged=jnp.abs(delta) < tolerance
    )


def solve_kepler(
    p38: ArrayLike,
    axn: ArrayLike,
    ayn: ArrayLike,
    max_iterations: int = MAX_ITERATIONS,
    tolerance: float = TOLERANCE,
) -> Array:
    """Solve Kepler's equation for ``E + omega``.

    Never fails: an unconverged value is returned after *max_iterations*.
    Use :func:`solve_kepler_with_info` to check convergence.

    Returns:
        Sum of eccentric anomaly and argument of perigee [rad].
    """
    return solve_kepler_with_info(p38, axn, ayn, max_iterations, tolerance).ew
