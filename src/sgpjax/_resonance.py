"""
Deep-space resonance integrator.

Resonant orbits (geosynchronous and 12-hour Molniya) carry a mean motion and
a resonance angle that are advanced in fixed 720 minute steps with a
second-order Taylor update, then extrapolated to the query time.

State is passed explicitly: :func:`integrate` takes a
:class:`ResonanceState` and returns the advanced one.  Reusing a returned
state skips the steps already taken, which is only valid while the query
times of that satellite keep one sign and never decrease in magnitude.
Keeping to that order is the caller's responsibility and is not checked.
"""

from __future__ import annotations

from typing import NamedTuple

import jax
import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sgpjax._regime import DeepSpace, Geosynchronous, Molniya, Resonance
from sgpjax.config import get_dtype
from sgpjax.constants import SIDEREAL_SPEED, TWOPI

# ---------------------------------------------------------------------------
# Integration constants
# ---------------------------------------------------------------------------

DELTA_T = 720.0
"""Integration step magnitude [min]."""

_HALF_DELTA_T_SQUARED = DELTA_T * DELTA_T / 2.0

# Geosynchronous reference angles [rad]
_LAMBDA31 = 0.13130908
_LAMBDA22 = 2.8843198
_LAMBDA33 = 0.37448087

# Molniya reference angles [rad]
_G22 = 5.7686396
_G32 = 0.95240898
_G44 = 1.8014998
_G52 = 1.0508330
_G54 = 4.4108898


class ResonanceState(NamedTuple):
    """Integrator state of a resonant deep-space satellite.

    Attributes:
        t: Integrator time, a multiple of 720 [min since epoch].
        mean_motion: Mean motion at ``t`` [rad/min].
        lambda_: Resonance angle at ``t`` [rad].
    """

    t: Array
    mean_motion: Array
    lambda_: Array


def initial_state(constants) -> ResonanceState | None:
    """Return the integrator state at epoch, or ``None`` if not resonant.

    Args:
        constants: Initialized :class:`~sgpjax.Constants`.

    Returns:
        ``ResonanceState(t=0, mean_motion=n0, lambda_=lambda_0)`` for
        resonant deep-space orbits, ``None`` otherwise.
    """
    regime = constants.regime
    if not isinstance(regime, DeepSpace) or regime.resonant is None:
        return None
    dtype = get_dtype()
    return ResonanceState(
        t=jnp.asarray(0.0, dtype=dtype),
        mean_motion=jnp.asarray(constants.orbit_0.mean_motion, dtype=dtype),
        lambda_=jnp.asarray(regime.resonant.lambda_0, dtype=dtype),
    )


def _derivatives(
    resonance: Resonance,
    argument_of_perigee_0: float,
    lambda_dot_0: float,
    state: ResonanceState,
) -> tuple[Array, Array, Array]:
    """Resonance angle rate and the first two mean motion derivatives."""
    lam = state.lambda_
    lambda_dot = state.mean_motion + lambda_dot_0

    if isinstance(resonance, Geosynchronous):
        ni_dot = (
            resonance.dr1 * jnp.sin(lam - _LAMBDA31)
            + resonance.dr2 * jnp.sin(2.0 * (lam - _LAMBDA22))
            + resonance.dr3 * jnp.sin(3.0 * (lam - _LAMBDA33))
        )
        ni_ddot = (
            resonance.dr1 * jnp.cos(lam - _LAMBDA31)
            + 2.0 * resonance.dr2 * jnp.cos(2.0 * (lam - _LAMBDA22))
            + 3.0 * resonance.dr3 * jnp.cos(3.0 * (lam - _LAMBDA33))
        ) * lambda_dot
        return lambda_dot, ni_dot, ni_ddot

    r = resonance
    w = argument_of_perigee_0 + r.k14 * state.t
    ni_dot = (
        r.d2201 * jnp.sin(2.0 * w + lam - _G22)
        + r.d2211 * jnp.sin(lam - _G22)
        + r.d3210 * jnp.sin(w + lam - _G32)
        + r.d3222 * jnp.sin(-w + lam - _G32)
        + r.d4410 * jnp.sin(2.0 * w + 2.0 * lam - _G44)
        + r.d4422 * jnp.sin(2.0 * lam - _G44)
        + r.d5220 * jnp.sin(w + lam - _G52)
        + r.d5232 * jnp.sin(-w + lam - _G52)
        + r.d5421 * jnp.sin(w + 2.0 * lam - _G54)
        + r.d5433 * jnp.sin(-w + 2.0 * lam - _G54)
    )
    ni_ddot = (
        r.d2201 * jnp.cos(2.0 * w + lam - _G22)
        + r.d2211 * jnp.cos(lam - _G22)
        + r.d3210 * jnp.cos(w + lam - _G32)
        + r.d3222 * jnp.cos(-w + lam - _G32)
        + r.d5220 * jnp.cos(w + lam - _G52)
        + r.d5232 * jnp.cos(-w + lam - _G52)
        + 2.0
        * (
            r.d4410 * jnp.cos(2.0 * w + 2.0 * lam - _G44)
            + r.d4422 * jnp.cos(2.0 * lam - _G44)
            + r.d5421 * jnp.cos(w + 2.0 * lam - _G54)
            + r.d5433 * jnp.cos(-w + 2.0 * lam - _G54)
        )
    ) * lambda_dot
    return lambda_dot, ni_dot, ni_ddot


def integrate(
    constants,
    state: ResonanceState,
    t: ArrayLike,
    p22: ArrayLike,
    p23: ArrayLike,
) -> tuple[ResonanceState, Array, Array]:
    """Advance the resonance state toward *t* and extrapolate to it.

    Steps of 720 minutes are taken toward *t* (forward for ``t > 0``,
    backward otherwise) while a full step does not overshoot it; there is
    no step at ``t == 0``.  Each step applies
    ``n += n_dot dt + n_ddot dt^2/2`` and
    ``lambda += lambda_dot dt + n_dot dt^2/2``.

    Args:
        constants: Initialized :class:`~sgpjax.Constants` of a resonant
            deep-space orbit.
        state: State to start from (``initial_state`` or a state returned
            by an earlier call with a smaller ``|t|`` of the same sign).
        t: Minutes since epoch.
        p22: Secular right ascension at *t* [rad].
        p23: Secular argument of perigee at *t* [rad].

    Returns:
        Tuple ``(state, a, p29)``: the last stored state, the semi-major
        axis term [earth radii] and the mean anomaly term [rad] at *t*.
    """
    resonant = constants.regime.resonant
    resonance = resonant.resonance
    argument_of_perigee_0 = constants.orbit_0.argument_of_perigee
    lambda_dot_0 = resonant.lambda_dot_0

    dtype = get_dtype()
    t = jnp.asarray(t, dtype=dtype)
    state = ResonanceState(*(jnp.asarray(x, dtype=dtype) for x in state))

    forward = t > 0.0
    delta_t = jnp.where(forward, DELTA_T, -DELTA_T)
    target = t - delta_t

    def keep_stepping(s: ResonanceState):
        return jnp.where(forward, target >= s.t, target <= s.t)

    def step(s: ResonanceState) -> ResonanceState:
        lambda_dot, ni_dot, ni_ddot = _derivatives(
            resonance, argument_of_perigee_0, lambda_dot_0, s
        )
        return ResonanceState(
            t=s.t + delta_t,
            mean_motion=s.mean_motion + ni_dot * delta_t + ni_ddot * _HALF_DELTA_T_SQUARED,
            lambda_=s.lambda_ + lambda_dot * delta_t + ni_dot * _HALF_DELTA_T_SQUARED,
        )

    state = jax.lax.while_loop(keep_stepping, step, state)

    lambda_dot, ni_dot, ni_ddot = _derivatives(
        resonance, argument_of_perigee_0, lambda_dot_0, state
    )
    ft = t - state.t
    a = (
        constants.geopotential.ke
        / (state.mean_motion + ni_dot * ft + ni_ddot * ft * ft * 0.5)
    ) ** (2.0 / 3.0)

    sidereal_time = jnp.fmod(resonant.sidereal_time_0 + t * SIDEREAL_SPEED, TWOPI)
    extrapolated_lambda = state.lambda_ + lambda_dot * ft + ni_dot * ft * ft * 0.5
    if isinstance(resonance, Molniya):
        p29 = extrapolated_lambda - 2.0 * p22 + 2.0 * sidereal_time
    else:
        p29 = extrapolated_lambda - p22 - p23 + sidereal_time
    return state, a, p29
