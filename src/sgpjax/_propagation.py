"""
SGP4/SDP4 propagation.

The functions here are pure JAX and run under ``jax.jit`` and ``jax.vmap``
over the time argument.  The regime stored in :class:`~sgpjax.Constants`
selects the code path at Python (trace) time; branches that depend on the
propagation time, such as the Lyddane low-inclination formulation, use
``jnp.where``.

No errors are raised during propagation.  An eccentricity that decays
below ``1e-6`` is clamped to ``1e-6``; larger excursions are passed through
and a negative semi-latus rectum yields NaN components.
"""

from __future__ import annotations

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

from sgpjax._initializer import Constants
from sgpjax._kepler import solve_kepler
from sgpjax._regime import DeepSpace, NearEarth
from sgpjax._resonance import ResonanceState, initial_state, integrate
from sgpjax._third_body import (
    LUNAR_ECCENTRICITY,
    LUNAR_MEAN_MOTION,
    SOLAR_ECCENTRICITY,
    SOLAR_MEAN_MOTION,
    long_period_periodic_effects,
)
from sgpjax._transform import orientation_to_prediction, short_period_state
from sgpjax._types import CompatibilityMode, Prediction, PropagatedElements
from sgpjax.config import get_dtype, get_kepler_tolerance
from sgpjax.constants import PI, TWOPI

_MIN_ECCENTRICITY = 1.0e-6
_LYDDANE_INCLINATION = 0.2


# ---------------------------------------------------------------------------
# Near-earth (SGP4)
# ---------------------------------------------------------------------------


def _near_earth_elements(
    constants: Constants, regime: NearEarth, t: Array, p22: Array, p23: Array
) -> PropagatedElements:
    orbit_0 = constants.orbit_0
    p24 = orbit_0.mean_anomaly + constants.mean_anomaly_dot * t
    t2 = t * t

    high = regime.high_altitude
    if high is None:
        argument_of_perigee = p23
        mean_anomaly = p24 + orbit_0.mean_motion * constants.k1 * t2
        a = regime.a0 * (1.0 - constants.c1 * t) ** 2
        p27 = orbit_0.eccentricity - constants.c4 * t
    else:
        if high.elliptic is None:
            argument_of_perigee = p23
            p26 = p24
        else:
            el = high.elliptic
            p25 = el.k13 * ((1.0 + high.eta * jnp.cos(p24)) ** 3 - el.k11) + el.k12 * t
            argument_of_perigee = p23 - p25
            p26 = p24 + p25
        t3 = t2 * t
        t4 = t3 * t
        mean_anomaly = p26 + orbit_0.mean_motion * (
            constants.k1 * t2 + high.k8 * t3 + t4 * (high.k9 + t * high.k10)
        )
        a = regime.a0 * (1.0 - constants.c1 * t - high.d2 * t2 - high.d3 * t3 - high.d4 * t4) ** 2
        p27 = orbit_0.eccentricity - (constants.c4 * t + high.c5 * (jnp.sin(p26) - high.k7))

    inclination = jnp.full_like(t, orbit_0.inclination)
    return PropagatedElements(
        inclination=inclination,
        right_ascension=p22,
        eccentricity=jnp.maximum(p27, _MIN_ECCENTRICITY),
        argument_of_perigee=argument_of_perigee,
        mean_anomaly=mean_anomaly,
        mean_motion=constants.geopotential.ke / a**1.5,
        semi_major_axis=a,
        k2=jnp.full_like(t, regime.k2),
        k3=jnp.full_like(t, regime.k3),
        k4=jnp.full_like(t, regime.k4),
        k5=jnp.full_like(t, regime.k5),
        k6=jnp.full_like(t, regime.k6),
    )


# ---------------------------------------------------------------------------
# Deep-space (SDP4)
# ---------------------------------------------------------------------------


def _deep_space_elements(
    constants: Constants,
    regime: DeepSpace,
    state: ResonanceState | None,
    t: Array,
    p22: Array,
    p23: Array,
) -> tuple[PropagatedElements, ResonanceState | None]:
    orbit_0 = constants.orbit_0
    geopotential = constants.geopotential

    if regime.resonant is None:
        p28 = regime.a0
        p29 = orbit_0.mean_anomaly + constants.mean_anomaly_dot * t
    else:
        state, p28, p29 = integrate(constants, state, t, p22, p23)

    solar_de, solar_di, solar_dm, ps4, ps5 = long_period_periodic_effects(
        regime.solar, SOLAR_ECCENTRICITY, SOLAR_MEAN_MOTION, t
    )
    lunar_de, lunar_di, lunar_dm, pl4, pl5 = long_period_periodic_effects(
        regime.lunar, LUNAR_ECCENTRICITY, LUNAR_MEAN_MOTION, t
    )
    delta_inclination = solar_di + lunar_di
    p4 = ps4 + pl4
    p5 = ps5 + pl5

    inclination = orbit_0.inclination + regime.inclination_dot * t + delta_inclination
    sin_i = jnp.sin(inclination)
    cos_i = jnp.cos(inclination)

    # Direct formulation
    right_ascension_direct = p22 + p5 / sin_i
    argument_of_perigee_direct = p23 + p4 - cos_i * (p5 / sin_i)

    # Lyddane formulation for low inclinations
    sin_p22 = jnp.sin(p22)
    cos_p22 = jnp.cos(p22)
    p30 = jnp.arctan2(
        sin_i * sin_p22 + (p5 * cos_p22 + delta_inclination * cos_i * sin_p22),
        sin_i * cos_p22 + (-p5 * sin_p22 + delta_inclination * cos_i * cos_p22),
    )
    p22_rem = jnp.fmod(p22, TWOPI)
    right_ascension_lyddane = jnp.where(
        p30 < p22_rem - PI,
        p30 + TWOPI,
        jnp.where(p30 > p22_rem + PI, p30 - TWOPI, p30),
    )
    if constants.mode == CompatibilityMode.AFSPC:
        p22_wrapped = jnp.mod(p22, TWOPI)
    else:
        p22_wrapped = p22_rem
    argument_of_perigee_lyddane = (
        p23
        + p4
        + cos_i * (p22_rem - right_ascension_lyddane)
        - delta_inclination * p22_wrapped * sin_i
    )

    direct = inclination >= _LYDDANE_INCLINATION
    right_ascension = jnp.where(direct, right_ascension_direct, right_ascension_lyddane)
    argument_of_perigee = jnp.where(direct, argument_of_perigee_direct, argument_of_perigee_lyddane)

    p31 = orbit_0.eccentricity + regime.eccentricity_dot * t - constants.c4 * t
    eccentricity = jnp.maximum(p31, _MIN_ECCENTRICITY) + (solar_de + lunar_de)

    a = p28 * (1.0 - constants.c1 * t) ** 2
    mean_anomaly = p29 + (solar_dm + lunar_dm) + orbit_0.mean_motion * constants.k1 * t * t

    # Short-period coefficients at the perturbed inclination
    k5_denominator = 1.0 + cos_i
    k5_denominator = jnp.where(jnp.abs(k5_denominator) > 1.5e-12, k5_denominator, 1.5e-12)
    elements = PropagatedElements(
        inclination=inclination,
        right_ascension=right_ascension,
        eccentricity=eccentricity,
        argument_of_perigee=argument_of_perigee,
        mean_anomaly=mean_anomaly,
        mean_motion=geopotential.ke / a**1.5,
        semi_major_axis=a,
        k2=-0.5 * geopotential.j3oj2 * sin_i,
        k3=1.0 - cos_i * cos_i,
        k4=7.0 * cos_i * cos_i - 1.0,
        k5=-0.25 * geopotential.j3oj2 * sin_i * (3.0 + 5.0 * cos_i) / k5_denominator,
        k6=3.0 * cos_i * cos_i - 1.0,
    )
    return elements, state


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def orbital_elements(
    constants: Constants,
    t: ArrayLike,
    state: ResonanceState | None = None,
) -> tuple[PropagatedElements, ResonanceState | None]:
    """Compute the perturbed mean elements at time *t*.

    Args:
        constants: Initialized :class:`~sgpjax.Constants`.
        t: Minutes since epoch.
        state: Resonance integrator state.  Required for resonant
            deep-space orbits, must be ``None`` otherwise.

    Returns:
        Tuple ``(elements, state)`` where ``state`` is the advanced
        integrator state (``None`` for non-resonant orbits).

    Raises:
        ValueError: If *state* does not match the regime of *constants*.
    """
    regime = constants.regime
    resonant = isinstance(regime, DeepSpace) and regime.resonant is not None
    if resonant and state is None:
        raise ValueError("a resonant deep-space orbit requires a ResonanceState")
    if not resonant and state is not None:
        raise ValueError("a ResonanceState is only valid for resonant deep-space orbits")

    t = jnp.asarray(t, dtype=get_dtype())
    p22 = constants.orbit_0.right_ascension + constants.right_ascension_dot * t + constants.k0 * t * t
    p23 = constants.orbit_0.argument_of_perigee + constants.argument_of_perigee_dot * t

    if isinstance(regime, NearEarth):
        return _near_earth_elements(constants, regime, t, p22, p23), None
    return _deep_space_elements(constants, regime, state, t, p22, p23)


def propagate_from_state(
    constants: Constants,
    t: ArrayLike,
    state: ResonanceState | None,
) -> tuple[Prediction, ResonanceState | None]:
    """Propagate to time *t*, resuming resonance integration from *state*.

    Passing back the returned state on the next call avoids re-integrating
    from epoch.  This is only valid while successive times keep the same
    sign and do not decrease in magnitude; the order is not checked.

    Args:
        constants: Initialized :class:`~sgpjax.Constants`.
        t: Minutes since epoch.
        state: ``initial_state(constants)`` or a state returned by an
            earlier call; ``None`` for non-resonant orbits.

    Returns:
        Tuple ``(prediction, state)``.

    Examples:
        ```python
        state = initial_state(constants)
        for t in (720.0, 1440.0, 2160.0):
            prediction, state = propagate_from_state(constants, t, state)
        ```
    """
    elements, state = orbital_elements(constants, t, state)
    geopotential = constants.geopotential

    p37 = 1.0 / (elements.semi_major_axis * (1.0 - elements.eccentricity**2))
    axn = elements.eccentricity * jnp.cos(elements.argument_of_perigee)
    ayn = elements.eccentricity * jnp.sin(elements.argument_of_perigee) + p37 * elements.k2
    p38 = jnp.fmod(
        elements.mean_anomaly + elements.argument_of_perigee + p37 * elements.k5 * axn,
        TWOPI,
    )
    ew = solve_kepler(p38, axn, ayn, tolerance=get_kepler_tolerance())

    oriented = short_period_state(elements, geopotential, axn, ayn, ew)
    return orientation_to_prediction(oriented, geopotential), state


def propagate(constants: Constants, t: ArrayLike) -> Prediction:
    """Propagate to time *t* (stateless).

    Resonance integration restarts from epoch on every call, so this is the
    function to use under ``jax.vmap``.

    Args:
        constants: Initialized :class:`~sgpjax.Constants`.
        t: Minutes since epoch.

    Returns:
        TEME :class:`~sgpjax.Prediction` (km, km/s).

    Examples:
        ```python
        import jax
        import jax.numpy as jnp

        prediction = propagate(constants, 90.0)
        batch = jax.vmap(lambda t: propagate(constants, t))(jnp.linspace(0.0, 1440.0, 97))
        ```
    """
    prediction, _ = propagate_from_state(constants, t, initial_state(constants))
    return prediction
