"""
Short-period correction and conversion to TEME position and velocity.
"""

from __future__ import annotations

from typing import NamedTuple

import jax.numpy as jnp
from jax import Array

from sgpjax._geopotential import Geopotential
from sgpjax._types import Prediction, PropagatedElements


class OrientedState(NamedTuple):
    """Osculating polar state after the short-period J2 correction.

    Attributes:
        radius: Radius [earth radii].
        argument_of_latitude: Argument of latitude [rad].
        inclination: Inclination [rad].
        right_ascension: Right ascension of the ascending node [rad].
        radius_dot: Radial velocity [earth radii / ke-scaled min].
        radius_argument_of_latitude_dot: Transverse velocity (r times the
            argument of latitude rate) in the same units.
    """

    radius: Array
    argument_of_latitude: Array
    inclination: Array
    right_ascension: Array
    radius_dot: Array
    radius_argument_of_latitude_dot: Array


def short_period_state(
    elements: PropagatedElements,
    geopotential: Geopotential,
    axn: Array,
    ayn: Array,
    ew: Array,
) -> OrientedState:
    """Apply the J2 short-period correction to the solved Kepler state.

    A negative semi-latus rectum produces NaN in every component.

    Args:
        elements: Perturbed elements at the propagation time.
        geopotential: Gravity model.
        axn: ``e cos(omega)``.
        ayn: ``e sin(omega)`` plus the long-period J3 term.
        ew: Solution of Kepler's equation ``E + omega`` [rad].

    Returns:
        The corrected :class:`OrientedState`.
    """
    a = elements.semi_major_axis
    sin_ew = jnp.sin(ew)
    cos_ew = jnp.cos(ew)

    p39 = axn * axn + ayn * ayn
    pl = a * (1.0 - p39)
    p40 = axn * sin_ew - ayn * cos_ew
    r = a * (1.0 - (axn * cos_ew + ayn * sin_ew))
    r_dot = jnp.sqrt(a) * p40 / r
    b = jnp.sqrt(1.0 - p39)
    p41 = p40 / (1.0 + b)
    p42 = a / r * (sin_ew - ayn - axn * p41)
    p43 = a / r * (cos_ew - axn + ayn * p41)
    u = jnp.arctan2(p42, p43)
    p44 = 2.0 * p43 * p42
    p45 = 1.0 - 2.0 * p42 * p42
    half_j2_over_pl = 0.5 * geopotential.j2 / pl
    p46 = half_j2_over_pl / pl

    cos_i = jnp.cos(elements.inclination)
    sin_i = jnp.sin(elements.inclination)
    rk = r * (1.0 - 1.5 * p46 * b * elements.k6) + 0.5 * half_j2_over_pl * elements.k3 * p45
    uk = u - 0.25 * p46 * elements.k4 * p44
    inclination_k = elements.inclination + 1.5 * p46 * cos_i * sin_i * p45
    right_ascension_k = elements.right_ascension + 1.5 * p46 * cos_i * p44
    rk_dot = r_dot - elements.mean_motion * half_j2_over_pl * elements.k3 * p44 / geopotential.ke
    rfk_dot = (
        jnp.sqrt(pl) / r
        + elements.mean_motion
        * half_j2_over_pl
        * (elements.k3 * p45 + 1.5 * elements.k6)
        / geopotential.ke
    )

    # Negative semi-latus rectum
    valid = pl >= 0.0
    return OrientedState(
        *(
            jnp.where(valid, x, jnp.nan)
            for x in (rk, uk, inclination_k, right_ascension_k, rk_dot, rfk_dot)
        )
    )


def orientation_to_prediction(state: OrientedState, geopotential: Geopotential) -> Prediction:
    """Convert an oriented state to TEME position [km] and velocity [km/s]."""
    sin_node = jnp.sin(state.right_ascension)
    cos_node = jnp.cos(state.right_ascension)
    sin_i = jnp.sin(state.inclination)
    cos_i = jnp.cos(state.inclination)
    sin_u = jnp.sin(state.argument_of_latitude)
    cos_u = jnp.cos(state.argument_of_latitude)

    # Unit vectors along the radius (u) and the transverse direction (v)
    ux = -sin_node * cos_i * sin_u + cos_node * cos_u
    uy = cos_node * cos_i * sin_u + sin_node * cos_u
    uz = sin_i * sin_u
    vx = -sin_node * cos_i * cos_u - cos_node * sin_u
    vy = cos_node * cos_i * cos_u - sin_node * sin_u
    vz = sin_i * cos_u

    rk = state.radius * geopotential.ae
    kms = geopotential.kms_per_unit_velocity
    rk_dot = state.radius_dot
    rfk_dot = state.radius_argument_of_latitude_dot
    position = jnp.stack([rk * ux, rk * uy, rk * uz])
    velocity = jnp.stack(
        [
            (rk_dot * ux + rfk_dot * vx) * kms,
            (rk_dot * uy + rfk_dot * vy) * kms,
            (rk_dot * uz + rfk_dot * vz) * kms,
        ]
    )
    return Prediction(position=position, velocity=velocity)
