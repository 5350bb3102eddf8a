"""
Solar and lunar perturbations for the deep-space (SDP4) propagator.

``perturbations_and_dots`` runs at initialization with Python floats and
returns the secular rates plus the coefficients of the long-period periodic
terms.  ``long_period_periodic_effects`` evaluates those terms at a
propagation time and is JAX-traceable.
"""

from __future__ import annotations

from math import cos as _py_cos
from math import pi as _py_pi
from math import sin as _py_sin
from typing import NamedTuple

import jax.numpy as jnp
from jax import Array
from jax.typing import ArrayLike

# ---------------------------------------------------------------------------
# Fixed third-body constants
# ---------------------------------------------------------------------------

SOLAR_ECCENTRICITY = 0.01675
"""Solar eccentricity."""

LUNAR_ECCENTRICITY = 0.05490
"""Lunar eccentricity."""

SOLAR_MEAN_MOTION = 1.19459e-5
"""Solar mean motion [rad/min]."""

LUNAR_MEAN_MOTION = 1.5835218e-4
"""Lunar mean motion [rad/min]."""

SOLAR_PERTURBATION_COEFFICIENT = 2.9864797e-6
"""Solar perturbation coefficient [rad/min]."""

LUNAR_PERTURBATION_COEFFICIENT = 4.7968065e-7
"""Lunar perturbation coefficient [rad/min]."""

SOLAR_INCLINATION_SINE = 0.39785416
SOLAR_INCLINATION_COSINE = 0.91744867
SOLAR_ARGUMENT_OF_PERIGEE_SINE = -0.98088458
SOLAR_ARGUMENT_OF_PERIGEE_COSINE = 0.1945905

# Below this inclination (or within it of pi) the third-body node rate is zero.
_NODE_RATE_INCLINATION_LIMIT = 5.2359877e-2


class Perturbations(NamedTuple):
    """Coefficients of one body's long-period periodic terms."""

    kx0: float
    kx1: float
    kx2: float
    kx3: float
    kx4: float
    kx5: float
    kx6: float
    kx7: float
    kx8: float
    kx9: float
    kx10: float
    kx11: float
    mean_anomaly_0: float


class Dots(NamedTuple):
    """Secular rates induced by one body [rad/min, 1/min for eccentricity]."""

    inclination: float
    right_ascension: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float


def perturbations_and_dots(
    inclination_0: float,
    eccentricity_0: float,
    argument_of_perigee_0: float,
    mean_motion_0: float,
    body_inclination_sine: float,
    body_inclination_cosine: float,
    delta_right_ascension_sine: float,
    delta_right_ascension_cosine: float,
    body_eccentricity: float,
    body_argument_of_perigee_sine: float,
    body_argument_of_perigee_cosine: float,
    body_perturbation_coefficient: float,
    body_mean_motion: float,
    body_mean_anomaly_0: float,
    p2: float,
    b0: float,
) -> tuple[Perturbations, Dots]:
    """Compute one body's periodic coefficients and secular rates.

    Args:
        inclination_0: Satellite inclination at epoch [rad].
        eccentricity_0: Satellite eccentricity at epoch.
        argument_of_perigee_0: Satellite argument of perigee at epoch [rad].
        mean_motion_0: Satellite Brouwer mean motion [rad/min].
        body_inclination_sine: Sine of the body's inclination.
        body_inclination_cosine: Cosine of the body's inclination.
        delta_right_ascension_sine: Sine of the satellite node minus the
            body node.
        delta_right_ascension_cosine: Cosine of the same angle.
        body_eccentricity: The body's eccentricity.
        body_argument_of_perigee_sine: Sine of the body's argument of perigee.
        body_argument_of_perigee_cosine: Cosine of the same angle.
        body_perturbation_coefficient: Linear scaling factor [rad/min].
        body_mean_motion: The body's mean motion [rad/min].
        body_mean_anomaly_0: The body's mean anomaly at epoch [rad].
        p2: ``1 - e0^2``.
        b0: ``sqrt(1 - e0^2)``.

    Returns:
        Tuple ``(perturbations, dots)``.
    """
    e0sq = eccentricity_0 * eccentricity_0
    sin_i0 = _py_sin(inclination_0)
    cos_i0 = _py_cos(inclination_0)
    sin_w0 = _py_sin(argument_of_perigee_0)
    cos_w0 = _py_cos(argument_of_perigee_0)

    a1 = (
        body_argument_of_perigee_cosine * delta_right_ascension_cosine
        + body_argument_of_perigee_sine * body_inclination_cosine * delta_right_ascension_sine
    )
    a3 = (
        -body_argument_of_perigee_sine * delta_right_ascension_cosine
        + body_argument_of_perigee_cosine * body_inclination_cosine * delta_right_ascension_sine
    )
    a7 = (
        -body_argument_of_perigee_cosine * delta_right_ascension_sine
        + body_argument_of_perigee_sine * body_inclination_cosine * delta_right_ascension_cosine
    )
    a8 = body_argument_of_perigee_sine * body_inclination_sine
    a9 = (
        body_argument_of_perigee_sine * delta_right_ascension_sine
        + body_argument_of_perigee_cosine * body_inclination_cosine * delta_right_ascension_cosine
    )
    a10 = body_argument_of_perigee_cosine * body_inclination_sine
    a2 = cos_i0 * a7 + sin_i0 * a8
    a4 = cos_i0 * a9 + sin_i0 * a10
    a5 = -sin_i0 * a7 + cos_i0 * a8
    a6 = -sin_i0 * a9 + cos_i0 * a10

    x1 = a1 * cos_w0 + a2 * sin_w0
    x2 = a3 * cos_w0 + a4 * sin_w0
    x3 = -a1 * sin_w0 + a2 * cos_w0
    x4 = -a3 * sin_w0 + a4 * cos_w0
    x5 = a5 * sin_w0
    x6 = a6 * sin_w0
    x7 = a5 * cos_w0
    x8 = a6 * cos_w0

    z31 = 12.0 * x1 * x1 - 3.0 * x3 * x3
    z32 = 24.0 * x1 * x2 - 6.0 * x3 * x4
    z33 = 12.0 * x2 * x2 - 3.0 * x4 * x4
    z11 = -6.0 * a1 * a5 + e0sq * (-24.0 * x1 * x7 - 6.0 * x3 * x5)
    z12 = -6.0 * (a1 * a6 + a3 * a5) + e0sq * (
        -24.0 * (x2 * x7 + x1 * x8) - 6.0 * (x3 * x6 + x4 * x5)
    )
    z13 = -6.0 * a3 * a6 + e0sq * (-24.0 * x2 * x8 - 6.0 * x4 * x6)
    z21 = 6.0 * a2 * a5 + e0sq * (24.0 * x1 * x5 - 6.0 * x3 * x7)
    z22 = 6.0 * (a4 * a5 + a2 * a6) + e0sq * (
        24.0 * (x2 * x5 + x1 * x6) - 6.0 * (x4 * x7 + x3 * x8)
    )
    z23 = 6.0 * a4 * a6 + e0sq * (24.0 * x2 * x6 - 6.0 * x4 * x8)
    z1 = (3.0 * (a1 * a1 + a2 * a2) + z31 * e0sq) * 2.0 + p2 * z31
    z2 = (6.0 * (a1 * a3 + a2 * a4) + z32 * e0sq) * 2.0 + p2 * z32
    z3 = (3.0 * (a3 * a3 + a4 * a4) + z33 * e0sq) * 2.0 + p2 * z33

    lx0 = body_perturbation_coefficient / mean_motion_0
    lx1 = -0.5 * lx0 / b0
    lx2 = lx0 * b0
    lx3 = -15.0 * eccentricity_0 * lx2

    if (
        inclination_0 < _NODE_RATE_INCLINATION_LIMIT
        or inclination_0 > _py_pi - _NODE_RATE_INCLINATION_LIMIT
    ):
        right_ascension_dot = 0.0
    else:
        right_ascension_dot = -body_mean_motion * lx1 * (z21 + z23) / sin_i0

    perturbations = Perturbations(
        kx0=2.0 * lx3 * (x2 * x3 + x1 * x4),
        kx1=2.0 * lx3 * (x2 * x4 - x1 * x3),
        kx2=2.0 * lx1 * z12,
        kx3=2.0 * lx1 * (z13 - z11),
        kx4=-2.0 * lx0 * z2,
        kx5=-2.0 * lx0 * (z3 - z1),
        kx6=-2.0 * lx0 * (-21.0 - 9.0 * e0sq) * body_eccentricity,
        kx7=2.0 * lx2 * z32,
        kx8=2.0 * lx2 * (z33 - z31),
        kx9=-18.0 * lx2 * body_eccentricity,
        kx10=-2.0 * lx1 * z22,
        kx11=-2.0 * lx1 * (z23 - z21),
        mean_anomaly_0=body_mean_anomaly_0,
    )
    dots = Dots(
        inclination=lx1 * body_mean_motion * (z11 + z13),
        right_ascension=right_ascension_dot,
        eccentricity=lx3 * body_mean_motion * (x1 * x3 + x2 * x4),
        argument_of_perigee=lx2 * body_mean_motion * (z31 + z33 - 6.0)
        - cos_i0 * right_ascension_dot,
        mean_anomaly=-body_mean_motion * lx0 * (z1 + z3 - 14.0 - 6.0 * e0sq),
    )
    return perturbations, dots


def long_period_periodic_effects(
    perturbations: Perturbations,
    body_eccentricity: float,
    body_mean_motion: float,
    t: ArrayLike,
) -> tuple[Array, Array, Array, Array, Array]:
    """Evaluate one body's long-period periodic terms at time *t*.

    Args:
        perturbations: Coefficients from ``perturbations_and_dots``.
        body_eccentricity: The body's eccentricity.
        body_mean_motion: The body's mean motion [rad/min].
        t: Minutes since epoch.

    Returns:
        Tuple ``(delta_eccentricity, delta_inclination, delta_mean_anomaly,
        l4, l5)`` where ``l4`` and ``l5`` feed the argument of perigee and
        right ascension corrections.
    """
    mean_anomaly = perturbations.mean_anomaly_0 + body_mean_motion * t
    fx = mean_anomaly + 2.0 * body_eccentricity * jnp.sin(mean_anomaly)
    sin_fx = jnp.sin(fx)
    f2 = 0.5 * sin_fx * sin_fx - 0.25
    f3 = -0.5 * sin_fx * jnp.cos(fx)
    p = perturbations
    return (
        p.kx0 * f2 + p.kx1 * f3,
        p.kx2 * f2 + p.kx3 * f3,
        p.kx4 * f2 + p.kx5 * f3 + p.kx6 * sin_fx,
        p.kx7 * f2 + p.kx8 * f3 + p.kx9 * sin_fx,
        p.kx10 * f2 + p.kx11 * f3,
    )
