"""
SGP4/SDP4 initialization.

Converts mean elements at epoch into an immutable :class:`Constants` record
holding every coefficient the propagator needs, and selects the regime
(near-earth low/high altitude, deep-space non-resonant/geosynchronous/
Molniya).  Everything here runs at Python time with ``math`` floats; the
result is consumed by the JAX-traceable routines in ``_propagation``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from math import atan2 as _py_atan2
from math import cos as _py_cos
from math import fabs as _py_fabs
from math import fmod as _py_fmod
from math import sin as _py_sin
from math import sqrt as _py_sqrt
from typing import NamedTuple

from sgpjax._geopotential import WGS84, Geopotential, resolve_geopotential
from sgpjax._regime import (
    DeepSpace,
    Elliptic,
    Geosynchronous,
    HighAltitude,
    Molniya,
    NearEarth,
    Regime,
    Resonant,
    describe_regime,
)
from sgpjax._third_body import (
    LUNAR_ECCENTRICITY,
    LUNAR_MEAN_MOTION,
    LUNAR_PERTURBATION_COEFFICIENT,
    SOLAR_ARGUMENT_OF_PERIGEE_COSINE,
    SOLAR_ARGUMENT_OF_PERIGEE_SINE,
    SOLAR_ECCENTRICITY,
    SOLAR_INCLINATION_COSINE,
    SOLAR_INCLINATION_SINE,
    SOLAR_MEAN_MOTION,
    SOLAR_PERTURBATION_COEFFICIENT,
    Dots,
    perturbations_and_dots,
)
from sgpjax._time import afspc_epoch_to_sidereal_time, iau_epoch_to_sidereal_time
from sgpjax._types import CompatibilityMode, Elements, ElementsError, Orbit
from sgpjax.constants import DEEP_SPACE_MEAN_MOTION, SIDEREAL_SPEED, TWOPI

logger = logging.getLogger(__name__)

# Resonance windows [rad/min]
_GEOSYNCHRONOUS_MIN_MEAN_MOTION = 0.0034906585
_GEOSYNCHRONOUS_MAX_MEAN_MOTION = 0.0052359877
_MOLNIYA_MIN_MEAN_MOTION = 8.26e-3
_MOLNIYA_MAX_MEAN_MOTION = 9.24e-3
_MOLNIYA_MIN_ECCENTRICITY = 0.5

_LYDDANE_INCLINATION = 0.2
_ELLIPTIC_ECCENTRICITY = 1.0e-4


class Constants(NamedTuple):
    """Initialization-time coefficients of one satellite.

    Immutable and safe to share between threads.  The record contains the
    compatibility mode (an enum), so close over it inside ``jax.jit`` /
    ``jax.vmap`` rather than passing it as a traced argument.

    Attributes:
        geopotential: Gravity model used at initialization.
        mode: Formula set for the Lyddane branch.
        orbit_0: Brouwer mean elements at epoch.
        drag_term: B* drag coefficient [1/earth radii].
        epoch: Julian years since J2000.
        right_ascension_dot: Secular node rate [rad/min].
        argument_of_perigee_dot: Secular perigee rate [rad/min].
        mean_anomaly_dot: Secular mean anomaly rate [rad/min].
        c1: First-order drag coefficient.
        c4: Eccentricity drag coefficient.
        k0: Quadratic node drag coefficient.
        k1: Quadratic mean anomaly drag coefficient (``1.5 C1``).
        regime: Regime variant with its own coefficients.
    """

    geopotential: Geopotential
    mode: CompatibilityMode
    orbit_0: Orbit
    drag_term: float
    epoch: float
    right_ascension_dot: float
    argument_of_perigee_dot: float
    mean_anomaly_dot: float
    c1: float
    c4: float
    k0: float
    k1: float
    regime: Regime


def _sqrt(value: float, name: str) -> float:
    """Square root that reports a negative radicand as a domain error."""
    if value < 0.0:
        raise ElementsError(f"{name} is negative ({value!r})")
    return _py_sqrt(value)


def _short_period_k5(geopotential: Geopotential, sin_i: float, cos_i: float) -> float:
    denominator = 1.0 + cos_i
    if _py_fabs(denominator) <= 1.5e-12:
        denominator = 1.5e-12
    return -0.25 * geopotential.j3oj2 * sin_i * (3.0 + 5.0 * cos_i) / denominator


# ---------------------------------------------------------------------------
# Near-earth (SGP4)
# ---------------------------------------------------------------------------


def _near_earth(
    geopotential: Geopotential,
    drag_term: float,
    orbit_0: Orbit,
    p1: float,
    a0: float,
    s: float,
    xi: float,
    eta: float,
    c1: float,
    k6: float,
    p2: float,
    p3: float,
    p7: float,
    p9: float,
) -> NearEarth:
    sin_i0 = _py_sin(orbit_0.inclination)

    high_altitude = None
    if p3 >= 220.0 / geopotential.ae + 1.0:
        d2 = 4.0 * a0 * xi * c1 * c1
        p16 = d2 * xi * c1 / 3.0
        d3 = (17.0 * a0 + s) * p16
        d4 = 0.5 * p16 * a0 * xi * (221.0 * a0 + 31.0 * s) * c1

        elliptic = None
        if orbit_0.eccentricity > _ELLIPTIC_ECCENTRICITY:
            elliptic = Elliptic(
                k11=(1.0 + eta * _py_cos(orbit_0.mean_anomaly)) ** 3,
                k12=drag_term
                * (
                    -2.0
                    * p7
                    * xi
                    * geopotential.j3oj2
                    * orbit_0.mean_motion
                    * sin_i0
                    / orbit_0.eccentricity
                )
                * _py_cos(orbit_0.argument_of_perigee),
                k13=-2.0 / 3.0 * p7 * drag_term / (orbit_0.eccentricity * eta),
            )

        high_altitude = HighAltitude(
            c5=drag_term
            * (
                2.0
                * p9
                * a0
                * p2
                * (
                    1.0
                    + 2.75 * (eta * eta + eta * orbit_0.eccentricity)
                    + eta * orbit_0.eccentricity * eta * eta
                )
            ),
            d2=d2,
            d3=d3,
            d4=d4,
            eta=eta,
            k7=_py_sin(orbit_0.mean_anomaly),
            k8=d2 + 2.0 * c1 * c1,
            k9=0.25 * (3.0 * d3 + c1 * (12.0 * d2 + 10.0 * c1 * c1)),
            k10=0.2 * (3.0 * d4 + 12.0 * c1 * d3 + 6.0 * d2 * d2 + 15.0 * c1 * c1 * (2.0 * d2 + c1 * c1)),
            elliptic=elliptic,
        )

    return NearEarth(
        a0=a0,
        k2=-0.5 * geopotential.j3oj2 * sin_i0,
        k3=1.0 - p1 * p1,
        k4=7.0 * p1 * p1 - 1.0,
        k5=_short_period_k5(geopotential, sin_i0, p1),
        k6=k6,
        high_altitude=high_altitude,
    )


# ---------------------------------------------------------------------------
# Deep-space (SDP4)
# ---------------------------------------------------------------------------


def _geosynchronous(orbit_0: Orbit, p1: float, a0: float) -> Geosynchronous:
    e0sq = orbit_0.eccentricity * orbit_0.eccentricity
    sin_i0 = _py_sin(orbit_0.inclination)
    p17 = 3.0 * (orbit_0.mean_motion / a0) ** 2
    return Geosynchronous(
        dr1=p17
        * (0.9375 * sin_i0 * sin_i0 * (1.0 + 3.0 * p1) - 0.75 * (1.0 + p1))
        * (1.0 + 2.0 * e0sq)
        * 2.1460748e-6
        / a0,
        dr2=2.0
        * p17
        * (0.75 * (1.0 + p1) ** 2)
        * (1.0 + e0sq * (-2.5 + 0.8125 * e0sq))
        * 1.7891679e-6,
        dr3=3.0
        * p17
        * (1.875 * (1.0 + p1) ** 3)
        * (1.0 + e0sq * (-6.0 + 6.60937 * e0sq))
        * 2.2123015e-7
        / a0,
    )


def _molniya(orbit_0: Orbit, p1: float, a0: float, k14: float) -> Molniya:
    """Half-day resonance coefficients.

    The ``D_lmpk`` terms follow the historically implemented formulas,
    which omit the ``(l - 2p + k)`` factor of the underlying derivation.
    Reproducing them keeps the output identical to the reference.
    """
    e0 = orbit_0.eccentricity
    e0sq = e0 * e0
    e0cu = e0sq * e0
    sin_i0 = _py_sin(orbit_0.inclination)
    sin_i0sq = sin_i0 * sin_i0
    p1sq = p1 * p1

    p18 = 3.0 * orbit_0.mean_motion**2 * (1.0 / a0) ** 2
    p19 = p18 * (1.0 / a0)
    p20 = p19 * (1.0 / a0)
    p21 = p20 * (1.0 / a0)
    f220 = 0.75 * (1.0 + 2.0 * p1 + p1sq)

    if e0 <= 0.65:
        g211 = 3.616 - 13.247 * e0 + 16.29 * e0sq
        g310 = -19.302 + 117.39 * e0 - 228.419 * e0sq + 156.591 * e0cu
        g322 = -18.9068 + 109.7927 * e0 - 214.6334 * e0sq + 146.5816 * e0cu
        g410 = -41.122 + 242.694 * e0 - 471.094 * e0sq + 313.953 * e0cu
        g422 = -146.407 + 841.88 * e0 - 1629.014 * e0sq + 1083.435 * e0cu
    else:
        g211 = -72.099 + 331.819 * e0 - 508.738 * e0sq + 266.724 * e0cu
        g310 = -346.844 + 1582.851 * e0 - 2415.925 * e0sq + 1246.113 * e0cu
        g322 = -342.585 + 1554.908 * e0 - 2366.899 * e0sq + 1215.972 * e0cu
        g410 = -1052.797 + 4758.686 * e0 - 7193.992 * e0sq + 3651.957 * e0cu
        g422 = -3581.69 + 16178.11 * e0 - 24462.77 * e0sq + 12422.52 * e0cu

    if e0 <= 0.65:
        g520 = -532.114 + 3017.977 * e0 - 5740.032 * e0sq + 3708.276 * e0cu
    elif e0 < 0.715:
        g520 = 1464.74 - 4664.75 * e0 + 3763.64 * e0sq
    else:
        g520 = -5149.66 + 29936.92 * e0 - 54087.36 * e0sq + 31324.56 * e0cu

    if e0 < 0.7:
        g532 = -853.666 + 4690.25 * e0 - 8624.77 * e0sq + 5341.4 * e0cu
        g521 = -822.71072 + 4568.6173 * e0 - 8491.4146 * e0sq + 5337.524 * e0cu
        g533 = -919.2277 + 4988.61 * e0 - 9064.77 * e0sq + 5542.21 * e0cu
    else:
        g532 = -40023.88 + 170470.89 * e0 - 242699.48 * e0sq + 115605.82 * e0cu
        g521 = -51752.104 + 218913.95 * e0 - 309468.16 * e0sq + 146349.42 * e0cu
        g533 = -37995.78 + 161616.52 * e0 - 229838.2 * e0sq + 109377.94 * e0cu

    return Molniya(
        d2201=p18 * 1.7891679e-6 * f220 * (-0.306 - (e0 - 0.64) * 0.44),
        d2211=p18 * 1.7891679e-6 * (1.5 * sin_i0sq) * g211,
        d3210=p19 * 3.7393792e-7 * (1.875 * sin_i0 * (1.0 - 2.0 * p1 - 3.0 * p1sq)) * g310,
        d3222=p19 * 3.7393792e-7 * (-1.875 * sin_i0 * (1.0 + 2.0 * p1 - 3.0 * p1sq)) * g322,
        d4410=2.0 * p20 * 7.3636953e-9 * (35.0 * sin_i0sq * f220) * g410,
        d4422=2.0 * p20 * 7.3636953e-9 * (39.375 * sin_i0sq * sin_i0sq) * g422,
        d5220=p21
        * 1.1428639e-7
        * (
            9.84375
            * sin_i0
            * (
                sin_i0sq * (1.0 - 2.0 * p1 - 5.0 * p1sq)
                + 0.33333333 * (-2.0 + 4.0 * p1 + 6.0 * p1sq)
            )
        )
        * g520,
        d5232=p21
        * 1.1428639e-7
        * (
            sin_i0
            * (
                4.92187512 * sin_i0sq * (-2.0 - 4.0 * p1 + 10.0 * p1sq)
                + 6.56250012 * (1.0 + 2.0 * p1 - 3.0 * p1sq)
            )
        )
        * g532,
        d5421=2.0
        * p21
        * 2.1765803e-9
        * (29.53125 * sin_i0 * (2.0 - 8.0 * p1 + p1sq * (-12.0 + 8.0 * p1 + 10.0 * p1sq)))
        * g521,
        d5433=2.0
        * p21
        * 2.1765803e-9
        * (29.53125 * sin_i0 * (-2.0 - 8.0 * p1 + p1sq * (12.0 + 8.0 * p1 - 10.0 * p1sq)))
        * g533,
        k14=k14,
    )


def _deep_space(
    epoch_to_sidereal_time: Callable[[float], float],
    epoch: float,
    orbit_0: Orbit,
    p1: float,
    a0: float,
    b0: float,
    k14: float,
    p2: float,
    p14: float,
    p15: float,
) -> tuple[DeepSpace, Dots, Dots]:
    d1900 = (epoch + 100.0) * 365.25
    sin_node = _py_sin(orbit_0.right_ascension)
    cos_node = _py_cos(orbit_0.right_ascension)

    solar, solar_dots = perturbations_and_dots(
        orbit_0.inclination,
        orbit_0.eccentricity,
        orbit_0.argument_of_perigee,
        orbit_0.mean_motion,
        SOLAR_INCLINATION_SINE,
        SOLAR_INCLINATION_COSINE,
        sin_node,
        cos_node,
        SOLAR_ECCENTRICITY,
        SOLAR_ARGUMENT_OF_PERIGEE_SINE,
        SOLAR_ARGUMENT_OF_PERIGEE_COSINE,
        SOLAR_PERTURBATION_COEFFICIENT,
        SOLAR_MEAN_MOTION,
        _py_fmod(6.2565837 + 0.017201977 * d1900, TWOPI),
        p2,
        b0,
    )

    # Lunar orbit geometry at epoch
    lunar_node_epsilon = _py_fmod(4.5236020 - 9.2422029e-4 * d1900, TWOPI)
    lunar_inclination_cosine = 0.91375164 - 0.03568096 * _py_cos(lunar_node_epsilon)
    lunar_inclination_sine = _sqrt(
        1.0 - lunar_inclination_cosine**2, "the lunar inclination sine radicand"
    )
    lunar_node_sine = 0.089683511 * _py_sin(lunar_node_epsilon) / lunar_inclination_sine
    lunar_node_cosine = _sqrt(1.0 - lunar_node_sine**2, "the lunar node cosine radicand")
    lunar_argument_of_perigee = (
        5.8351514
        + 0.001944368 * d1900
        + _py_atan2(
            0.39785416 * _py_sin(lunar_node_epsilon) / lunar_inclination_sine,
            lunar_node_cosine * _py_cos(lunar_node_epsilon)
            + 0.91744867 * lunar_node_sine * _py_sin(lunar_node_epsilon),
        )
        - lunar_node_epsilon
    )

    lunar, lunar_dots = perturbations_and_dots(
        orbit_0.inclination,
        orbit_0.eccentricity,
        orbit_0.argument_of_perigee,
        orbit_0.mean_motion,
        lunar_inclination_sine,
        lunar_inclination_cosine,
        sin_node * lunar_node_cosine - cos_node * lunar_node_sine,
        lunar_node_cosine * cos_node + lunar_node_sine * sin_node,
        LUNAR_ECCENTRICITY,
        _py_sin(lunar_argument_of_perigee),
        _py_cos(lunar_argument_of_perigee),
        LUNAR_PERTURBATION_COEFFICIENT,
        LUNAR_MEAN_MOTION,
        _py_fmod(-1.1151842 + 0.228027132 * d1900, TWOPI),
        p2,
        b0,
    )

    n0 = orbit_0.mean_motion
    geosynchronous = _GEOSYNCHRONOUS_MIN_MEAN_MOTION < n0 < _GEOSYNCHRONOUS_MAX_MEAN_MOTION
    molniya = (
        _MOLNIYA_MIN_MEAN_MOTION <= n0 <= _MOLNIYA_MAX_MEAN_MOTION
        and orbit_0.eccentricity >= _MOLNIYA_MIN_ECCENTRICITY
    )

    resonant = None
    if geosynchronous or molniya:
        sidereal_time_0 = epoch_to_sidereal_time(epoch)
        if geosynchronous:
            resonant = Resonant(
                lambda_0=_py_fmod(
                    orbit_0.mean_anomaly
                    + orbit_0.right_ascension
                    + orbit_0.argument_of_perigee
                    - sidereal_time_0,
                    TWOPI,
                ),
                lambda_dot_0=p15
                + (k14 + p14)
                - SIDEREAL_SPEED
                + (solar_dots.mean_anomaly + lunar_dots.mean_anomaly)
                + (solar_dots.argument_of_perigee + lunar_dots.argument_of_perigee)
                + (solar_dots.right_ascension + lunar_dots.right_ascension)
                - n0,
                sidereal_time_0=sidereal_time_0,
                resonance=_geosynchronous(orbit_0, p1, a0),
            )
        else:
            resonant = Resonant(
                lambda_0=_py_fmod(
                    orbit_0.mean_anomaly
                    + orbit_0.right_ascension
                    + orbit_0.right_ascension
                    - sidereal_time_0
                    - sidereal_time_0,
                    TWOPI,
                ),
                lambda_dot_0=p15
                + (solar_dots.mean_anomaly + lunar_dots.mean_anomaly)
                + 2.0
                * (
                    p14
                    + (solar_dots.right_ascension + lunar_dots.right_ascension)
                    - SIDEREAL_SPEED
                )
                - n0,
                sidereal_time_0=sidereal_time_0,
                resonance=_molniya(orbit_0, p1, a0, k14),
            )

    regime = DeepSpace(
        eccentricity_dot=solar_dots.eccentricity + lunar_dots.eccentricity,
        inclination_dot=solar_dots.inclination + lunar_dots.inclination,
        solar=solar,
        lunar=lunar,
        resonant=resonant,
        a0=a0,
        lyddane_candidate=orbit_0.inclination < _LYDDANE_INCLINATION,
    )
    return regime, solar_dots, lunar_dots


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def constants_from_orbit(
    geopotential: Geopotential,
    epoch_to_sidereal_time: Callable[[float], float],
    epoch: float,
    drag_term: float,
    orbit_0: Orbit,
    mode: CompatibilityMode = CompatibilityMode.DEFAULT,
) -> Constants:
    """Compute the propagation constants of Brouwer mean elements.

    Args:
        geopotential: Gravity model.
        epoch_to_sidereal_time: Sidereal time formula, called with *epoch*
            only for resonant deep-space orbits.
        epoch: Julian years since J2000.
        drag_term: B* drag coefficient [1/earth radii].
        orbit_0: Brouwer mean elements at epoch.
        mode: Formula set for the Lyddane branch.

    Returns:
        The initialized :class:`Constants`.

    Raises:
        ElementsError: If the eccentricity is outside ``[0, 1)``, the mean
            motion is not positive, or a derived square root has a negative
            radicand.
    """
    if not 0.0 <= orbit_0.eccentricity < 1.0:
        raise ElementsError("the eccentricity must be in the range [0, 1[")
    if not orbit_0.mean_motion > 0.0:
        raise ElementsError("the Brouwer mean motion must be positive")

    e0 = orbit_0.eccentricity
    n0 = orbit_0.mean_motion
    p1 = _py_cos(orbit_0.inclination)
    p1sq = p1 * p1
    p2 = 1.0 - e0 * e0
    k6 = 3.0 * p1sq - 1.0
    a0 = (geopotential.ke / n0) ** (2.0 / 3.0)
    p3 = a0 * (1.0 - e0)

    # Perigee-dependent atmospheric density parameter
    p4 = geopotential.ae * (p3 - 1.0)
    if p4 < 98.0:
        p5 = 20.0
    elif p4 < 156.0:
        p5 = p4 - 78.0
    else:
        p5 = 78.0
    s = p5 / geopotential.ae + 1.0
    p6 = ((120.0 - p5) / geopotential.ae) ** 4

    xi = 1.0 / (a0 - s)
    p7 = p6 * xi**4
    eta = a0 * e0 * xi
    p8 = _py_fabs(1.0 - eta * eta)
    p9 = p7 / p8**3.5

    c1 = drag_term * (
        p9
        * n0
        * (
            a0 * (1.0 + 1.5 * eta * eta + e0 * eta * (4.0 + eta * eta))
            + 0.375 * geopotential.j2 * xi / p8 * k6 * (8.0 + 3.0 * eta * eta * (8.0 + eta * eta))
        )
    )

    p10 = 1.0 / (a0 * p2) ** 2
    b0 = _sqrt(p2, "1 - e0^2")
    p11 = 1.5 * geopotential.j2 * p10 * n0
    p12 = 0.5 * p11 * geopotential.j2 * p10
    p13 = -0.46875 * geopotential.j4 * p10 * p10 * n0
    p14 = -p11 * p1 + (
        0.5 * p12 * (4.0 - 19.0 * p1sq) + 2.0 * p13 * (3.0 - 7.0 * p1sq)
    ) * p1
    k14 = (
        -0.5 * p11 * (1.0 - 5.0 * p1sq)
        + 0.0625 * p12 * (7.0 - 114.0 * p1sq + 395.0 * p1sq * p1sq)
        + p13 * (3.0 - 36.0 * p1sq + 49.0 * p1sq * p1sq)
    )
    p15 = (
        n0
        + 0.5 * p11 * b0 * k6
        + 0.0625 * p12 * b0 * (13.0 - 78.0 * p1sq + 137.0 * p1sq * p1sq)
    )

    c4 = drag_term * (
        2.0
        * n0
        * p9
        * a0
        * p2
        * (
            eta * (2.0 + 0.5 * eta * eta)
            + e0 * (0.5 + 2.0 * eta * eta)
            - geopotential.j2
            * xi
            / (a0 * p8)
            * (
                -3.0 * k6 * (1.0 - 2.0 * e0 * eta + eta * eta * (1.5 - 0.5 * e0 * eta))
                + 0.75
                * (1.0 - p1sq)
                * (2.0 * eta * eta - e0 * eta * (1.0 + eta * eta))
                * _py_cos(2.0 * orbit_0.argument_of_perigee)
            )
        )
    )
    k0 = 3.5 * p2 * (-p11 * p1) * c1
    k1 = 1.5 * c1

    if n0 > DEEP_SPACE_MEAN_MOTION:
        regime = _near_earth(geopotential, drag_term, orbit_0, p1, a0, s, xi, eta, c1, k6, p2, p3, p7, p9)
        right_ascension_dot = p14
        argument_of_perigee_dot = k14
        mean_anomaly_dot = p15
    else:
        regime, solar_dots, lunar_dots = _deep_space(
            epoch_to_sidereal_time, epoch, orbit_0, p1, a0, b0, k14, p2, p14, p15
        )
        right_ascension_dot = p14 + (solar_dots.right_ascension + lunar_dots.right_ascension)
        argument_of_perigee_dot = k14 + (
            solar_dots.argument_of_perigee + lunar_dots.argument_of_perigee
        )
        mean_anomaly_dot = p15 + (solar_dots.mean_anomaly + lunar_dots.mean_anomaly)

    constants = Constants(
        geopotential=geopotential,
        mode=CompatibilityMode(mode),
        orbit_0=orbit_0,
        drag_term=drag_term,
        epoch=epoch,
        right_ascension_dot=right_ascension_dot,
        argument_of_perigee_dot=argument_of_perigee_dot,
        mean_anomaly_dot=mean_anomaly_dot,
        c1=c1,
        c4=c4,
        k0=k0,
        k1=k1,
        regime=regime,
    )
    logger.debug(
        "Initialized %s propagator (n0=%.12g rad/min, e0=%.8g)",
        describe_regime(regime),
        n0,
        e0,
    )
    return constants


def sgp4_init(
    elements: Elements,
    geopotential: str | Geopotential = WGS84,
    mode: CompatibilityMode = CompatibilityMode.DEFAULT,
) -> Constants:
    """Initialize SGP4/SDP4 from mean elements.

    ``CompatibilityMode.DEFAULT`` uses the accurate epoch conversion and
    the IAU sidereal time formula.  ``CompatibilityMode.AFSPC`` uses the
    legacy epoch conversion, the AFSPC sidereal time formula, and the
    legacy Lyddane argument of perigee; combine it with ``WGS72`` to
    reproduce the AFSPC reference output.

    Args:
        elements: Mean elements at epoch.
        geopotential: Gravity model or model name (``'wgs72old'``,
            ``'wgs72'``, ``'wgs84'``).
        mode: Compatibility mode.

    Returns:
        The initialized :class:`Constants`.

    Raises:
        ElementsError: If the elements cannot be initialized.
        ValueError: If *geopotential* is an unknown model name.

    Examples:
        ```python
        from sgpjax import WGS72, CompatibilityMode, propagate, sgp4_init

        constants = sgp4_init(elements)
        prediction = propagate(constants, 60.0)

        legacy = sgp4_init(elements, WGS72, CompatibilityMode.AFSPC)
        ```
    """
    geopotential = resolve_geopotential(geopotential)
    mode = CompatibilityMode(mode)

    if mode is CompatibilityMode.AFSPC:
        epoch = elements.j2000_years_afspc()
        epoch_to_sidereal_time = afspc_epoch_to_sidereal_time
    else:
        epoch = elements.j2000_years()
        epoch_to_sidereal_time = iau_epoch_to_sidereal_time

    if elements.mean_motion_convention == "brouwer":
        orbit_0 = Orbit(
            inclination=elements.inclination,
            right_ascension=elements.right_ascension,
            eccentricity=elements.eccentricity,
            argument_of_perigee=elements.argument_of_perigee,
            mean_anomaly=elements.mean_anomaly,
            mean_motion=elements.mean_motion,
        )
    else:
        orbit_0 = Orbit.from_kozai_elements(
            geopotential,
            elements.inclination,
            elements.right_ascension,
            elements.eccentricity,
            elements.argument_of_perigee,
            elements.mean_anomaly,
            elements.mean_motion,
        )

    return constants_from_orbit(
        geopotential,
        epoch_to_sidereal_time,
        epoch,
        elements.drag_term,
        orbit_0,
        mode,
    )


def regime_name(constants: Constants) -> str:
    """Return a short tag describing the regime of *constants*.

    One of ``'near-earth/low-altitude'``, ``'near-earth/high-altitude'``,
    ``'near-earth/high-altitude/elliptic'``, ``'deep-space/non-resonant'``,
    ``'deep-space/geosynchronous'`` or ``'deep-space/molniya'``.
    """
    return describe_regime(constants.regime)
