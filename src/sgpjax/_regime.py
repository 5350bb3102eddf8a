"""
Propagation regimes selected once at initialization.

The regime is a closed set of ``NamedTuple`` variants nested inside
:class:`~sgpjax.Constants`.  Optional sub-regimes are ``None`` when absent,
so dispatch is an ``isinstance``/``is None`` test resolved at Python (trace)
time and the nested tuples remain valid JAX pytrees.
"""

from __future__ import annotations

from typing import NamedTuple, Union

from sgpjax._third_body import Perturbations


class Elliptic(NamedTuple):
    """Extra drag terms of high-altitude orbits with ``e0 > 1e-4``."""

    k11: float
    k12: float
    k13: float


class HighAltitude(NamedTuple):
    """Third to fifth order drag terms of orbits with perigee above 220 km."""

    c5: float
    d2: float
    d3: float
    d4: float
    eta: float
    k7: float
    k8: float
    k9: float
    k10: float
    elliptic: Elliptic | None


class NearEarth(NamedTuple):
    """SGP4 regime: orbital period below 225 minutes."""

    a0: float
    k2: float
    k3: float
    k4: float
    k5: float
    k6: float
    high_altitude: HighAltitude | None


class Geosynchronous(NamedTuple):
    """One-day resonance coefficients."""

    dr1: float
    dr2: float
    dr3: float


class Molniya(NamedTuple):
    """Half-day resonance coefficients.

    ``k14`` is the zonal argument of perigee rate used to advance the
    perigee phase of the resonance terms.
    """

    d2201: float
    d2211: float
    d3210: float
    d3222: float
    d4410: float
    d4422: float
    d5220: float
    d5232: float
    d5421: float
    d5433: float
    k14: float


Resonance = Union[Geosynchronous, Molniya]


class Resonant(NamedTuple):
    """Resonance angle and its rate at epoch, plus the resonance terms."""

    lambda_0: float
    lambda_dot_0: float
    sidereal_time_0: float
    resonance: Resonance


class DeepSpace(NamedTuple):
    """SDP4 regime: orbital period of 225 minutes or more.

    ``lyddane_candidate`` records whether the epoch inclination is below
    0.2 rad.  It is informational; the Lyddane branch is re-tested against
    the perturbed inclination at every propagation time.
    """

    eccentricity_dot: float
    inclination_dot: float
    solar: Perturbations
    lunar: Perturbations
    resonant: Resonant | None
    a0: float
    lyddane_candidate: bool


Regime = Union[NearEarth, DeepSpace]


def describe_regime(regime: Regime) -> str:
    """Return a short human-readable tag for *regime*.

    Examples:
        ```python
        describe_regime(constants.regime)  # 'near-earth/high-altitude/elliptic'
        ```
    """
    if isinstance(regime, NearEarth):
        if regime.high_altitude is None:
            return "near-earth/low-altitude"
        if regime.high_altitude.elliptic is None:
            return "near-earth/high-altitude"
        return "near-earth/high-altitude/elliptic"
    if regime.resonant is None:
        return "deep-space/non-resonant"
    if isinstance(regime.resonant.resonance, Geosynchronous):
        return "deep-space/geosynchronous"
    return "deep-space/molniya"
