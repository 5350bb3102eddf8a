"""
Earth geopotential models for the SGP4/SDP4 propagator.

Provides three standard models: WGS72OLD, WGS72 (standard), and WGS84.
Values match the reference ``sgp4`` library.
"""

from __future__ import annotations

from math import sqrt
from typing import NamedTuple


class Geopotential(NamedTuple):
    """Earth gravity model constants for SGP4 propagation.

    Attributes:
        ae: Equatorial radius of the Earth [km].
        ke: Square root of the Earth's gravitational parameter
            [earth radii^1.5 / min].
        j2: Un-normalised second zonal harmonic.
        j3: Un-normalised third zonal harmonic.
        j4: Un-normalised fourth zonal harmonic.
    """

    ae: float
    ke: float
    j2: float
    j3: float
    j4: float

    @property
    def j3oj2(self) -> float:
        """Ratio J3/J2."""
        return self.j3 / self.j2

    @property
    def kms_per_unit_velocity(self) -> float:
        """Conversion factor from earth radii per minute to km/s."""
        return self.ae * self.ke / 60.0


WGS72OLD = Geopotential(
    ae=6378.135,
    ke=0.0743669161,
    j2=0.001082616,
    j3=-0.00000253881,
    j4=-0.00000165597,
)
"""WGS 72 Old gravity model (legacy, truncated ke)."""

# WGS 72 gravity constants (standard)
_mu_72 = 398600.8
_re_72 = 6378.135

WGS72 = Geopotential(
    ae=_re_72,
    ke=60.0 / sqrt(_re_72**3 / _mu_72),
    j2=0.001082616,
    j3=-0.00000253881,
    j4=-0.00000165597,
)
"""WGS 72 gravity model (standard for SGP4)."""

# WGS 84 gravity constants
_mu_84 = 398600.5
_re_84 = 6378.137

WGS84 = Geopotential(
    ae=_re_84,
    ke=60.0 / sqrt(_re_84**3 / _mu_84),
    j2=0.00108262998905,
    j3=-0.00000253215306,
    j4=-0.00000161098761,
)
"""WGS 84 gravity model."""

GEOPOTENTIALS = {
    "wgs72old": WGS72OLD,
    "wgs72": WGS72,
    "wgs84": WGS84,
}
"""Mapping of geopotential model names to ``Geopotential`` instances."""


def resolve_geopotential(geopotential: str | Geopotential) -> Geopotential:
    """Return a ``Geopotential`` given an instance or a model name.

    Args:
        geopotential: A ``Geopotential`` or one of ``'wgs72old'``,
            ``'wgs72'``, ``'wgs84'`` (case-insensitive).

    Returns:
        The matching ``Geopotential``.

    Raises:
        ValueError: If the name is not a known model.
    """
    if isinstance(geopotential, Geopotential):
        return geopotential
    try:
        return GEOPOTENTIALS[geopotential.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown geopotential model {geopotential!r}. Must be one of: "
            f"{', '.join(GEOPOTENTIALS)}"
        ) from None
