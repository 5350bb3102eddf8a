"""
Data types for the SGP4/SDP4 propagator.
"""

from __future__ import annotations

import datetime
import enum
import math
from dataclasses import dataclass
from typing import NamedTuple

from jax import Array

from sgpjax._geopotential import Geopotential
from sgpjax._time import epoch_to_j2000_years, epoch_to_j2000_years_afspc
from sgpjax.constants import DEG2RAD, REVPERDAY2RADPERMIN


class ElementsError(ValueError):
    """Raised when orbital elements cannot be initialized.

    Covers an eccentricity outside ``[0, 1)``, a non-positive mean motion,
    and any derived quantity that would require the square root of a
    negative number.
    """


class CompatibilityMode(enum.IntEnum):
    """Formula set used for epoch, sidereal time and the Lyddane branch.

    ``DEFAULT`` uses the accurate epoch conversion, the IAU sidereal time
    formula and the continuous Lyddane argument of perigee.  ``AFSPC``
    reproduces the legacy AFSPC reference implementation.
    """

    DEFAULT = 0
    AFSPC = 1


@dataclass(frozen=True)
class Elements:
    """Mean orbital elements at epoch.

    This is a plain Python dataclass (not a JAX pytree).  Angles are in
    radians and mean motion in radians per minute.  Metadata fields are
    carried untouched and are never used by the propagator.

    Attributes:
        epoch: Element set epoch (UT1; naive datetimes are taken as UTC).
        inclination: Angle between the equator and the orbit plane [rad].
        right_ascension: Right ascension of the ascending node [rad].
        eccentricity: Shape of the orbit, in ``[0, 1)``.
        argument_of_perigee: Angle from the ascending node to perigee [rad].
        mean_anomaly: Mean anomaly at epoch [rad].
        mean_motion: Mean motion [rad/min].
        drag_term: B* drag coefficient [1/earth radii].
        object_name: Optional satellite name.
        norad_id: Optional NORAD catalog number.
        international_designator: Optional COSPAR designator.
        mean_motion_dot: First derivative of mean motion divided by 2
            [rev/day^2]. Not used by SGP4.
        mean_motion_ddot: Second derivative of mean motion divided by 6
            [rev/day^3]. Not used by SGP4.
        mean_motion_convention: ``'kozai'`` (element sets as published) or
            ``'brouwer'`` (already converted).
    """

    epoch: datetime.datetime
    inclination: float
    right_ascension: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float
    drag_term: float
    object_name: str | None = None
    norad_id: int | None = None
    international_designator: str | None = None
    mean_motion_dot: float = 0.0
    mean_motion_ddot: float = 0.0
    mean_motion_convention: str = "kozai"

    def __post_init__(self) -> None:
        if self.mean_motion_convention not in ("kozai", "brouwer"):
            raise ValueError(
                f"Unsupported mean motion convention {self.mean_motion_convention!r}. "
                f"Must be 'kozai' or 'brouwer'"
            )

    @classmethod
    def from_degrees(
        cls,
        epoch: datetime.datetime,
        inclination: float,
        right_ascension: float,
        eccentricity: float,
        argument_of_perigee: float,
        mean_anomaly: float,
        mean_motion: float,
        drag_term: float,
        **metadata,
    ) -> Elements:
        """Build elements from the units used by published element sets.

        Args:
            epoch: Element set epoch.
            inclination: Inclination [deg].
            right_ascension: Right ascension of the ascending node [deg].
            eccentricity: Eccentricity.
            argument_of_perigee: Argument of perigee [deg].
            mean_anomaly: Mean anomaly [deg].
            mean_motion: Mean motion [rev/day].
            drag_term: B* drag coefficient [1/earth radii].
            **metadata: Any of the optional metadata fields.

        Returns:
            Elements with angles in radians and mean motion in rad/min.

        Examples:
            ```python
            import datetime
            from sgpjax import Elements

            iss = Elements.from_degrees(
                epoch=datetime.datetime(2008, 9, 20, 12, 25, 40),
                inclination=51.6416,
                right_ascension=247.4627,
                eccentricity=0.0006703,
                argument_of_perigee=130.5360,
                mean_anomaly=325.0288,
                mean_motion=15.72125391,
                drag_term=-0.11606e-4,
            )
            ```
        """
        return cls(
            epoch=epoch,
            inclination=inclination * DEG2RAD,
            right_ascension=right_ascension * DEG2RAD,
            eccentricity=eccentricity,
            argument_of_perigee=argument_of_perigee * DEG2RAD,
            mean_anomaly=mean_anomaly * DEG2RAD,
            mean_motion=mean_motion * REVPERDAY2RADPERMIN,
            drag_term=drag_term,
            **metadata,
        )

    def j2000_years(self) -> float:
        """Epoch in Julian years since J2000, accurate formula."""
        return epoch_to_j2000_years(self.epoch)

    def j2000_years_afspc(self) -> float:
        """Epoch in Julian years since J2000, legacy AFSPC formula."""
        return epoch_to_j2000_years_afspc(self.epoch)


class Orbit(NamedTuple):
    """Brouwer mean elements at epoch.

    Attributes:
        inclination: Inclination [rad].
        right_ascension: Right ascension of the ascending node [rad].
        eccentricity: Eccentricity.
        argument_of_perigee: Argument of perigee [rad].
        mean_anomaly: Mean anomaly [rad].
        mean_motion: Brouwer mean motion [rad/min].
    """

    inclination: float
    right_ascension: float
    eccentricity: float
    argument_of_perigee: float
    mean_anomaly: float
    mean_motion: float

    @classmethod
    def from_kozai_elements(
        cls,
        geopotential: Geopotential,
        inclination: float,
        right_ascension: float,
        eccentricity: float,
        argument_of_perigee: float,
        mean_anomaly: float,
        kozai_mean_motion: float,
    ) -> Orbit:
        """Convert a Kozai mean motion to Brouwer mean elements.

        The correction is closed-form (no iteration).  All other elements
        pass through unchanged.

        Args:
            geopotential: Gravity model.
            inclination: Inclination [rad].
            right_ascension: Right ascension of the ascending node [rad].
            eccentricity: Eccentricity, in ``[0, 1)``.
            argument_of_perigee: Argument of perigee [rad].
            mean_anomaly: Mean anomaly [rad].
            kozai_mean_motion: Kozai mean motion [rad/min].

        Returns:
            The Brouwer mean elements.

        Raises:
            ElementsError: If the Kozai or Brouwer mean motion is not
                positive, or the eccentricity is outside ``[0, 1)``.
        """
        if not kozai_mean_motion > 0.0:
            raise ElementsError("the Kozai mean motion must be positive")
        if not 0.0 <= eccentricity < 1.0:
            raise ElementsError("the eccentricity must be in the range [0, 1[")

        a1 = (geopotential.ke / kozai_mean_motion) ** (2.0 / 3.0)
        p0 = (
            0.75
            * geopotential.j2
            * (3.0 * math.cos(inclination) ** 2 - 1.0)
            / (1.0 - eccentricity**2) ** 1.5
        )
        d1 = p0 / a1**2
        d0 = p0 / (a1 * (1.0 - d1**2 - d1 * (1.0 / 3.0 + 134.0 * d1**2 / 81.0))) ** 2
        mean_motion = kozai_mean_motion / (1.0 + d0)

        if not mean_motion > 0.0:
            raise ElementsError("the Brouwer mean motion must be positive")

        return cls(
            inclination=inclination,
            right_ascension=right_ascension,
            eccentricity=eccentricity,
            argument_of_perigee=argument_of_perigee,
            mean_anomaly=mean_anomaly,
            mean_motion=mean_motion,
        )


class PropagatedElements(NamedTuple):
    """Perturbed mean elements at a propagation time.

    ``k2`` to ``k6`` are the short-period coefficients used by the
    coordinate transform.  Near-earth orbits reuse the epoch values;
    deep-space orbits recompute them from the perturbed inclination.

    Attributes:
        inclination: Inclination [rad].
        right_ascension: Right ascension of the ascending node [rad].
        eccentricity: Eccentricity.
        argument_of_perigee: Argument of perigee [rad].
        mean_anomaly: Mean anomaly [rad].
        mean_motion: Mean motion [rad/min].
        semi_major_axis: Semi-major axis [earth radii].
        k2: ``-J3/(2 J2) sin I``.
        k3: ``1 - cos^2 I``.
        k4: ``7 cos^2 I - 1``.
        k5: ``-J3/(4 J2) sin I (3 + 5 cos I) / (1 + cos I)``.
        k6: ``3 cos^2 I - 1``.
    """

    inclination: Array
    right_ascension: Array
    eccentricity: Array
    argument_of_perigee: Array
    mean_anomaly: Array
    mean_motion: Array
    semi_major_axis: Array
    k2: Array
    k3: Array
    k4: Array
    k5: Array
    k6: Array


class Prediction(NamedTuple):
    """Propagated state in the TEME frame of epoch.

    Attributes:
        position: Position ``(3,)`` [km].
        velocity: Velocity ``(3,)`` [km/s].
    """

    position: Array
    velocity: Array
