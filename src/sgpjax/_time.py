"""
Epoch and sidereal time formulas consumed by SGP4 initialization.

Two UT1 to Julian-epoch conversions are provided: the accurate one used by
default, and the legacy one used by the AFSPC reference implementation.
Both return fractional Julian years since 2000-01-01 12:00:00.  The matching
Greenwich sidereal time formulas take that value as input.
"""

from __future__ import annotations

import datetime
import math

from sgpjax.constants import DAYS_PER_JULIAN_YEAR, JD_J2000, TWOPI


def _calendar_parts(epoch: datetime.datetime) -> tuple[float, float]:
    """Split a datetime into the integer calendar count and day of month.

    Aware datetimes are converted to UTC first; naive datetimes are taken
    as UTC (UT1 for SGP4 purposes).

    Returns:
        Tuple ``(calendar_days, day_of_month)`` where ``day_of_month``
        includes the fraction of the day.
    """
    if epoch.tzinfo is not None:
        epoch = epoch.astimezone(datetime.timezone.utc)

    year = epoch.year
    month = epoch.month
    calendar_days = 367 * year - (7 * (year + (month + 9) // 12)) // 4 + 275 * month // 9
    seconds = (
        epoch.hour * 3600.0 + epoch.minute * 60.0 + epoch.second + epoch.microsecond * 1e-6
    )
    return float(calendar_days), epoch.day + seconds / 86400.0


def epoch_to_j2000_years(epoch: datetime.datetime) -> float:
    """Convert a UT1 datetime to Julian years since J2000 (accurate formula).

    Args:
        epoch: Element set epoch.

    Returns:
        Fractional Julian years since 2000-01-01 12:00:00.

    Examples:
        ```python
        import datetime
        epoch_to_j2000_years(datetime.datetime(2000, 1, 1, 12))  # 0.0
        ```
    """
    calendar_days, day_of_month = _calendar_parts(epoch)
    return (calendar_days - 730531.5 + day_of_month) / DAYS_PER_JULIAN_YEAR


def epoch_to_j2000_years_afspc(epoch: datetime.datetime) -> float:
    """Convert a UT1 datetime to Julian years since J2000 (legacy formula).

    The intermediate value is a Julian date, which reproduces the rounding
    of the AFSPC reference implementation.

    Args:
        epoch: Element set epoch.

    Returns:
        Fractional Julian years since 2000-01-01 12:00:00.
    """
    calendar_days, day_of_month = _calendar_parts(epoch)
    return (calendar_days + 1721013.5 + day_of_month - JD_J2000) / DAYS_PER_JULIAN_YEAR


def afspc_epoch_to_sidereal_time(epoch: float) -> float:
    """Greenwich sidereal time at epoch, AFSPC formula.

    Args:
        epoch: Julian years since J2000.

    Returns:
        Sidereal time in ``[0, 2pi)`` [rad].
    """
    d1970 = (epoch + 30.0) * DAYS_PER_JULIAN_YEAR + 1.0
    whole_days = math.floor(d1970 + 1.0e-8)
    return (
        1.7321343856509374
        + 1.72027916940703639e-2 * whole_days
        + (1.72027916940703639e-2 + TWOPI) * (d1970 - whole_days)
        + d1970**2 * 5.07551419432269442e-15
    ) % TWOPI


def iau_epoch_to_sidereal_time(epoch: float) -> float:
    """Greenwich sidereal time at epoch, IAU 1982 formula.

    Args:
        epoch: Julian years since J2000.

    Returns:
        Sidereal time in ``[0, 2pi)`` [rad].
    """
    c2000 = epoch / 100.0
    return (
        (
            -6.2e-6 * c2000**3
            + 0.093104 * c2000**2
            + (876600.0 * 3600.0 + 8640184.812866) * c2000
            + 67310.54841
        )
        * (math.pi / 180.0)
        / 240.0
    ) % TWOPI
