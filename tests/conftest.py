import datetime

import jax.numpy as jnp
import pytest

from sgpjax import Elements
from sgpjax.config import set_dtype


@pytest.fixture(autouse=True)
def _ensure_float64():
    """Set float64 precision before every test.

    With pytest-xdist, each worker process starts with a fresh module, but
    test_config.py switches to float32 in its own autouse fixture.  This
    fixture ensures all other tests get float64.
    """
    set_dtype(jnp.float64)


def element_set_epoch(year: int, day_of_year: float) -> datetime.datetime:
    """Epoch of a two-line element set given as year and fractional day."""
    return datetime.datetime(year, 1, 1) + datetime.timedelta(days=day_of_year - 1.0)


@pytest.fixture()
def iss_elements() -> Elements:
    """ISS (25544), near-earth, high altitude, elliptic."""
    return Elements.from_degrees(
        epoch=element_set_epoch(2008, 264.51782528),
        inclination=51.6416,
        right_ascension=247.4627,
        eccentricity=0.0006703,
        argument_of_perigee=130.5360,
        mean_anomaly=325.0288,
        mean_motion=15.72125391,
        drag_term=-0.11606e-4,
        object_name="ISS (ZARYA)",
        norad_id=25544,
        international_designator="1998-067A",
    )


@pytest.fixture()
def low_altitude_elements() -> Elements:
    """Near-earth orbit with a perigee below 220 km."""
    return Elements.from_degrees(
        epoch=element_set_epoch(2008, 264.51782528),
        inclination=51.6,
        right_ascension=247.4627,
        eccentricity=0.001,
        argument_of_perigee=130.5360,
        mean_anomaly=325.0288,
        mean_motion=16.3,
        drag_term=1.0e-4,
    )


@pytest.fixture()
def near_circular_elements() -> Elements:
    """High-altitude near-earth orbit with ``e0 <= 1e-4``."""
    return Elements.from_degrees(
        epoch=element_set_epoch(2008, 264.51782528),
        inclination=51.6416,
        right_ascension=247.4627,
        eccentricity=0.00005,
        argument_of_perigee=130.5360,
        mean_anomaly=325.0288,
        mean_motion=15.0,
        drag_term=-0.11606e-4,
    )


@pytest.fixture()
def gps_elements() -> Elements:
    """GPS (28129), deep space, non-resonant."""
    return Elements.from_degrees(
        epoch=element_set_epoch(2006, 175.57071136),
        inclination=54.7298,
        right_ascension=324.8098,
        eccentricity=0.0048506,
        argument_of_perigee=266.2640,
        mean_anomaly=93.1663,
        mean_motion=2.00562768,
        drag_term=1.0e-4,
        norad_id=28129,
    )


@pytest.fixture()
def geo_elements() -> Elements:
    """Geosynchronous (28626), deep space, low inclination."""
    return Elements.from_degrees(
        epoch=element_set_epoch(2006, 176.46683397),
        inclination=0.0019,
        right_ascension=286.9433,
        eccentricity=0.0000335,
        argument_of_perigee=13.7918,
        mean_anomaly=55.6504,
        mean_motion=1.00270176,
        drag_term=1.0e-4,
        norad_id=28626,
    )


@pytest.fixture()
def molniya_elements() -> Elements:
    """Molniya (08195), deep space, 12 hour resonance."""
    return Elements.from_degrees(
        epoch=element_set_epoch(2006, 176.33215444),
        inclination=64.1586,
        right_ascension=279.0717,
        eccentricity=0.6877146,
        argument_of_perigee=264.7651,
        mean_anomaly=20.2257,
        mean_motion=2.00491383,
        drag_term=0.11873e-3,
        norad_id=8195,
    )
