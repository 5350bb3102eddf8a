"""Tests for the lunar-solar perturbation terms."""

import math

import jax
import jax.numpy as jnp

from sgpjax import long_period_periodic_effects, perturbations_and_dots, sgp4_init
from sgpjax._third_body import (
    SOLAR_ARGUMENT_OF_PERIGEE_COSINE,
    SOLAR_ARGUMENT_OF_PERIGEE_SINE,
    SOLAR_ECCENTRICITY,
    SOLAR_INCLINATION_COSINE,
    SOLAR_INCLINATION_SINE,
    SOLAR_MEAN_MOTION,
    SOLAR_PERTURBATION_COEFFICIENT,
)


def _solar(inclination: float, eccentricity: float = 0.01):
    n0 = 0.0044
    p2 = 1.0 - eccentricity * eccentricity
    return perturbations_and_dots(
        inclination,
        eccentricity,
        0.3,
        n0,
        SOLAR_INCLINATION_SINE,
        SOLAR_INCLINATION_COSINE,
        math.sin(1.2),
        math.cos(1.2),
        SOLAR_ECCENTRICITY,
        SOLAR_ARGUMENT_OF_PERIGEE_SINE,
        SOLAR_ARGUMENT_OF_PERIGEE_COSINE,
        SOLAR_PERTURBATION_COEFFICIENT,
        SOLAR_MEAN_MOTION,
        0.5,
        p2,
        math.sqrt(p2),
    )


class TestPerturbationsAndDots:
    def test_node_rate_zero_near_equatorial(self) -> None:
        _, dots = _solar(0.01)
        assert dots.right_ascension == 0.0

    def test_node_rate_zero_near_retrograde_equatorial(self) -> None:
        _, dots = _solar(math.pi - 0.01)
        assert dots.right_ascension == 0.0

    def test_node_rate_nonzero_when_inclined(self) -> None:
        _, dots = _solar(0.9)
        assert dots.right_ascension != 0.0

    def test_mean_anomaly_0_passthrough(self) -> None:
        perturbations, _ = _solar(0.9)
        assert perturbations.mean_anomaly_0 == 0.5


class TestLongPeriodPeriodicEffects:
    def test_finite(self, gps_elements) -> None:
        regime = sgp4_init(gps_elements).regime
        for value in long_period_periodic_effects(
            regime.solar, SOLAR_ECCENTRICITY, SOLAR_MEAN_MOTION, 1440.0
        ):
            assert bool(jnp.isfinite(value))

    def test_vmap_over_time(self, gps_elements) -> None:
        regime = sgp4_init(gps_elements).regime
        times = jnp.linspace(0.0, 10000.0, 5)
        effects = jax.vmap(
            lambda t: long_period_periodic_effects(
                regime.solar, SOLAR_ECCENTRICITY, SOLAR_MEAN_MOTION, t
            )
        )(times)
        assert len(effects) == 5
        for value in effects:
            assert value.shape == (5,)

    def test_bounded_eccentricity_change(self, gps_elements) -> None:
        regime = sgp4_init(gps_elements).regime
        times = jnp.linspace(-1.0e5, 1.0e5, 101)
        de, _, _, _, _ = long_period_periodic_effects(
            regime.solar, SOLAR_ECCENTRICITY, SOLAR_MEAN_MOTION, times
        )
        assert float(jnp.max(jnp.abs(de))) < 1e-2
