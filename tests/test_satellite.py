"""Tests for the Satellite convenience class."""

import dataclasses

import jax.numpy as jnp
import pytest

from sgpjax import (
    WGS72,
    WGS84,
    CompatibilityMode,
    ElementsError,
    Prediction,
    ResonanceState,
    Satellite,
    propagate,
    sgp4_init,
)


class TestSatelliteConstruction:
    def test_defaults(self, iss_elements) -> None:
        sat = Satellite(iss_elements)
        assert sat.geopotential == WGS84
        assert sat.mode is CompatibilityMode.DEFAULT
        assert sat.elements is iss_elements
        assert sat.epoch == iss_elements.epoch
        assert sat.constants == sgp4_init(iss_elements)

    def test_geopotential_by_name(self, iss_elements) -> None:
        sat = Satellite(iss_elements, "wgs72", CompatibilityMode.AFSPC)
        assert sat.geopotential == WGS72
        assert sat.constants == sgp4_init(iss_elements, WGS72, CompatibilityMode.AFSPC)

    def test_mode_from_int(self, iss_elements) -> None:
        assert Satellite(iss_elements, mode=1).mode is CompatibilityMode.AFSPC

    def test_regime(self, iss_elements, gps_elements, molniya_elements) -> None:
        assert Satellite(iss_elements).regime == "near-earth/high-altitude/elliptic"
        assert Satellite(gps_elements).regime == "deep-space/non-resonant"
        assert Satellite(molniya_elements).regime == "deep-space/molniya"

    def test_invalid_elements_raise(self, iss_elements) -> None:
        with pytest.raises(ElementsError):
            Satellite(dataclasses.replace(iss_elements, eccentricity=1.2))

    def test_repr(self, iss_elements) -> None:
        text = repr(Satellite(iss_elements))
        assert "ISS (ZARYA)" in text
        assert "near-earth/high-altitude/elliptic" in text
        assert "DEFAULT" in text

    def test_repr_falls_back_to_norad_id(self, gps_elements) -> None:
        assert "28129" in repr(Satellite(gps_elements))


class TestSatellitePropagation:
    def test_propagate(self, iss_elements) -> None:
        sat = Satellite(iss_elements)
        prediction = sat.propagate(60.0)
        assert isinstance(prediction, Prediction)
        expected = propagate(sgp4_init(iss_elements), 60.0)
        assert jnp.array_equal(prediction.position, expected.position)
        assert jnp.array_equal(prediction.velocity, expected.velocity)

    def test_position_magnitude(self, iss_elements) -> None:
        prediction = Satellite(iss_elements).propagate(0.0)
        radius = float(jnp.linalg.norm(prediction.position))
        speed = float(jnp.linalg.norm(prediction.velocity))
        assert 6600.0 < radius < 6800.0
        assert 7.5 < speed < 7.9

    @pytest.mark.parametrize("fixture", ["iss_elements", "geo_elements", "molniya_elements"])
    def test_propagate_many(self, request, fixture: str) -> None:
        sat = Satellite(request.getfixturevalue(fixture))
        times = jnp.arange(-720.0, 1440.0, 90.0)
        batch = sat.propagate_many(times)
        assert batch.position.shape == (times.shape[0], 3)
        assert batch.velocity.shape == (times.shape[0], 3)
        for i in (0, 7, times.shape[0] - 1):
            single = sat.propagate(times[i])
            assert jnp.allclose(batch.position[i], single.position, rtol=0.0, atol=1e-8)
            assert jnp.allclose(batch.velocity[i], single.velocity, rtol=0.0, atol=1e-11)

    def test_propagate_many_accepts_list(self, iss_elements) -> None:
        batch = Satellite(iss_elements).propagate_many([0.0, 10.0])
        assert batch.position.shape == (2, 3)

    def test_initial_state(self, iss_elements, geo_elements) -> None:
        assert Satellite(iss_elements).initial_state() is None
        assert isinstance(Satellite(geo_elements).initial_state(), ResonanceState)

    def test_propagate_from_state(self, molniya_elements) -> None:
        sat = Satellite(molniya_elements)
        state = sat.initial_state()
        for t in (720.0, 1440.0, 2160.0):
            prediction, state = sat.propagate_from_state(t, state)
        assert float(state.t) == 2160.0
        direct = sat.propagate(2160.0)
        assert jnp.allclose(prediction.position, direct.position, rtol=0.0, atol=1e-9)

    def test_geosynchronous_radius(self, geo_elements) -> None:
        prediction = Satellite(geo_elements).propagate(1440.0)
        radius = float(jnp.linalg.norm(prediction.position))
        assert 42000.0 < radius < 42300.0
