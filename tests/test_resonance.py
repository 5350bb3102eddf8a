"""Tests for the deep-space resonance integrator."""

import jax
import jax.numpy as jnp
import pytest

from sgpjax import (
    ResonanceState,
    initial_state,
    integrate,
    orbital_elements,
    propagate,
    propagate_from_state,
    sgp4_init,
)
from sgpjax._resonance import DELTA_T


def _secular_angles(constants, t):
    """Secular right ascension and argument of perigee at *t*."""
    p22 = (
        constants.orbit_0.right_ascension
        + constants.right_ascension_dot * t
        + constants.k0 * t * t
    )
    p23 = constants.orbit_0.argument_of_perigee + constants.argument_of_perigee_dot * t
    return p22, p23


@pytest.fixture(params=["geo_elements", "molniya_elements"])
def resonant_constants(request):
    return sgp4_init(request.getfixturevalue(request.param))


class TestInitialState:
    def test_none_for_near_earth(self, iss_elements) -> None:
        assert initial_state(sgp4_init(iss_elements)) is None

    def test_none_for_non_resonant(self, gps_elements) -> None:
        assert initial_state(sgp4_init(gps_elements)) is None

    def test_epoch_values(self, resonant_constants) -> None:
        state = initial_state(resonant_constants)
        assert isinstance(state, ResonanceState)
        assert float(state.t) == 0.0
        assert float(state.mean_motion) == resonant_constants.orbit_0.mean_motion
        assert float(state.lambda_) == resonant_constants.regime.resonant.lambda_0


class TestIntegrate:
    def test_no_step_at_epoch(self, resonant_constants) -> None:
        p22, p23 = _secular_angles(resonant_constants, 0.0)
        state, _, _ = integrate(resonant_constants, initial_state(resonant_constants), 0.0, p22, p23)
        assert float(state.t) == 0.0

    def test_no_step_within_one_interval(self, resonant_constants) -> None:
        for t in (100.0, 719.0, -100.0, -719.0):
            p22, p23 = _secular_angles(resonant_constants, t)
            state, _, _ = integrate(resonant_constants, initial_state(resonant_constants), t, p22, p23)
            assert float(state.t) == 0.0

    @pytest.mark.parametrize(
        ("t", "expected"),
        [
            (720.0, 720.0),
            (1000.0, 720.0),
            (1440.0, 1440.0),
            (2500.0, 2160.0),
            (-720.0, -720.0),
            (-1500.0, -1440.0),
        ],
    )
    def test_step_count(self, resonant_constants, t: float, expected: float) -> None:
        p22, p23 = _secular_angles(resonant_constants, t)
        state, _, _ = integrate(resonant_constants, initial_state(resonant_constants), t, p22, p23)
        assert float(state.t) == expected

    def test_steps_are_multiples_of_delta_t(self, resonant_constants) -> None:
        p22, p23 = _secular_angles(resonant_constants, 5000.0)
        state, _, _ = integrate(resonant_constants, initial_state(resonant_constants), 5000.0, p22, p23)
        assert float(state.t) % DELTA_T == 0.0

    def test_mean_motion_drifts(self, resonant_constants) -> None:
        p22, p23 = _secular_angles(resonant_constants, 1440.0)
        state, a, _ = integrate(
            resonant_constants, initial_state(resonant_constants), 1440.0, p22, p23
        )
        assert float(state.mean_motion) != resonant_constants.orbit_0.mean_motion
        assert float(a) > 1.0

    def test_vmap_over_time(self, resonant_constants) -> None:
        times = jnp.array([-2000.0, 0.0, 800.0, 3000.0])
        p22, p23 = _secular_angles(resonant_constants, times)
        start = initial_state(resonant_constants)

        def run(t, p22, p23):
            return integrate(resonant_constants, start, t, p22, p23)

        states, _, _ = jax.vmap(run)(times, p22, p23)
        assert states.t.tolist() == [-1440.0, 0.0, 720.0, 2880.0]


class TestResumability:
    def test_resume_matches_direct(self, resonant_constants) -> None:
        direct, _ = propagate_from_state(
            resonant_constants, 1440.0, initial_state(resonant_constants)
        )
        _, state = propagate_from_state(
            resonant_constants, 720.0, initial_state(resonant_constants)
        )
        assert float(state.t) == 720.0
        resumed, state = propagate_from_state(resonant_constants, 1440.0, state)
        assert float(state.t) == 1440.0
        assert jnp.allclose(resumed.position, direct.position, rtol=0.0, atol=1e-9)
        assert jnp.allclose(resumed.velocity, direct.velocity, rtol=0.0, atol=1e-12)

    def test_resume_backward(self, resonant_constants) -> None:
        direct = propagate(resonant_constants, -2880.0)
        state = initial_state(resonant_constants)
        for t in (-720.0, -1440.0, -2160.0, -2880.0):
            resumed, state = propagate_from_state(resonant_constants, t, state)
        assert jnp.allclose(resumed.position, direct.position, rtol=0.0, atol=1e-9)
        assert jnp.allclose(resumed.velocity, direct.velocity, rtol=0.0, atol=1e-12)

    def test_stateless_restarts_from_epoch(self, resonant_constants) -> None:
        first = propagate(resonant_constants, 1440.0)
        propagate(resonant_constants, 4320.0)
        second = propagate(resonant_constants, 1440.0)
        assert jnp.array_equal(first.position, second.position)


class TestStateValidation:
    def test_resonant_requires_state(self, resonant_constants) -> None:
        with pytest.raises(ValueError, match="ResonanceState"):
            orbital_elements(resonant_constants, 60.0, None)

    def test_non_resonant_rejects_state(self, gps_elements, geo_elements) -> None:
        state = initial_state(sgp4_init(geo_elements))
        with pytest.raises(ValueError, match="ResonanceState"):
            orbital_elements(sgp4_init(gps_elements), 60.0, state)
