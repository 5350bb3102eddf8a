"""
sgpjax: SGP4/SDP4 satellite propagation in JAX.

Initialization runs at Python time and produces an immutable
:class:`Constants` record; propagation is JAX-traceable and works under
``jax.jit`` and ``jax.vmap``.
"""

from sgpjax.config import get_dtype, get_kepler_tolerance, set_dtype
from sgpjax._geopotential import (
    GEOPOTENTIALS,
    WGS72,
    WGS72OLD,
    WGS84,
    Geopotential,
    resolve_geopotential,
)
from sgpjax._initializer import Constants, constants_from_orbit, regime_name, sgp4_init
from sgpjax._kepler import KeplerSolution, solve_kepler, solve_kepler_with_info
from sgpjax._propagation import orbital_elements, propagate, propagate_from_state
from sgpjax._regime import (
    DeepSpace,
    Elliptic,
    Geosynchronous,
    HighAltitude,
    Molniya,
    NearEarth,
    Resonant,
)
from sgpjax._resonance import ResonanceState, initial_state, integrate
from sgpjax._satellite import Satellite
from sgpjax._third_body import Dots, Perturbations, long_period_periodic_effects, perturbations_and_dots
from sgpjax._time import (
    afspc_epoch_to_sidereal_time,
    epoch_to_j2000_years,
    epoch_to_j2000_years_afspc,
    iau_epoch_to_sidereal_time,
)
from sgpjax._transform import OrientedState, orientation_to_prediction, short_period_state
from sgpjax._types import (
    CompatibilityMode,
    Elements,
    ElementsError,
    Orbit,
    Prediction,
    PropagatedElements,
)

__all__ = [
    # Config
    "get_dtype",
    "get_kepler_tolerance",
    "set_dtype",
    # Geopotential
    "GEOPOTENTIALS",
    "Geopotential",
    "WGS72",
    "WGS72OLD",
    "WGS84",
    "resolve_geopotential",
    # Types
    "CompatibilityMode",
    "Elements",
    "ElementsError",
    "Orbit",
    "Prediction",
    "PropagatedElements",
    # Time
    "afspc_epoch_to_sidereal_time",
    "epoch_to_j2000_years",
    "epoch_to_j2000_years_afspc",
    "iau_epoch_to_sidereal_time",
    # Initialization
    "Constants",
    "constants_from_orbit",
    "regime_name",
    "sgp4_init",
    # Regimes
    "DeepSpace",
    "Elliptic",
    "Geosynchronous",
    "HighAltitude",
    "Molniya",
    "NearEarth",
    "Resonant",
    # Third body
    "Dots",
    "Perturbations",
    "long_period_periodic_effects",
    "perturbations_and_dots",
    # Kepler
    "KeplerSolution",
    "solve_kepler",
    "solve_kepler_with_info",
    # Resonance
    "ResonanceState",
    "initial_state",
    "integrate",
    # Propagation
    "orbital_elements",
    "propagate",
    "propagate_from_state",
    # Transform
    "OrientedState",
    "orientation_to_prediction",
    "short_period_state",
    # Satellite
    "Satellite",
]
