"""High-level satellite class for SGP4/SDP4 propagation.

Provides :class:`Satellite`, a convenience wrapper that combines
initialization and propagation into a single object.
"""

from __future__ import annotations

import datetime

import jax
import jax.numpy as jnp
from jax.typing import ArrayLike

from sgpjax._geopotential import WGS84, Geopotential, resolve_geopotential
from sgpjax._initializer import Constants, regime_name, sgp4_init
from sgpjax._propagation import propagate, propagate_from_state
from sgpjax._resonance import ResonanceState, initial_state
from sgpjax._types import CompatibilityMode, Elements, Prediction
from sgpjax.config import get_dtype


class Satellite:
    """Mean elements with SGP4/SDP4 propagation.

    Initializes once on construction and keeps the resulting
    :class:`~sgpjax.Constants`.  ``propagate`` restarts resonance
    integration from epoch on every call; ``propagate_from_state`` lets the
    caller carry the integrator state between calls.

    Examples:
        ```python
        from sgpjax import Satellite

        sat = Satellite(elements)
        sat.regime                     # 'near-earth/high-altitude/elliptic'
        prediction = sat.propagate(60.0)
        batch = sat.propagate_many(jnp.arange(0.0, 1440.0, 10.0))
        batch.position.shape           # (144, 3)
        ```

    Args:
        elements: Mean elements at epoch.
        geopotential: Gravity model or model name.
        mode: Compatibility mode.

    Raises:
        ElementsError: If the elements cannot be initialized.
    """

    def __init__(
        self,
        elements: Elements,
        geopotential: str | Geopotential = WGS84,
        mode: CompatibilityMode = CompatibilityMode.DEFAULT,
    ) -> None:
        self._elements = elements
        self._geopotential = resolve_geopotential(geopotential)
        self._mode = CompatibilityMode(mode)
        self._constants = sgp4_init(elements, self._geopotential, self._mode)
        self._propagate_many = jax.jit(jax.vmap(lambda t: propagate(self._constants, t)))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def elements(self) -> Elements:
        """Mean elements the satellite was built from."""
        return self._elements

    @property
    def epoch(self) -> datetime.datetime:
        """Element set epoch."""
        return self._elements.epoch

    @property
    def geopotential(self) -> Geopotential:
        return self._geopotential

    @property
    def mode(self) -> CompatibilityMode:
        return self._mode

    @property
    def constants(self) -> Constants:
        """Initialized propagation constants."""
        return self._constants

    @property
    def regime(self) -> str:
        """Short tag of the propagation regime (see :func:`regime_name`)."""
        return regime_name(self._constants)

    # ------------------------------------------------------------------
    # Propagation
    # ------------------------------------------------------------------

    def propagate(self, t: ArrayLike) -> Prediction:
        """Position [km] and velocity [km/s] in TEME at *t* minutes since epoch."""
        return propagate(self._constants, t)

    def propagate_many(self, times: ArrayLike) -> Prediction:
        """Vectorized :meth:`propagate` over a 1-D array of times.

        Args:
            times: Minutes since epoch, shape ``(N,)``.

        Returns:
            Prediction whose position and velocity have shape ``(N, 3)``.
        """
        return self._propagate_many(jnp.asarray(times, dtype=get_dtype()))

    def initial_state(self) -> ResonanceState | None:
        """Resonance integrator state at epoch, ``None`` if not resonant."""
        return initial_state(self._constants)

    def propagate_from_state(
        self, t: ArrayLike, state: ResonanceState | None
    ) -> tuple[Prediction, ResonanceState | None]:
        """Propagate to *t*, resuming the resonance integration from *state*.

        Successive calls must keep one sign of *t* and never decrease its
        magnitude; see :func:`~sgpjax.propagate_from_state`.
        """
        return propagate_from_state(self._constants, t, state)

    def __repr__(self) -> str:
        name = self._elements.object_name or self._elements.norad_id or "unnamed"
        return (
            f"Satellite({name!s}, epoch={self._elements.epoch.isoformat()}, "
            f"regime={self.regime!r}, mode={self._mode.name})"
        )
