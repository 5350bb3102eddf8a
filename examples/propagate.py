# /// script
# requires-python = ">=3.11"
# dependencies = ["typer>=0.9.0", "sgpjax"]
#
# [tool.uv.sources]
# sgpjax = { path = ".." }
# ///
"""Propagate a small catalog of satellites with JIT-compiled, vmap'd SGP4.

Builds one :class:`sgpjax.Satellite` per catalog entry, propagates each over
a uniform time grid, and prints the regime, timing and the state at the end
of the span.  Optionally writes every sample to a CSV file.

Requires sgpjax to be installed (``uv pip install -e .`` from the repo root).

Usage:
    uv run examples/propagate.py [OPTIONS]

Examples:
    # Quick smoke test
    uv run examples/propagate.py --timestep 3600 --duration 0.1

    # One week at 60 s, legacy AFSPC output
    uv run examples/propagate.py --timestep 60 --duration 7.0 --afspc

    # Dump the samples
    uv run examples/propagate.py --duration 1.0 --output states.csv
"""

import csv
import datetime
import time
from pathlib import Path
from typing import Annotated

import jax
import jax.numpy as jnp
import typer

from sgpjax import WGS72, WGS84, CompatibilityMode, Elements, Satellite, set_dtype

set_dtype(jnp.float64)  # Must be before any JIT compilation


def _epoch(year: int, day_of_year: float) -> datetime.datetime:
    return datetime.datetime(year, 1, 1) + datetime.timedelta(days=day_of_year - 1.0)


CATALOG = [
    Elements.from_degrees(
        epoch=_epoch(2008, 264.51782528),
        inclination=51.6416,
        right_ascension=247.4627,
        eccentricity=0.0006703,
        argument_of_perigee=130.5360,
        mean_anomaly=325.0288,
        mean_motion=15.72125391,
        drag_term=-0.11606e-4,
        object_name="ISS (ZARYA)",
        norad_id=25544,
    ),
    Elements.from_degrees(
        epoch=_epoch(2006, 175.57071136),
        inclination=54.7298,
        right_ascension=324.8098,
        eccentricity=0.0048506,
        argument_of_perigee=266.2640,
        mean_anomaly=93.1663,
        mean_motion=2.00562768,
        drag_term=1.0e-4,
        object_name="GPS",
        norad_id=28129,
    ),
    Elements.from_degrees(
        epoch=_epoch(2006, 176.46683397),
        inclination=0.0019,
        right_ascension=286.9433,
        eccentricity=0.0000335,
        argument_of_perigee=13.7918,
        mean_anomaly=55.6504,
        mean_motion=1.00270176,
        drag_term=1.0e-4,
        object_name="GEO",
        norad_id=28626,
    ),
    Elements.from_degrees(
        epoch=_epoch(2006, 176.33215444),
        inclination=64.1586,
        right_ascension=279.0717,
        eccentricity=0.6877146,
        argument_of_perigee=264.7651,
        mean_anomaly=20.2257,
        mean_motion=2.00491383,
        drag_term=0.11873e-3,
        object_name="MOLNIYA",
        norad_id=8195,
    ),
]


def main(
    timestep: Annotated[float, typer.Option(help="Propagation timestep in seconds")] = 60.0,
    duration: Annotated[float, typer.Option(help="Propagation duration in days")] = 1.0,
    afspc: Annotated[
        bool, typer.Option(help="Use WGS72 and the legacy AFSPC formulas")
    ] = False,
    output: Annotated[Path | None, typer.Option(help="Write samples to this CSV file")] = None,
) -> None:
    """Propagate the built-in catalog with SGP4/SDP4."""
    devices = jax.devices()
    print(f"JAX devices: {len(devices)} x {devices[0].platform.upper()}")

    if afspc:
        geopotential, mode = WGS72, CompatibilityMode.AFSPC
    else:
        geopotential, mode = WGS84, CompatibilityMode.DEFAULT

    times = jnp.arange(0.0, duration * 1440.0 + 1e-9, timestep / 60.0)
    print(f"Time grid: {times.shape[0]} samples over {duration} days")

    rows = []
    for elements in CATALOG:
        satellite = Satellite(elements, geopotential, mode)

        t0 = time.perf_counter()
        batch = satellite.propagate_many(times)
        batch.position.block_until_ready()
        elapsed = time.perf_counter() - t0

        radius = jnp.linalg.norm(batch.position, axis=-1)
        print(f"\n{satellite!r}")
        print(f"  Propagated in {elapsed:.3f}s (including compilation)")
        print(f"  Radius range: {float(radius.min()):.1f} - {float(radius.max()):.1f} km")
        print(f"  Final position [km]: {batch.position[-1]}")

        if output is not None:
            for t, r, v in zip(times.tolist(), batch.position.tolist(), batch.velocity.tolist()):
                rows.append([elements.object_name, t, *r, *v])

    if output is not None:
        with output.open("w", newline="") as f:
            writer = csv.writer(f)
            writer.writerow(["name", "minutes", "x", "y", "z", "vx", "vy", "vz"])
            writer.writerows(rows)
        print(f"\nWrote {len(rows)} rows to {output}")


if __name__ == "__main__":
    typer.run(main)
