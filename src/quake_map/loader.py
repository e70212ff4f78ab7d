"""Fetch both datasets concurrently, then render them onto one map.

Map composition happens first so both overlay groups exist before either
fetch completes. The two fetches have no ordering between them; each
resolves to a FeatureCollection or an error, and a failure on one side never
touches the other overlay.
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass

import httpx

from quake_map.config import MapConfig
from quake_map.map_layers import QuakeMap, create_quake_map
from quake_map.renderer import render_earthquakes, render_plate_boundaries
from quake_map.tectonic import fetch_plate_boundaries
from quake_map.usgs_client import fetch_earthquake_feed

logger = logging.getLogger(__name__)


@dataclass
class FetchResult:
    """Outcome of one dataset fetch."""
    dataset: str
    data: dict | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def fetch_datasets(
    client: httpx.AsyncClient,
    config: MapConfig,
) -> tuple[FetchResult, FetchResult]:
    """Run the earthquake and plate fetches side by side."""
    quakes, plates = await asyncio.gather(
        fetch_earthquake_feed(
            client, config.period, config.timeout_seconds, url=config.earthquake_url,
        ),
        fetch_plate_boundaries(client, config.plates_url, config.timeout_seconds),
        return_exceptions=True,
    )
    return _to_result("earthquakes", quakes), _to_result("tectonic plates", plates)


def _to_result(dataset: str, outcome) -> FetchResult:
    if isinstance(outcome, BaseException):
        if not isinstance(outcome, (httpx.HTTPError, ValueError)):
            raise outcome
        logger.error("Fetch failed for %s: %s", dataset, outcome, extra={"dataset": dataset})
        return FetchResult(dataset=dataset, error=outcome)
    return FetchResult(dataset=dataset, data=outcome)


def build_quake_map(
    quake_map: QuakeMap,
    quakes: FetchResult,
    plates: FetchResult,
) -> QuakeMap:
    """Populate the overlays from the fetch outcomes.

    The legend is attached only after the earthquakes render successfully.
    A failed fetch or a malformed feature leaves that overlay empty.
    """
    if quakes.ok:
        try:
            render_earthquakes(quake_map.earthquakes, quakes.data)
        except (KeyError, IndexError, TypeError) as exc:
            quakes.error = exc
            logger.error(
                "Skipping earthquakes overlay, malformed feature: %r", exc,
                extra={"dataset": "earthquakes"},
            )
        else:
            quake_map.attach_legend()

    if plates.ok:
        render_plate_boundaries(quake_map.plates, plates.data)

    return quake_map


async def load_quake_map(
    config: MapConfig | None = None,
    client: httpx.AsyncClient | None = None,
) -> tuple[QuakeMap, tuple[FetchResult, FetchResult]]:
    """Compose the map, fetch both datasets, render them.

    Returns the populated map and both fetch results.
    """
    config = config or MapConfig()
    t0 = time.monotonic()
    quake_map = create_quake_map(config)

    if client is None:
        async with httpx.AsyncClient() as owned:
            results = await fetch_datasets(owned, config)
    else:
        results = await fetch_datasets(client, config)

    build_quake_map(quake_map, *results)
    logger.info(
        "Map ready in %.1fs: %d earthquakes, %d plate features drawn",
        time.monotonic() - t0, len(quake_map.earthquakes.markers), len(quake_map.plates.markers),
        extra={"duration_ms": round((time.monotonic() - t0) * 1000, 1)},
    )
    return quake_map, results
