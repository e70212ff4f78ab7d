"""Tectonic plate boundary data from Peter Bird's PB2002 dataset.

Source: Hugo Ahlenius' GeoJSON digitization of PB2002
https://github.com/fraxen/tectonicplates
"""

from __future__ import annotations

import httpx

from quake_map.usgs_client import fetch_feature_collection

PLATE_BOUNDARIES_URL = (
    "https://raw.githubusercontent.com/fraxen/tectonicplates/"
    "master/GeoJSON/PB2002_boundaries.json"
)


async def fetch_plate_boundaries(
    client: httpx.AsyncClient,
    url: str = PLATE_BOUNDARIES_URL,
    timeout: float = 30.0,
) -> dict:
    """Download the plate boundaries FeatureCollection.

    Not cached; every map build fetches it again.
    """
    return await fetch_feature_collection(client, url, "tectonic plates", timeout)
