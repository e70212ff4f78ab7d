"""Async HTTP client for the USGS Earthquake Hazards GeoJSON feeds."""

from __future__ import annotations

import logging
import time

import httpx

logger = logging.getLogger(__name__)

BASE_URL = "https://earthquake.usgs.gov/earthquakes/feed/v1.0/summary"

FEEDS = {
    "hour": f"{BASE_URL}/all_hour.geojson",
    "day": f"{BASE_URL}/all_day.geojson",
    "week": f"{BASE_URL}/all_week.geojson",
    "month": f"{BASE_URL}/all_month.geojson",
    "significant": f"{BASE_URL}/significant_month.geojson",
}

DEFAULT_PERIOD = "week"


def feed_url(period: str = DEFAULT_PERIOD) -> str:
    url = FEEDS.get(period)
    if url is None:
        raise ValueError(f"Unknown period '{period}'. Choose from: {list(FEEDS.keys())}")
    return url


async def fetch_feature_collection(
    client: httpx.AsyncClient,
    url: str,
    dataset: str,
    timeout: float = 15.0,
) -> dict:
    """GET a GeoJSON FeatureCollection.

    Raises ``httpx.HTTPError`` on transport/status failures and ``ValueError``
    when the body is not JSON or not a FeatureCollection. No retry.
    """
    t0 = time.monotonic()
    logger.info("Fetching %s from %s", dataset, url, extra={"dataset": dataset, "url": url})

    resp = await client.get(url, timeout=timeout, follow_redirects=True)
    resp.raise_for_status()
    data = resp.json()

    if not isinstance(data, dict) or data.get("type") != "FeatureCollection":
        raise ValueError(f"{dataset}: expected a GeoJSON FeatureCollection from {url}")

    features = data.get("features") or []
    logger.info(
        "Fetched %d %s features",
        len(features), dataset,
        extra={
            "dataset": dataset,
            "feature_count": len(features),
            "duration_ms": round((time.monotonic() - t0) * 1000, 1),
        },
    )
    return data


async def fetch_earthquake_feed(
    client: httpx.AsyncClient,
    period: str = DEFAULT_PERIOD,
    timeout: float = 15.0,
    url: str | None = None,
) -> dict:
    """Fetch one of the USGS summary feeds as a raw FeatureCollection.

    An explicit ``url`` replaces the summary feed picked by ``period``.
    """
    return await fetch_feature_collection(client, url or feed_url(period), "earthquakes", timeout)
