"""Coordinate trail wire format.

A trail is stored and exported as a JSON array of ``[latitude, longitude]``
pairs in chronological order, e.g. ``[[55.75, 37.61], [55.76, 37.62]]``.
Python's float repr is shortest round-trip, so decoding an encoded trail
gives back the exact same values.
"""

import json
import logging

from app.core.constants import MIN_REGION_DELTA, REGION_PADDING

logger = logging.getLogger(__name__)


def encode_trail(points) -> str | None:
    """Serialize (lat, lon) pairs. Returns None when a pair can't be encoded."""
    try:
        pairs = [[float(lat), float(lon)] for lat, lon in points]
        return json.dumps(pairs, allow_nan=False, separators=(",", ":"))
    except (TypeError, ValueError) as e:
        logger.warning("Could not encode trail: %s", e)
        return None


def decode_trail(data) -> list[list[float]]:
    """Parse a stored trail. Missing or malformed data reads as an empty trail."""
    if data is None:
        return []
    if isinstance(data, (bytes, bytearray)):
        data = data.decode("utf-8", errors="replace")
    try:
        raw = json.loads(data)
    except ValueError as e:
        logger.warning("Could not decode trail: %s", e)
        return []
    if not isinstance(raw, list):
        logger.warning("Trail is not a JSON array")
        return []

    coords: list[list[float]] = []
    for pair in raw:
        if (
            not isinstance(pair, list)
            or len(pair) != 2
            or not all(isinstance(v, (int, float)) and not isinstance(v, bool) for v in pair)
        ):
            logger.warning("Trail holds a malformed coordinate pair: %r", pair)
            return []
        coords.append([float(pair[0]), float(pair[1])])
    return coords


def trail_region(coords) -> dict | None:
    """Map region that fits a decoded trail, or None for an empty trail.

    Center is the middle of the lat/lon extents; each span is the extent
    padded by REGION_PADDING and never smaller than MIN_REGION_DELTA.
    """
    if not coords:
        return None
    lats = [c[0] for c in coords]
    lons = [c[1] for c in coords]
    min_lat, max_lat = min(lats), max(lats)
    min_lon, max_lon = min(lons), max(lons)
    return {
        "center_lat": (min_lat + max_lat) / 2,
        "center_lon": (min_lon + max_lon) / 2,
        "lat_delta": max((max_lat - min_lat) * REGION_PADDING, MIN_REGION_DELTA),
        "lon_delta": max((max_lon - min_lon) * REGION_PADDING, MIN_REGION_DELTA),
    }
