# path: geojson-mock-api/app/utils/geo.py

from __future__ import annotations

from typing import Any, Iterable, Iterator, List, Optional, Sequence


# Nesting depth of `coordinates` down to a single position.
COORDINATE_DEPTH = {
    "Point": 0,
    "MultiPoint": 1,
    "LineString": 1,
    "MultiLineString": 2,
    "Polygon": 2,
    "MultiPolygon": 3,
}


def ring_is_closed(ring: Sequence[Sequence[float]]) -> bool:
    # A linear ring needs 4+ positions with the first equal to the last.
    return len(ring) >= 4 and list(ring[0]) == list(ring[-1])


def _flatten(coordinates: Any, depth: int) -> Iterator[List[float]]:
    if depth == 0:
        yield coordinates
        return
    for item in coordinates:
        yield from _flatten(item, depth - 1)


def iter_positions(geometry: Any) -> Iterator[List[float]]:
    """
    Yields every position of a validated geometry, descending into collections.
    """
    if geometry.type == "GeometryCollection":
        for child in geometry.geometries:
            yield from iter_positions(child)
        return
    yield from _flatten(geometry.coordinates, COORDINATE_DEPTH[geometry.type])


def compute_bbox(geometries: Iterable[Any]) -> Optional[List[float]]:
    """
    Flat RFC 7946 bbox [min..., max...] over all positions, or None when there are none.
    Mixed 2D/3D input yields a 2D box.
    """
    positions = [p for g in geometries for p in iter_positions(g)]
    if not positions:
        return None
    dims = min(len(p) for p in positions)
    mins = [min(p[axis] for p in positions) for axis in range(dims)]
    maxs = [max(p[axis] for p in positions) for axis in range(dims)]
    return mins + maxs
