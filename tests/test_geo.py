from app.services.geojson_validator import validate_geometry
from app.utils.geo import compute_bbox, iter_positions, ring_is_closed


def test_ring_is_closed(square_ring):
    assert ring_is_closed(square_ring)
    assert not ring_is_closed(square_ring[:-1])
    assert not ring_is_closed([[0, 0], [1, 1], [0, 0]])


def test_iter_positions_descends_into_collections(point, polygon):
    collection = validate_geometry({"type": "GeometryCollection", "geometries": [point, polygon]})
    positions = list(iter_positions(collection))
    assert positions[0] == [102.0, 0.5]
    assert len(positions) == 6


def test_compute_bbox(point, polygon):
    geometries = [validate_geometry(point), validate_geometry(polygon)]
    assert compute_bbox(geometries) == [0.0, 0.0, 102.0, 1.0]


def test_compute_bbox_mixed_dimensions_is_2d():
    geometries = [
        validate_geometry({"type": "Point", "coordinates": [1, 2, 3]}),
        validate_geometry({"type": "Point", "coordinates": [-1, 5]}),
    ]
    assert compute_bbox(geometries) == [-1.0, 2.0, 1.0, 5.0]


def test_compute_bbox_empty():
    empty = validate_geometry({"type": "GeometryCollection", "geometries": []})
    assert compute_bbox([empty]) is None
