# path: geojson-mock-api/app/models/geojson_models.py

from __future__ import annotations

import math
from enum import Enum
from typing import Annotated, Any, Dict, List, Literal, Optional, Tuple, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    SerializerFunctionWrapHandler,
    StrictFloat,
    StrictInt,
    StrictStr,
    ValidationInfo,
    field_validator,
    model_serializer,
    model_validator,
)

from app.utils.geo import ring_is_closed


GEOMETRY_TYPES = (
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
)
GEOJSON_TYPES = ("Feature", "FeatureCollection") + GEOMETRY_TYPES

# RFC 7946 section 7.1: members that only make sense on one kind of object.
RESERVED_MEMBERS = {
    **{name: ("geometries", "geometry", "properties", "features") for name in GEOMETRY_TYPES[:-1]},
    "GeometryCollection": ("coordinates", "geometry", "properties", "features"),
    "Feature": ("coordinates", "geometries", "features"),
    "FeatureCollection": ("coordinates", "geometries", "geometry", "properties"),
}

Position = List[float]


class ErrorKind(str, Enum):
    INVALID_TYPE = "InvalidType"
    SHAPE_MISMATCH = "ShapeMismatch"
    INVALID_BBOX = "InvalidBbox"
    NULL_GEOMETRY_NOT_ALLOWED = "NullGeometryNotAllowed"


class GeoJsonShapeError(ValueError):
    """Raised from model validators; ``path`` is relative to the field being validated."""

    def __init__(self, kind: ErrorKind, expected: str, path: Tuple[Union[int, str], ...] = ()):
        self.kind = kind
        self.expected = expected
        self.path = path
        where = ".".join(str(p) for p in path)
        super().__init__(f"expected {expected}" + (f" at {where}" if where else ""))


def _is_number(value: Any) -> bool:
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return False
    # JSON integers are unbounded; ones beyond float range are rejected, not raised.
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def _strict(info: ValidationInfo) -> bool:
    return bool((info.context or {}).get("strict", True))


def parse_bbox(value: Any) -> List[float]:
    if not isinstance(value, (list, tuple)) or not all(_is_number(n) for n in value):
        raise GeoJsonShapeError(ErrorKind.INVALID_BBOX, "a flat array of numbers")
    if len(value) < 4 or len(value) % 2:
        raise GeoJsonShapeError(ErrorKind.INVALID_BBOX, "an even number (at least 4) of values")
    half = len(value) // 2
    for axis in range(half):
        if value[axis] > value[axis + half]:
            raise GeoJsonShapeError(
                ErrorKind.INVALID_BBOX,
                f"min <= max on axis {axis}",
                (axis,),
            )
    return [float(n) for n in value]


def parse_position(value: Any, path: Tuple[int, ...] = ()) -> Position:
    if (
        not isinstance(value, (list, tuple))
        or not 2 <= len(value) <= 3
        or not all(_is_number(n) for n in value)
    ):
        raise GeoJsonShapeError(ErrorKind.SHAPE_MISMATCH, "a position of 2 or 3 numbers", path)
    return [float(n) for n in value]


def parse_positions(value: Any, path: Tuple[int, ...] = (), minimum: int = 0) -> List[Position]:
    if not isinstance(value, (list, tuple)):
        raise GeoJsonShapeError(ErrorKind.SHAPE_MISMATCH, "an array of positions", path)
    positions = [parse_position(p, path + (i,)) for i, p in enumerate(value)]
    if len(positions) < minimum:
        raise GeoJsonShapeError(ErrorKind.SHAPE_MISMATCH, f"at least {minimum} positions", path)
    return positions


def parse_linear_ring(value: Any, path: Tuple[int, ...], strict: bool) -> List[Position]:
    ring = parse_positions(value, path)
    if strict and not ring_is_closed(ring):
        raise GeoJsonShapeError(
            ErrorKind.SHAPE_MISMATCH,
            "a closed linear ring of at least 4 positions (first equal to last)",
            path,
        )
    return ring


def parse_rings(value: Any, path: Tuple[int, ...], strict: bool) -> List[List[Position]]:
    if not isinstance(value, (list, tuple)):
        raise GeoJsonShapeError(ErrorKind.SHAPE_MISMATCH, "an array of linear rings", path)
    return [parse_linear_ring(r, path + (i,), strict) for i, r in enumerate(value)]


# ----- Base object -----
class GeoJsonObject(BaseModel):
    # Foreign members are kept as extras so they survive a round-trip.
    model_config = ConfigDict(extra="allow", frozen=True)

    type: str
    bbox: Optional[List[float]] = None

    @model_validator(mode="before")
    @classmethod
    def reject_reserved_members(cls, data: Any) -> Any:
        type_name = data.get("type") if isinstance(data, dict) else None
        if isinstance(type_name, str):
            for member in RESERVED_MEMBERS.get(type_name, ()):
                if member in data:
                    raise GeoJsonShapeError(
                        ErrorKind.SHAPE_MISMATCH,
                        f"no '{member}' member on a {type_name} object",
                        (member,),
                    )
        return data

    @field_validator("bbox", mode="before")
    @classmethod
    def validate_bbox(cls, value: Any) -> Optional[List[float]]:
        if value is None:
            return value
        return parse_bbox(value)

    @model_serializer(mode="wrap")
    def omit_absent_members(self, handler: SerializerFunctionWrapHandler):
        # Optional members are left out rather than written as null; `geometry`
        # and `properties` on a Feature keep their nulls.
        data = handler(self)
        for member in ("bbox", "id"):
            if member in data and data[member] is None:
                del data[member]
        return data


# ----- Geometry Types -----
class Point(GeoJsonObject):
    type: Literal["Point"]
    coordinates: Position

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, value: Any) -> Position:
        return parse_position(value)


class MultiPoint(GeoJsonObject):
    type: Literal["MultiPoint"]
    coordinates: List[Position]

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, value: Any) -> List[Position]:
        return parse_positions(value)


class LineString(GeoJsonObject):
    type: Literal["LineString"]
    coordinates: List[Position]

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, value: Any, info: ValidationInfo) -> List[Position]:
        return parse_positions(value, minimum=2 if _strict(info) else 0)


class MultiLineString(GeoJsonObject):
    type: Literal["MultiLineString"]
    coordinates: List[List[Position]]

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, value: Any, info: ValidationInfo) -> List[List[Position]]:
        if not isinstance(value, (list, tuple)):
            raise GeoJsonShapeError(ErrorKind.SHAPE_MISMATCH, "an array of line strings")
        minimum = 2 if _strict(info) else 0
        return [parse_positions(line, (i,), minimum) for i, line in enumerate(value)]


class Polygon(GeoJsonObject):
    type: Literal["Polygon"]
    coordinates: List[List[Position]]

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, value: Any, info: ValidationInfo) -> List[List[Position]]:
        return parse_rings(value, (), _strict(info))


class MultiPolygon(GeoJsonObject):
    type: Literal["MultiPolygon"]
    coordinates: List[List[List[Position]]]

    @field_validator("coordinates", mode="before")
    @classmethod
    def validate_coordinates(cls, value: Any, info: ValidationInfo) -> List[List[List[Position]]]:
        if not isinstance(value, (list, tuple)):
            raise GeoJsonShapeError(ErrorKind.SHAPE_MISMATCH, "an array of polygons")
        strict = _strict(info)
        return [parse_rings(polygon, (i,), strict) for i, polygon in enumerate(value)]


class GeometryCollection(GeoJsonObject):
    type: Literal["GeometryCollection"]
    geometries: List[Geometry]

    @field_validator("geometries")
    @classmethod
    def validate_nesting(cls, value: List[Any], info: ValidationInfo) -> List[Any]:
        # RFC 7946 section 3.1.8 asks producers to avoid nested collections.
        if _strict(info):
            for i, geometry in enumerate(value):
                if isinstance(geometry, GeometryCollection):
                    raise GeoJsonShapeError(
                        ErrorKind.SHAPE_MISMATCH,
                        "a geometry other than GeometryCollection",
                        (i,),
                    )
        return value


Geometry = Annotated[
    Union[Point, MultiPoint, LineString, MultiLineString, Polygon, MultiPolygon, GeometryCollection],
    Field(discriminator="type"),
]

GeometryCollection.model_rebuild()

GEOMETRY_MODELS = {
    "Point": Point,
    "MultiPoint": MultiPoint,
    "LineString": LineString,
    "MultiLineString": MultiLineString,
    "Polygon": Polygon,
    "MultiPolygon": MultiPolygon,
    "GeometryCollection": GeometryCollection,
}


# ----- Core GeoJSON Objects -----
class Feature(GeoJsonObject):
    type: Literal["Feature"]
    geometry: Optional[Geometry]
    properties: Optional[Dict[str, Any]]
    id: Optional[Union[StrictStr, StrictInt, StrictFloat]] = None

    @field_validator("id", mode="before")
    @classmethod
    def validate_id(cls, value: Any) -> Any:
        if value is not None and not isinstance(value, str) and not _is_number(value):
            raise GeoJsonShapeError(ErrorKind.SHAPE_MISMATCH, "a string or number")
        return value

    @model_validator(mode="after")
    def require_geometry(self, info: ValidationInfo) -> "Feature":
        if self.geometry is None and (info.context or {}).get("require_geometry"):
            raise GeoJsonShapeError(ErrorKind.NULL_GEOMETRY_NOT_ALLOWED, "a non-null geometry", ("geometry",))
        return self


class FeatureCollection(GeoJsonObject):
    type: Literal["FeatureCollection"]
    features: List[Feature]


GEOJSON_MODELS: Dict[str, type] = {
    **GEOMETRY_MODELS,
    "Feature": Feature,
    "FeatureCollection": FeatureCollection,
}


def to_geojson(obj: GeoJsonObject) -> Dict[str, Any]:
    """Plain RFC 7946 dict: absent optional members stay absent, foreign members are kept."""
    return obj.model_dump(mode="json")
