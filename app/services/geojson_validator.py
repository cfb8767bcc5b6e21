# path: geojson-mock-api/app/services/geojson_validator.py

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Type

from pydantic import BaseModel, ConfigDict, ValidationError

from app.models.geojson_models import (
    GEOJSON_MODELS,
    GEOJSON_TYPES,
    GEOMETRY_MODELS,
    GEOMETRY_TYPES,
    ErrorKind,
    Feature,
    FeatureCollection,
    GeoJsonObject,
    GeoJsonShapeError,
    parse_bbox,
)


class ValidationIssue(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ErrorKind
    field: str
    expected: str
    index: Optional[int] = None


class GeoJsonValidationError(ValueError):
    """
    Structured validation failure. The first issue is the primary one; the rest
    are every other malformed child, in document order.
    """

    def __init__(self, issues: Sequence[ValidationIssue]):
        self.issues: List[ValidationIssue] = list(issues)
        primary = self.issues[0]
        self.kind = primary.kind
        self.field = primary.field
        self.expected = primary.expected
        self.index = primary.index
        super().__init__(f"{primary.kind.value} at {primary.field or '<root>'}: expected {primary.expected}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": str(self),
            "issues": [issue.model_dump(mode="json") for issue in self.issues],
        }


def _issue(kind: ErrorKind, loc: Sequence[Any], expected: str) -> ValidationIssue:
    return ValidationIssue(
        kind=kind,
        field=".".join(str(p) for p in loc),
        expected=expected,
        index=next((p for p in loc if isinstance(p, int)), None),
    )


def _issue_from_error(error: Dict[str, Any]) -> ValidationIssue:
    # Discriminated unions put the matched tag into the location; drop it.
    loc = [p for p in error["loc"] if p not in GEOMETRY_TYPES]
    cause = (error.get("ctx") or {}).get("error")
    if isinstance(cause, GeoJsonShapeError):
        return _issue(cause.kind, loc + list(cause.path), cause.expected)

    error_type = error["type"]
    if error_type in ("union_tag_invalid", "union_tag_not_found"):
        return _issue(ErrorKind.INVALID_TYPE, loc + ["type"], "one of " + ", ".join(GEOMETRY_TYPES))
    if loc and loc[-1] == "type":
        return _issue(ErrorKind.INVALID_TYPE, loc, error["msg"])
    return _issue(ErrorKind.SHAPE_MISMATCH, loc, error["msg"])


def _read_tag(value: Any, allowed: Sequence[str]) -> str:
    if not isinstance(value, dict):
        raise GeoJsonValidationError([_issue(ErrorKind.SHAPE_MISMATCH, [], "a JSON object")])
    tag = value.get("type")
    if not isinstance(tag, str) or tag not in allowed:
        raise GeoJsonValidationError([_issue(ErrorKind.INVALID_TYPE, ["type"], "one of " + ", ".join(allowed))])
    return tag


def _validate(model: Type[GeoJsonObject], value: Any, **context: Any) -> Any:
    try:
        return model.model_validate(value, context=context)
    except ValidationError as exc:
        raise GeoJsonValidationError([_issue_from_error(e) for e in exc.errors()]) from exc


def validate_geometry(value: Any, strict: bool = True) -> GeoJsonObject:
    """
    Validates any of the seven geometry variants, selected by the `type` member.

    Raises GeoJsonValidationError (InvalidType for an unknown or missing tag,
    ShapeMismatch when coordinates/geometries have the wrong nesting).
    """
    tag = _read_tag(value, GEOMETRY_TYPES)
    return _validate(GEOMETRY_MODELS[tag], value, strict=strict)


def validate_feature(value: Any, strict: bool = True, require_geometry: bool = False) -> Feature:
    _read_tag(value, ("Feature",))
    return _validate(Feature, value, strict=strict, require_geometry=require_geometry)


def validate_feature_collection(value: Any, strict: bool = True) -> FeatureCollection:
    _read_tag(value, ("FeatureCollection",))
    return _validate(FeatureCollection, value, strict=strict)


def validate_geojson(value: Any, strict: bool = True) -> GeoJsonObject:
    tag = _read_tag(value, GEOJSON_TYPES)
    return _validate(GEOJSON_MODELS[tag], value, strict=strict)


def validate_bbox(value: Any) -> List[float]:
    try:
        return parse_bbox(value)
    except GeoJsonShapeError as exc:
        raise GeoJsonValidationError([_issue(exc.kind, ["bbox"] + list(exc.path), exc.expected)]) from exc


def collect_issues(value: Any, strict: bool = True) -> List[ValidationIssue]:
    try:
        validate_geojson(value, strict=strict)
    except GeoJsonValidationError as exc:
        return exc.issues
    return []
