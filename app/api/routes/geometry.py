# path: geojson-mock-api/app/api/routes/geometry.py

from __future__ import annotations

import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from app.api.deps import geojson_strict, get_stores
from app.models.geojson_models import GeometryCollection, to_geojson
from app.services.geojson_validator import (
    GeoJsonValidationError,
    ValidationIssue,
    validate_geojson,
    validate_geometry,
)
from app.services.mock_store import MockStores

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/geometry", tags=["geometry"])


class ValidationReport(BaseModel):
    valid: bool
    type: Optional[str] = None
    issues: List[ValidationIssue]


@router.get(
    "",
    summary="Get an array of GeoJSON Geometry objects",
    responses={200: {"model": List[GeometryCollection]}},
)
def list_geometry(stores: MockStores = Depends(get_stores)) -> JSONResponse:
    collections = stores.geometries.collections()
    return JSONResponse(content=[to_geojson(c) for c in collections])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create new GeoJSON Geometry object",
    responses={
        201: {"description": "New GeoJSON Geometry object created"},
        400: {"description": "Body is not a valid GeoJSON geometry"},
    },
)
def create_geometry(
    payload: Any = Body(...),
    strict: bool = Depends(geojson_strict),
    stores: MockStores = Depends(get_stores),
) -> JSONResponse:
    try:
        geometry = validate_geometry(payload, strict=strict)
    except ValueError as e:
        logger.info("Rejected geometry: %s", e)
        detail = e.to_dict() if isinstance(e, GeoJsonValidationError) else str(e)
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)

    stores.geometries.add(geometry)
    logger.debug("Stored %s geometry", geometry.type)
    return JSONResponse(status_code=status.HTTP_201_CREATED, content=to_geojson(geometry))


@router.post("/validate", response_model=ValidationReport, summary="Validate any GeoJSON object")
def check_geojson(payload: Any = Body(...), strict: bool = Depends(geojson_strict)) -> ValidationReport:
    # Report only; nothing is stored.
    try:
        obj = validate_geojson(payload, strict=strict)
    except GeoJsonValidationError as e:
        return ValidationReport(valid=False, issues=e.issues)
    return ValidationReport(valid=True, type=obj.type, issues=[])
