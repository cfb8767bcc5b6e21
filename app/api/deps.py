# path: geojson-mock-api/app/api/deps.py

from __future__ import annotations

from typing import Optional

from fastapi import Header, HTTPException, Request, status

from app.services.mock_store import MockStores


def get_stores(request: Request) -> MockStores:
    return request.app.state.stores


def geojson_strict(request: Request) -> bool:
    return request.app.state.geojson_strict


def require_api_key(request: Request, x_api_key: Optional[str] = Header(default=None)) -> None:
    if x_api_key is None or x_api_key != request.app.state.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid or missing API key")
