# path: geojson-mock-api/app/main.py

import logging
from typing import Optional

from fastapi import FastAPI

from app.api.routes import auth, geometry, marketplace, petstore, tasks
from app.core import config
from app.services.mock_store import build_mock_stores

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


def create_app(geojson_strict: Optional[bool] = None, api_key: Optional[str] = None) -> FastAPI:
    app = FastAPI(title=config.APP_TITLE)

    app.state.stores = build_mock_stores()
    app.state.geojson_strict = config.GEOJSON_STRICT if geojson_strict is None else geojson_strict
    app.state.api_key = config.API_KEY if api_key is None else api_key

    app.include_router(geometry.router)
    app.include_router(tasks.router)
    app.include_router(auth.router)
    app.include_router(marketplace.router)
    for router in petstore.routers:
        app.include_router(router)
    return app


app = create_app()
