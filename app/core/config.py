# path: geojson-mock-api/app/core/config.py

import os

from dotenv import load_dotenv

# Values from a local .env file; real environment variables win.
load_dotenv()


def _flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off")


APP_TITLE = os.getenv("APP_TITLE", "geojson-mock-api")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Strict RFC 7946 checks: closed linear rings, 2+ positions per line, no nested collections.
GEOJSON_STRICT = _flag("GEOJSON_STRICT", True)

# Expected X-API-Key header on the marketplace order routes.
API_KEY = os.getenv("API_KEY", "mock-api-key")
