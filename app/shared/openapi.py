"""
OpenAPI document customisation.

FastAPI builds the schema from route metadata; this adds the declared
security schemes on top. The schemes are documentation only: no route
depends on them, so nothing is enforced.
"""

from typing import Any, Dict

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

SECURITY_SCHEMES: Dict[str, Dict[str, Any]] = {
    "access_token": {
        "type": "http",
        "scheme": "bearer",
        "description": "Please input your JWT",
        "bearerFormat": "JWT",
    },
    "basic": {
        "type": "http",
        "scheme": "basic",
    },
}


def install_openapi(app: FastAPI) -> None:
    """Replace app.openapi with a generator that also declares SECURITY_SCHEMES."""

    def custom_openapi() -> Dict[str, Any]:
        if app.openapi_schema:
            return app.openapi_schema

        schema = get_openapi(
            title=app.title,
            version=app.version,
            description=app.description,
            routes=app.routes,
            tags=app.openapi_tags,
        )
        components = schema.setdefault("components", {})
        components.setdefault("securitySchemes", {}).update(SECURITY_SCHEMES)

        app.openapi_schema = schema
        return app.openapi_schema

    app.openapi = custom_openapi
