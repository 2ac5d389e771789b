from textwrap import dedent
import logging
from typing import Optional

import pydantic
from fastapi import FastAPI
from fastapi.routing import APIRoute
from fastapi.middleware.cors import CORSMiddleware

from hotel_admin.errors import (
    handle_broad_exceptions,
    handle_pydantic_validation_errors,
)
from hotel_admin.routers.health import router as health_router
from hotel_admin.routers.uploads import router as uploads_router
from hotel_admin.settings import Settings, get_settings, resolve_base_url
from hotel_admin.storage_adapter import StorageAdapter

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None, storage: Optional[StorageAdapter] = None) -> FastAPI:
    """Create a FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Hotel Admin API",
        summary="Media uploads for the hotel admin panel",
        version="v1",
        description=dedent(
            """\
        Upload and delete service and room images in the media bucket.

        | Endpoint | Notes |
        | --- | --- |
        | `POST /v1/uploads` | multipart `file` + `path`; returns the public URL |
        | `DELETE /v1/uploads/{key}` | removes an object by key |
        """
        ),
        docs_url="/",
        generate_unique_id_function=custom_generate_unique_id,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.local_base_url, settings.production_url],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.settings = settings
    app.state.storage = storage or StorageAdapter(settings)
    app.state.api_base_url = resolve_base_url(settings)
    logger.info(f"Created {settings.app_name} app for bucket {settings.storage_bucket}")

    app.include_router(uploads_router, prefix="/v1", tags=["uploads"])
    app.include_router(health_router, tags=["health"])

    app.add_exception_handler(
        exc_class_or_status_code=pydantic.ValidationError,
        handler=handle_pydantic_validation_errors,
    )
    app.middleware("http")(handle_broad_exceptions)

    return app


def custom_generate_unique_id(route: APIRoute):
    """
    Generate prettier `operationId`s in the OpenAPI schema.

    These become the function names in generated client SDKs.
    """
    return f"{route.tags[0]}-{route.name}"


if __name__ == "__main__":
    import uvicorn

    logging.basicConfig(level=get_settings().log_level)
    uvicorn.run(create_app(), host="0.0.0.0", port=8000)
