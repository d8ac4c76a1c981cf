"""FastAPI application entry point.

Settings are loaded at import time: a missing or short SECRET_KEY makes
the import fail, so the process never starts serving without a signing
secret.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.openapi.utils import get_openapi
from sqlalchemy.exc import SQLAlchemyError

from app.application.exceptions import ApplicationError
from app.domain.exceptions import DomainException
from app.infrastructure.config.logging_config import configure_logging
from app.infrastructure.config.settings import get_settings
from app.infrastructure.persistence.database import create_schema
from app.presentation import dependencies
from app.presentation.api import auth, comments
from app.presentation.error_schemas import ValidationErrorResponse
from app.presentation.exception_handlers import (
    application_error_handler,
    database_error_handler,
    domain_exception_handler,
    generic_exception_handler,
    validation_error_handler,
)

_settings = get_settings()
configure_logging(_settings)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create missing tables on startup and release the pool on shutdown."""
    engine = dependencies.get_database_engine(_settings)
    await create_schema(engine)
    logger.info(
        "%s %s started (environment=%s)",
        _settings.app_name,
        _settings.app_version,
        _settings.environment,
    )
    yield
    await engine.dispose()


app = FastAPI(
    title=_settings.app_name,
    description="Comment service with username/password registration and bearer-token authentication",
    version=_settings.app_version,
    debug=_settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=_settings.cors_origins_list,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=["X-Total-Count"],
)

# - ApplicationError handles ALL application layer exceptions
# - DomainException handles ALL domain layer exceptions
# - RequestValidationError handles Pydantic validation errors (400)
# - SQLAlchemyError handles database errors raised outside a unit of work
# - Exception handles everything else
app.add_exception_handler(ApplicationError, application_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(DomainException, domain_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(SQLAlchemyError, database_error_handler)  # type: ignore[arg-type]
app.add_exception_handler(Exception, generic_exception_handler)

app.include_router(auth.router, prefix="/api")
app.include_router(comments.router, prefix="/api")


@app.get("/")
async def root() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "message": _settings.app_name,
        "status": "running",
        "version": _settings.app_version,
    }


def custom_openapi():
    """
    Document request validation failures as 400 ValidationErrorResponse.

    FastAPI's default schema advertises 422 HTTPValidationError, which this
    service never returns.
    """
    if app.openapi_schema:
        return app.openapi_schema

    openapi_schema = get_openapi(
        title=app.title,
        version=app.version,
        description=app.description,
        routes=app.routes,
    )

    schemas = openapi_schema.setdefault("components", {}).setdefault("schemas", {})
    schemas.pop("HTTPValidationError", None)
    schemas.pop("ValidationError", None)
    schemas["ValidationErrorResponse"] = ValidationErrorResponse.model_json_schema(
        ref_template="#/components/schemas/{model}"
    )
    for name, definition in schemas["ValidationErrorResponse"].pop("$defs", {}).items():
        schemas.setdefault(name, definition)

    for path_data in openapi_schema.get("paths", {}).values():
        for operation in path_data.values():
            if isinstance(operation, dict) and "responses" in operation:
                if operation["responses"].pop("422", None) is not None:
                    operation["responses"]["400"] = {
                        "description": "Validation Error",
                        "content": {
                            "application/json": {
                                "schema": {"$ref": "#/components/schemas/ValidationErrorResponse"}
                            }
                        },
                    }

    app.openapi_schema = openapi_schema
    return app.openapi_schema


app.openapi = custom_openapi
