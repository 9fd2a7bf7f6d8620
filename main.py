from contextlib import asynccontextmanager
from typing import Any, Dict, List, Optional, Type

from fastapi import APIRouter, Body, Depends, FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import BaseModel, ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from config import get_settings
from database import MemoryStorage, Storage
from errors import (
    InternalError,
    NotFound,
    PortalError,
    ValidationFailed,
    format_validation_errors,
)
from logging_config import setup_logging
from schemas import (
    RESOURCE_KINDS,
    ResourceKind,
    UiSettings,
    UiSettingsUpdate,
    build_filter_model,
)


def get_storage(request: Request) -> Storage:
    """The store wired into this app by create_app()."""
    return request.app.state.storage


def _validate(model: Type[BaseModel], data: Any, message: str) -> BaseModel:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise ValidationFailed(message, errors=format_validation_errors(e.errors())) from e


# ============================================================================
# RESOURCE ENDPOINTS
# ============================================================================

def build_crud_router(kind: ResourceKind) -> APIRouter:
    """
    List / get / create / update / delete endpoints for one resource kind,
    mounted under /api/<kind.name>
    """
    router = APIRouter(prefix=f"/api/{kind.name}", tags=[kind.name])
    record_model = kind.record_model
    filter_model = build_filter_model(kind)
    invalid_message = f"Invalid {kind.label.lower()} data"

    @router.get("", response_model=List[record_model])
    async def list_records(
        request: Request,
        search: Optional[str] = None,
        storage: Storage = Depends(get_storage),
    ):
        """
        Query params:
        - any of the kind's filter fields (exact match, e.g. ?category=Training)
        - search: case-insensitive text search over the kind's text fields
        """
        filters = _validate(
            filter_model,
            dict(request.query_params),
            f"Invalid {kind.label.lower()} filters",
        )
        return storage.list_documents(
            kind.name,
            filters.model_dump(exclude_none=True),
            search=search,
            search_fields=kind.search_fields,
        )

    @router.get("/{doc_id}", response_model=record_model)
    async def get_record(doc_id: str, storage: Storage = Depends(get_storage)):
        doc = storage.get_document(kind.name, doc_id)
        if doc is None:
            raise NotFound(kind.label)
        return doc

    @router.post("", response_model=record_model, status_code=status.HTTP_201_CREATED)
    async def create_record(
        payload: Dict[str, Any] = Body(...),
        storage: Storage = Depends(get_storage),
    ):
        data = _validate(kind.create_model, payload, invalid_message)
        doc = storage.create_document(kind.name, data)
        logger.info("{} created: {}", kind.label, doc["id"])
        return doc

    @router.put("/{doc_id}", response_model=record_model)
    async def update_record(
        doc_id: str,
        payload: Dict[str, Any] = Body(...),
        storage: Storage = Depends(get_storage),
    ):
        data = _validate(kind.update_model, payload, invalid_message)
        doc = storage.update_document(kind.name, doc_id, data)
        if doc is None:
            raise NotFound(kind.label)
        logger.info("{} updated: {}", kind.label, doc_id)
        return doc

    @router.delete("/{doc_id}")
    async def delete_record(doc_id: str, storage: Storage = Depends(get_storage)):
        if not storage.delete_document(kind.name, doc_id):
            raise NotFound(kind.label)
        logger.info("{} deleted: {}", kind.label, doc_id)
        return {"message": f"{kind.label} deleted successfully"}

    return router


ui_settings_router = APIRouter(prefix="/api/ui-settings", tags=["ui-settings"])


@ui_settings_router.get("", response_model=UiSettings)
async def get_ui_settings(storage: Storage = Depends(get_storage)):
    return storage.get_settings()


@ui_settings_router.put("", response_model=UiSettings)
async def update_ui_settings(
    payload: Dict[str, Any] = Body(...),
    storage: Storage = Depends(get_storage),
):
    data = _validate(UiSettingsUpdate, payload, "Invalid UI settings data")
    settings = storage.update_settings(data)
    logger.info("UI settings updated: {}", sorted(data.changes()))
    return settings


# ============================================================================
# SERVICE ENDPOINTS
# ============================================================================

service_router = APIRouter(tags=["service"])


@service_router.get("/")
async def read_root():
    return {"message": "NYSC Jos North portal API"}


@service_router.get("/api/health")
async def health(storage: Storage = Depends(get_storage)):
    """Liveness check with the number of records held in each collection"""
    return {
        "status": "ok",
        "storage": type(storage).__name__,
        "collections": {
            name: storage.count_documents(name) for name in storage.collection_names()
        },
    }


@service_router.get("/api/stats")
async def dashboard_stats(storage: Storage = Depends(get_storage)):
    """Headline numbers for the admin dashboard"""
    return {
        "events": {
            "total": storage.count_documents("events"),
            "published": storage.count_documents("events", {"status": "published"}),
        },
        "excos": {
            "total": storage.count_documents("excos"),
            "active": storage.count_documents("excos", {"is_active": True}),
        },
        "resources": {
            "total": storage.count_documents("resources"),
            "documents": storage.count_documents("resources", {"category": "Documents"}),
        },
        "developers": {
            "total": storage.count_documents("developers"),
            "active": storage.count_documents("developers", {"status": "active"}),
        },
    }


@service_router.get("/api/schemas")
async def get_all_schemas():
    """
    Expose the create schema of every resource kind plus the UI settings schema.
    Returns a mapping of kind name to its JSON Schema representation
    """
    models = {kind.name: kind.create_model for kind in RESOURCE_KINDS}
    models["ui-settings"] = UiSettingsUpdate

    schemas_dict = {}
    for name, model in models.items():
        json_schema = model.model_json_schema()
        schemas_dict[name] = {
            "json_schema": json_schema,
            "fields": list(json_schema.get("properties", {})),
            "required_fields": json_schema.get("required", []),
        }
    return {"ok": True, "schemas": schemas_dict}


# ============================================================================
# ERROR HANDLERS
# ============================================================================

def register_error_handlers(app: FastAPI) -> None:
    """Every error response is JSON with a ``message``; internals never leak."""

    @app.exception_handler(PortalError)
    async def portal_error_handler(request: Request, exc: PortalError):
        if exc.errors:
            logger.warning("{} on {}: {}", exc.message, request.url.path, exc.errors)
        else:
            logger.info("{} on {}", exc.message, request.url.path)
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = format_validation_errors(exc.errors())
        logger.warning("Invalid request on {}: {}", request.url.path, errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": "Invalid request data", "errors": errors},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.opt(exception=exc).error(
            "Unhandled exception on {} {}", request.method, request.url.path
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=InternalError().to_response(),
        )


# ============================================================================
# APP FACTORY
# ============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_json)
    logger.info(
        "Portal API started with {} ({})",
        type(app.state.storage).__name__,
        ", ".join(app.state.storage.collection_names()),
    )
    yield
    logger.info("Portal API shutting down")


def create_app(storage: Optional[Storage] = None) -> FastAPI:
    """
    Build the API around ``storage``. A seeded MemoryStorage is created when
    none is passed (seeding can be switched off with SEED_DATA=false).
    """
    settings = get_settings()
    app = FastAPI(title="NYSC Jos North Portal API", version="1.0.0", lifespan=lifespan)
    app.state.storage = storage if storage is not None else MemoryStorage(seed=settings.seed_data)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(service_router)
    for kind in RESOURCE_KINDS:
        app.include_router(build_crud_router(kind))
    app.include_router(ui_settings_router)

    register_error_handlers(app)
    return app


if __name__ == "__main__":
    import uvicorn
    settings = get_settings()
    uvicorn.run(create_app(), host=settings.host, port=settings.port)
