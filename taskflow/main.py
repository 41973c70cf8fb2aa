import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from redis.exceptions import ConnectionError
from sqlalchemy.exc import OperationalError

from taskflow.common.exceptions import (
    ResourceAlreadyExistsException,
    ResourceNotFoundException,
    ValidationException,
    datastore_connection_exception_handler,
    request_validation_exception_handler,
    resource_already_exists_handler,
    resource_not_found_handler,
    unexpected_exception_handler,
    validation_exception_handler,
    service_unavailable_response,
    internal_error_response,
    validation_error_response,
)
from taskflow.common.opentelemetry import setup_opentelemetry
from taskflow.config import get_settings
from taskflow.healthcheck.router import router as health_router
from taskflow.stores import create_store_backend
from taskflow.tasks.router import router as tasks_router
from taskflow.users.router import router as users_router

settings = get_settings()

logging.basicConfig(
    level=settings.LOG_LEVEL,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    app.state.store_backend = create_store_backend(settings)
    yield
    app.state.store_backend.close()


app = FastAPI(
    title=settings.API_NAME,
    summary=settings.API_SUMMARY,
    lifespan=lifespan,
    responses={
        **service_unavailable_response,
        **internal_error_response,
        **validation_error_response,
    },
    version=settings.TASKFLOW_VERSION,
)

if settings.OTEL_ENABLED:
    setup_opentelemetry(settings, app)

if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.exception_handler(RequestValidationError)(request_validation_exception_handler)
app.exception_handler(ValidationException)(validation_exception_handler)
app.exception_handler(ResourceNotFoundException)(resource_not_found_handler)
app.exception_handler(ResourceAlreadyExistsException)(resource_already_exists_handler)
app.exception_handler(ConnectionError)(datastore_connection_exception_handler)
app.exception_handler(OperationalError)(datastore_connection_exception_handler)
app.exception_handler(Exception)(unexpected_exception_handler)


app.include_router(health_router)
app.include_router(tasks_router)
app.include_router(users_router)
