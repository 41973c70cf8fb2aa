from typing import Any
from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy import text

from taskflow.config import Settings, get_settings
from taskflow.stores import StoreBackend, get_store_backend

router = APIRouter()


@router.get(
    "/healthcheck",
    tags=["Healthcheck"],
    status_code=status.HTTP_200_OK,
    responses={
        200: {
            "description": "Healthcheck status",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "store": {"status": "ok", "backend": "postgres"},
                    }
                }
            },
        },
        503: {
            "description": "Service unavailable",
            "content": {
                "application/json": {
                    "example": {
                        "api": {"status": "ok"},
                        "store": {
                            "status": "error",
                            "backend": "postgres",
                            "message": "Connection error or unexpected result",
                        },
                    }
                }
            },
        },
    },
)
def healthcheck(
    settings: Settings = Depends(get_settings),
    store_backend: StoreBackend = Depends(get_store_backend),
) -> JSONResponse:
    health_status: dict[str, Any] = {
        "api": {"status": "ok"},
        "store": {"status": "ok", "backend": settings.STORE_BACKEND},
    }
    has_error = False

    try:
        if store_backend.db_engine is not None:
            with store_backend.db_engine.connect() as connection:
                result = connection.execute(text("SELECT 1")).scalar()
                if result != 1:
                    raise Exception("Database health check failed")
        elif store_backend.redis_client is not None:
            store_backend.redis_client.ping()
    except Exception as e:
        health_status["store"].update({"status": "error", "message": str(e)})
        has_error = True

    if has_error:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE, content=health_status
        )

    return JSONResponse(status_code=status.HTTP_200_OK, content=health_status)
