from pathlib import Path
from typing import Any, Generator
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pytest_mock import MockerFixture

from taskflow.config import Settings, get_settings
from taskflow.main import app as main_app


@pytest.fixture(params=["memory", "postgres"])
def test_settings(request: pytest.FixtureRequest, tmp_path: Path) -> Settings:
    backend: str = request.param
    common_settings: dict[str, Any] = {
        "OTEL_ENABLED": False,
        "CORS_ENABLED": False,
    }
    if backend == "memory":
        return Settings(STORE_BACKEND="memory", **common_settings)
    elif backend == "postgres":
        return Settings(
            STORE_BACKEND="postgres",
            POSTGRES_URL=f"sqlite:///{tmp_path / 'taskflow.db'}",
            **common_settings,
        )
    else:
        raise ValueError(f"Unknown backend: {backend}")


@pytest.fixture(autouse=True)
def patch_settings(test_settings: Settings, mocker: MockerFixture) -> None:
    mocker.patch("taskflow.main.settings", test_settings)


@pytest.fixture
def test_app(test_settings: Settings) -> Generator[FastAPI, None, None]:
    def get_test_settings() -> Settings:
        return test_settings

    main_app.dependency_overrides[get_settings] = get_test_settings
    yield main_app
    main_app.dependency_overrides.clear()


@pytest.fixture
def test_client(test_app: FastAPI) -> Generator[TestClient, None, None]:
    with TestClient(test_app) as client:
        yield client
