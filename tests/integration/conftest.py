from __future__ import annotations

import os
import sys
from datetime import date
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).resolve().parents[2] / "src"))

from foodstory.api.main import create_app
from foodstory.infrastructure.storage.json_store import JsonFileStorage, JsonMenuStore

TODAY = date(2026, 10, 19)


@pytest.fixture(scope="session", autouse=True)
def integration_environment() -> Iterator[None]:
    os.environ.setdefault("APP_ENV", "test")
    os.environ.setdefault("OTEL_SERVICE_NAME", "foodstory-menus-test")
    os.environ.setdefault("OTEL_EXPORTER_OTLP_ENDPOINT", "")
    yield


@pytest.fixture
def menus_file(tmp_path: Path) -> Path:
    return tmp_path / "menus.json"


@pytest.fixture
def menu_store(menus_file: Path) -> JsonMenuStore:
    return JsonMenuStore(JsonFileStorage(menus_file), today=lambda: TODAY)


@pytest.fixture
def client(menu_store: JsonMenuStore) -> Iterator[TestClient]:
    with TestClient(create_app(store=menu_store)) as test_client:
        yield test_client


@pytest.fixture
def add_dish(client: TestClient) -> Callable[[str, str], dict[str, Any]]:
    def _add(categorie: str, nom: str) -> dict[str, Any]:
        response = client.post(
            "/api/plats",
            json={
                "categorie": categorie,
                "plat": {
                    "nom": nom,
                    "emoji": "🍽️",
                    "description": f"{nom} maison",
                    "prix": "10€",
                },
            },
        )
        assert response.status_code == 200, response.text
        return response.json()["plat"]

    return _add
