from __future__ import annotations

from fastapi.testclient import TestClient


def _add_side(client: TestClient, nom: str) -> dict:
    response = client.post("/api/accompagnements", json={"nom": nom, "emoji": "🍚"})
    assert response.status_code == 200, response.text
    return response.json()["accompagnement"]


def test_add_and_list_sides(client: TestClient) -> None:
    created = _add_side(client, "Riz créole")
    _add_side(client, "Lentilles")

    response = client.get("/api/accompagnements")

    assert created == {"id": 1, "nom": "Riz créole", "emoji": "🍚", "actif": True}
    assert [side["id"] for side in response.json()] == [1, 2]


def test_add_side_requires_name(client: TestClient) -> None:
    response = client.post("/api/accompagnements", json={"emoji": "🍚"})

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_MENU_DATA"
    assert response.json()["error"] == "Nom et emoji requis"


def test_edit_side(client: TestClient) -> None:
    _add_side(client, "Riz")

    response = client.put(
        "/api/accompagnements/1",
        json={"nom": "Riz blanc", "emoji": "🍚", "actif": False},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["message"] == "Accompagnement modifié avec succès"
    assert body["accompagnement"]["actif"] is False


def test_toggle_side_twice(client: TestClient) -> None:
    _add_side(client, "Riz")

    first = client.put("/api/accompagnements/1/toggle")
    second = client.put("/api/accompagnements/1/toggle")

    assert first.json()["message"] == "Accompagnement désactivé avec succès"
    assert second.json()["message"] == "Accompagnement activé avec succès"
    assert client.get("/api/accompagnements").json()[0]["actif"] is True


def test_delete_side(client: TestClient) -> None:
    _add_side(client, "Riz")

    response = client.delete("/api/accompagnements/1")
    missing = client.delete("/api/accompagnements/1")

    assert response.status_code == 200
    assert response.json()["accompagnement"]["nom"] == "Riz"
    assert missing.status_code == 404
    assert missing.json()["code"] == "SIDE_NOT_FOUND"
    assert missing.json()["error"] == "Accompagnement non trouvé"
    assert client.get("/api/accompagnements").json() == []


def test_invalid_side_id_is_a_bad_request(client: TestClient) -> None:
    response = client.put("/api/accompagnements/abc/toggle")

    assert response.status_code == 400
    assert response.json()["code"] == "INVALID_REQUEST"
    assert response.json()["error"] == "ID d'accompagnement invalide"


def test_toggle_missing_side_is_not_found(client: TestClient) -> None:
    response = client.put("/api/accompagnements/42/toggle")

    assert response.status_code == 404
    body = response.json()
    assert body["error"] == "Accompagnement non trouvé"
    assert body["details"] == {"id": 42}
