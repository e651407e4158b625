from __future__ import annotations

import json
from pathlib import Path

from fastapi.testclient import TestClient


def test_get_menus_returns_default_document(client: TestClient, menus_file: Path) -> None:
    response = client.get("/api/menus")

    assert response.status_code == 200
    body = response.json()
    assert set(body["menus"]) == {"actif", "a_venir", "archives"}
    assert body["menus"]["actif"]["titre"] == "Menu de cette semaine"
    assert body["menus"]["actif"]["periode"] == "Du dimanche 18 au jeudi 22 octobre"
    assert body["menus"]["a_venir"]["periode"] == "Du dimanche 25 au jeudi 29 octobre"
    assert body["dernierJour"] is False
    assert body["accompagnements"] == []
    assert menus_file.exists()


def test_get_menus_backfills_legacy_file(menus_file: Path, client: TestClient) -> None:
    menus_file.write_text(
        json.dumps(
            {
                "menus": {
                    "actif": {
                        "titre": "Cette semaine",
                        "plats": [
                            {
                                "id": 7,
                                "nom": "Accras",
                                "emoji": "🐟",
                                "description": "Morue",
                                "prix": "8€",
                            }
                        ],
                    },
                    "a_venir": {"titre": "Semaine prochaine", "plats": []},
                }
            }
        ),
        encoding="utf-8",
    )

    body = client.get("/api/menus").json()

    assert body["menus"]["archives"]["plats"] == []
    assert body["menus"]["actif"]["plats"][0]["ordre"] is None
    stored = json.loads(menus_file.read_text(encoding="utf-8"))
    assert "archives" in stored["menus"]


def test_replace_menus(client: TestClient) -> None:
    response = client.post(
        "/api/menus",
        json={
            "menus": {
                "actif": {
                    "titre": "Cette semaine",
                    "plats": [
                        {
                            "id": 3,
                            "nom": "Poulet",
                            "emoji": "🍗",
                            "description": "Boucané",
                            "prix": "12€",
                            "ordre": 1,
                        }
                    ],
                },
            },
            "accompagnements": [{"id": 1, "nom": "Riz", "emoji": "🍚", "actif": True}],
        },
    )

    assert response.status_code == 200
    assert response.json() == {"success": True, "message": "Menus sauvegardés avec succès"}
    body = client.get("/api/menus").json()
    assert body["menus"]["actif"]["plats"][0]["id"] == 3
    assert body["menus"]["a_venir"]["plats"] == []
    assert body["accompagnements"][0]["nom"] == "Riz"


def test_replace_menus_rejects_malformed_payload(client: TestClient) -> None:
    missing_menus = client.post("/api/menus", json={"accompagnements": []})
    duplicate_ids = client.post(
        "/api/menus",
        json={
            "menus": {
                "actif": {"titre": "A", "plats": [{"id": 1, "nom": "X"}]},
                "archives": {"titre": "B", "plats": [{"id": 1, "nom": "Y"}]},
            }
        },
    )

    assert missing_menus.status_code == 400
    assert missing_menus.json()["code"] == "INVALID_REQUEST"
    assert duplicate_ids.status_code == 400
    assert duplicate_ids.json()["code"] == "INVALID_MENU_DATA"


def test_rotate_menus(client: TestClient, add_dish) -> None:
    add_dish("actif", "Poulet")
    add_dish("a_venir", "Accras")

    response = client.post("/api/menus/basculer")

    assert response.status_code == 200
    assert response.json()["message"] == "Menus basculés avec succès"
    menus = client.get("/api/menus").json()["menus"]
    assert [plat["nom"] for plat in menus["actif"]["plats"]] == ["Accras"]
    assert menus["actif"]["titre"] == "Menu de cette semaine"
    assert menus["a_venir"]["plats"] == []
    assert menus["archives"]["plats"] == []


def test_clear_menu(client: TestClient, add_dish) -> None:
    add_dish("actif", "Poulet")
    add_dish("archives", "Cabri")

    response = client.post("/api/menus/vider", json={"categorie": "archives"})

    assert response.status_code == 200
    assert response.json()["message"] == "Menu archives vidé avec succès"
    menus = client.get("/api/menus").json()["menus"]
    assert menus["archives"]["plats"] == []
    assert len(menus["actif"]["plats"]) == 1


def test_unwritable_file_keeps_serving_from_memory(
    client: TestClient, add_dish, menus_file: Path
) -> None:
    menus_file.mkdir()

    add_dish("actif", "Poulet")

    plats = client.get("/api/menus").json()["menus"]["actif"]["plats"]
    assert [plat["nom"] for plat in plats] == ["Poulet"]
