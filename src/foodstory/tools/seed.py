from __future__ import annotations

from foodstory.domain.menu.catalog import DishCatalog
from foodstory.domain.menu.entities import Category
from foodstory.domain.side.catalog import SideCatalog
from foodstory.infrastructure.storage.json_store import build_menu_store

SAMPLE_DISHES: list[tuple[Category, dict[str, str]]] = [
    (
        Category.ACTIF,
        {
            "nom": "Poulet boucané",
            "emoji": "🍗",
            "description": "Poulet fumé à la canne, riz et haricots rouges",
            "prix": "12€",
        },
    ),
    (
        Category.ACTIF,
        {
            "nom": "Colombo de cabri",
            "emoji": "🍛",
            "description": "Cabri mijoté aux épices colombo",
            "prix": "14€",
        },
    ),
    (
        Category.A_VENIR,
        {
            "nom": "Accras de morue",
            "emoji": "🐟",
            "description": "Beignets de morue, sauce chien",
            "prix": "8€",
        },
    ),
]

SAMPLE_SIDES: list[dict[str, str]] = [
    {"nom": "Riz créole", "emoji": "🍚"},
    {"nom": "Bananes plantain", "emoji": "🍌"},
    {"nom": "Gratin de christophine", "emoji": "🥗"},
]


def main() -> None:
    store = build_menu_store()
    document = store.load()
    if document.dish_count() or document.accompagnements:
        print("menu already populated")
        return

    dishes = DishCatalog(document)
    for category, fields in SAMPLE_DISHES:
        dishes.add(category, fields)

    sides = SideCatalog(document.accompagnements)
    for fields in SAMPLE_SIDES:
        sides.add(fields)

    store.save(document)
    print("seed complete")


if __name__ == "__main__":
    main()
