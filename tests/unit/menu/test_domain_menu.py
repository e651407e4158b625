from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from foodstory.domain.common.ids import DishId
from foodstory.domain.menu.entities import (
    DEFAULT_TITLES,
    Category,
    Dish,
    MenuCategory,
    MenuDocument,
    MenuValidationError,
    validate_dish_fields,
)
from foodstory.domain.menu.periods import MenuPeriods


def _dish(dish_id: int, ordre: int | None) -> Dish:
    return Dish(
        dish_id=DishId(dish_id),
        nom=f"Plat {dish_id}",
        emoji="🍽️",
        description="Description",
        prix="10€",
        ordre=ordre,
    )


def test_category_parse_rejects_unknown_key() -> None:
    assert Category.parse("a_venir") is Category.A_VENIR
    with pytest.raises(MenuValidationError) as exc_info:
        Category.parse("dessert")
    assert exc_info.value.details == {"categorie": "dessert"}


def test_default_document_has_three_empty_categories() -> None:
    document = MenuDocument.default()

    assert set(document.menus) == set(Category)
    assert document.menus[Category.ARCHIVES].titre == DEFAULT_TITLES[Category.ARCHIVES]
    assert document.all_dishes() == []
    assert document.accompagnements == []


def test_partial_document_backfills_missing_archives() -> None:
    document = MenuDocument(
        menus={
            Category.ACTIF: MenuCategory(titre="Cette semaine", plats=[_dish(1, 1)]),
            Category.A_VENIR: MenuCategory(titre="Semaine prochaine"),
        }
    )

    assert document.menus[Category.ARCHIVES].plats == []
    assert document.menus[Category.ACTIF].titre == "Cette semaine"
    assert document.dish_count() == 1


def test_sort_is_stable_and_puts_missing_ordre_last() -> None:
    menu = MenuCategory(
        titre="Menu",
        plats=[_dish(1, None), _dish(2, 2), _dish(3, 1), _dish(4, 2)],
    )

    menu.sort()

    assert [dish.dish_id for dish in menu.plats] == [3, 2, 4, 1]
    assert menu.plats[-1].ordre is None
    assert menu.max_ordre() == 2


def test_apply_periods_stamps_current_and_upcoming_only() -> None:
    document = MenuDocument.default()
    document.apply_periods(
        MenuPeriods(current="cette semaine", upcoming="la suivante", is_last_day=False)
    )

    assert document.menus[Category.ACTIF].periode == "cette semaine"
    assert document.menus[Category.A_VENIR].periode == "la suivante"
    assert document.menus[Category.ARCHIVES].periode == ""


def test_validate_dish_fields_strips_values() -> None:
    cleaned = validate_dish_fields(
        {"nom": " Poulet ", "emoji": "🍗", "description": " Boucané ", "prix": "12€ "}
    )
    assert cleaned == {"nom": "Poulet", "emoji": "🍗", "description": "Boucané", "prix": "12€"}


def test_validate_dish_fields_reports_every_blank_field() -> None:
    with pytest.raises(MenuValidationError) as exc_info:
        validate_dish_fields({"nom": "  ", "emoji": "🍗", "prix": None})

    assert exc_info.value.details["errors"] == [
        "Le nom du plat est requis",
        "La description est requise",
        "Le prix est requis",
    ]


def test_validate_dish_fields_enforces_length_limits() -> None:
    with pytest.raises(MenuValidationError):
        validate_dish_fields(
            {"nom": "x" * 101, "emoji": "🍗", "description": "ok", "prix": "1€"}
        )
    with pytest.raises(MenuValidationError):
        validate_dish_fields(
            {"nom": "ok", "emoji": "🍗", "description": "x" * 501, "prix": "1€"}
        )


def test_zero_ordre_sorts_with_missing_ones() -> None:
    menu = MenuCategory(titre="Menu", plats=[_dish(1, 0), _dish(2, 3), _dish(3, None)])

    menu.sort()

    assert [dish.dish_id for dish in menu.plats] == [2, 1, 3]
