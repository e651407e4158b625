from __future__ import annotations

from typing import Any

from foodstory.domain.common.ids import DishId, SideId
from foodstory.domain.menu.entities import (
    DEFAULT_TITLES,
    Category,
    Dish,
    MenuCategory,
    MenuDocument,
    MenuValidationError,
)
from foodstory.domain.side.entities import Side


def _as_int(value: Any, default: int = 0) -> int:
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _as_str(value: Any) -> str:
    return "" if value is None else str(value)


def dish_from_dict(raw: dict[str, Any]) -> Dish:
    ordre = raw.get("ordre")
    return Dish(
        dish_id=DishId(_as_int(raw.get("id"))),
        nom=_as_str(raw.get("nom")),
        emoji=_as_str(raw.get("emoji")),
        description=_as_str(raw.get("description")),
        prix=_as_str(raw.get("prix")),
        ordre=None if ordre is None else _as_int(ordre),
    )


def dish_to_dict(dish: Dish) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "id": int(dish.dish_id),
        "nom": dish.nom,
        "emoji": dish.emoji,
        "description": dish.description,
        "prix": dish.prix,
    }
    if dish.ordre is not None:
        payload["ordre"] = dish.ordre
    return payload


def side_from_dict(raw: dict[str, Any]) -> Side:
    actif = raw.get("actif")
    return Side(
        side_id=SideId(_as_int(raw.get("id"))),
        nom=_as_str(raw.get("nom")),
        emoji=_as_str(raw.get("emoji")),
        actif=True if actif is None else bool(actif),
    )


def side_to_dict(side: Side) -> dict[str, Any]:
    return {
        "id": int(side.side_id),
        "nom": side.nom,
        "emoji": side.emoji,
        "actif": side.actif,
    }


def _category_from_dict(category: Category, raw: Any) -> MenuCategory:
    if not isinstance(raw, dict):
        raise MenuValidationError(f"menu category {category.value} must be an object")
    plats = raw.get("plats") or []
    if not isinstance(plats, list):
        raise MenuValidationError(f"menu category {category.value} has no dish list")
    return MenuCategory(
        titre=_as_str(raw.get("titre")) or DEFAULT_TITLES[category],
        periode=_as_str(raw.get("periode")),
        plats=[dish_from_dict(item) for item in plats if isinstance(item, dict)],
    )


def document_from_dict(data: Any) -> MenuDocument:
    """Build a document from persisted JSON, backfilling missing categories."""
    if not isinstance(data, dict):
        raise MenuValidationError("menu document must be an object")
    menus = data.get("menus") or {}
    if not isinstance(menus, dict):
        raise MenuValidationError("menu document has no menus object")

    categories = {
        category: _category_from_dict(category, menus[category.value])
        for category in Category
        if menus.get(category.value) is not None
    }
    sides = data.get("accompagnements") or []
    if not isinstance(sides, list):
        raise MenuValidationError("accompagnements must be a list")

    return MenuDocument(
        menus=categories,
        accompagnements=[side_from_dict(item) for item in sides if isinstance(item, dict)],
    )


def document_to_dict(document: MenuDocument) -> dict[str, Any]:
    return {
        "menus": {
            category.value: {
                "titre": document.menus[category].titre,
                "periode": document.menus[category].periode,
                "plats": [dish_to_dict(dish) for dish in document.menus[category].plats],
            }
            for category in Category
        },
        "accompagnements": [side_to_dict(side) for side in document.accompagnements],
    }
