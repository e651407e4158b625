from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from foodstory.domain.common.ids import DishId
from foodstory.domain.menu.periods import MenuPeriods
from foodstory.domain.side.entities import Side

# Sort key used for records persisted before ordering existed.
MISSING_ORDRE = 999

NOM_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 500


class Category(str, Enum):
    ACTIF = "actif"
    A_VENIR = "a_venir"
    ARCHIVES = "archives"

    @classmethod
    def parse(cls, value: str | Category) -> Category:
        try:
            return cls(value)
        except ValueError as exc:
            raise MenuValidationError(
                "Catégorie invalide",
                details={"categorie": str(value)},
            ) from exc


DEFAULT_TITLES: dict[Category, str] = {
    Category.ACTIF: "Menu de cette semaine",
    Category.A_VENIR: "Aperçu semaine prochaine",
    Category.ARCHIVES: "Plats archivés",
}


@dataclass(frozen=True)
class Dish:
    dish_id: DishId
    nom: str
    emoji: str
    description: str
    prix: str
    ordre: int | None = None

    @property
    def sort_key(self) -> int:
        # A zero ordre counts as missing too.
        return self.ordre or MISSING_ORDRE


@dataclass
class MenuCategory:
    titre: str
    periode: str = ""
    plats: list[Dish] = field(default_factory=list)

    @classmethod
    def empty(cls, category: Category) -> MenuCategory:
        return cls(titre=DEFAULT_TITLES[category])

    def sort(self) -> None:
        # list.sort is stable: equal ordres keep their array order.
        self.plats.sort(key=lambda dish: dish.sort_key)

    def max_ordre(self) -> int:
        return max((dish.ordre or 0 for dish in self.plats), default=0)

    def index_of(self, dish_id: DishId) -> int | None:
        for index, dish in enumerate(self.plats):
            if dish.dish_id == dish_id:
                return index
        return None


@dataclass
class MenuDocument:
    menus: dict[Category, MenuCategory] = field(default_factory=dict)
    accompagnements: list[Side] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.ensure_categories()

    @classmethod
    def default(cls) -> MenuDocument:
        return cls()

    def ensure_categories(self) -> None:
        for category in Category:
            if category not in self.menus:
                self.menus[category] = MenuCategory.empty(category)

    def category(self, category: Category) -> MenuCategory:
        return self.menus[category]

    def all_dishes(self) -> list[Dish]:
        return [dish for category in Category for dish in self.menus[category].plats]

    def dish_count(self) -> int:
        return sum(len(self.menus[category].plats) for category in Category)

    def sort_all(self) -> None:
        for category in Category:
            self.menus[category].sort()

    def apply_periods(self, periods: MenuPeriods) -> None:
        self.menus[Category.ACTIF].periode = periods.current
        self.menus[Category.A_VENIR].periode = periods.upcoming


class MenuValidationError(ValueError):
    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.details = details or {}


class DishNotFoundError(Exception):
    def __init__(self, dish_id: DishId, category: Category) -> None:
        super().__init__("Plat non trouvé")
        self.details = {"id": int(dish_id), "categorie": category.value}


REQUIRED_DISH_FIELDS: dict[str, str] = {
    "nom": "Le nom du plat est requis",
    "emoji": "L'emoji est requis",
    "description": "La description est requise",
    "prix": "Le prix est requis",
}


def validate_dish_fields(fields: dict[str, Any]) -> dict[str, str]:
    errors: list[str] = []
    cleaned: dict[str, str] = {}
    for name, message in REQUIRED_DISH_FIELDS.items():
        value = fields.get(name)
        text = value.strip() if isinstance(value, str) else ""
        if not text:
            errors.append(message)
        cleaned[name] = text

    if len(cleaned["nom"]) > NOM_MAX_LENGTH:
        errors.append(f"Le nom du plat ne peut pas dépasser {NOM_MAX_LENGTH} caractères")
    if len(cleaned["description"]) > DESCRIPTION_MAX_LENGTH:
        errors.append(
            f"La description ne peut pas dépasser {DESCRIPTION_MAX_LENGTH} caractères"
        )

    if errors:
        raise MenuValidationError("; ".join(errors), details={"errors": errors})
    return cleaned
