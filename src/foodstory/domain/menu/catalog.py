from __future__ import annotations

from dataclasses import replace
from typing import Any

from foodstory.domain.common.ids import DishId
from foodstory.domain.menu.entities import (
    DEFAULT_TITLES,
    Category,
    Dish,
    DishNotFoundError,
    MenuCategory,
    MenuDocument,
    validate_dish_fields,
)


class DishCatalog:
    """Dish operations over the three categories of one menu document.

    The catalog mutates the document it wraps and never touches storage;
    callers load the document, apply operations and hand it back to the store.

    Ordres stay contiguous (1..N) after add, move, move_up and move_down.
    Delete removes the dish without renumbering, so gaps left behind only
    disappear on the next move out of that category.
    """

    def __init__(self, document: MenuDocument) -> None:
        self._document = document

    @property
    def document(self) -> MenuDocument:
        return self._document

    def _category(self, category: Category | str) -> MenuCategory:
        return self._document.category(Category.parse(category))

    def next_id(self) -> DishId:
        return DishId(max((dish.dish_id for dish in self._document.all_dishes()), default=0) + 1)

    def find(self, category: Category | str, dish_id: DishId) -> Dish | None:
        menu = self._category(category)
        index = menu.index_of(dish_id)
        return None if index is None else menu.plats[index]

    def locate(self, dish_id: DishId) -> tuple[Category, Dish] | None:
        for category in Category:
            dish = self.find(category, dish_id)
            if dish is not None:
                return category, dish
        return None

    def add(self, category: Category | str, fields: dict[str, Any]) -> Dish:
        cleaned = validate_dish_fields(fields)
        menu = self._category(category)
        dish = Dish(dish_id=self.next_id(), ordre=menu.max_ordre() + 1, **cleaned)
        menu.plats.append(dish)
        menu.sort()
        return dish

    def edit(self, category: Category | str, dish_id: DishId, fields: dict[str, Any]) -> Dish:
        menu = self._category(category)
        index = menu.index_of(dish_id)
        if index is None:
            raise DishNotFoundError(dish_id, Category.parse(category))

        cleaned = validate_dish_fields(fields)
        updated = replace(menu.plats[index], **cleaned)
        menu.plats[index] = updated
        return updated

    def delete(self, category: Category | str, dish_id: DishId) -> bool:
        menu = self._category(category)
        index = menu.index_of(dish_id)
        if index is None:
            return False
        del menu.plats[index]
        return True

    def move(
        self,
        source: Category | str,
        destination: Category | str,
        dish_id: DishId,
    ) -> bool:
        source_menu = self._category(source)
        destination_menu = self._category(destination)
        index = source_menu.index_of(dish_id)
        if index is None:
            return False

        dish = source_menu.plats.pop(index)
        destination_menu.plats.append(replace(dish, ordre=destination_menu.max_ordre() + 1))
        # Renumber by array position, not by previous ordre.
        source_menu.plats[:] = [
            replace(remaining, ordre=position)
            for position, remaining in enumerate(source_menu.plats, start=1)
        ]
        return True

    def archive(self, source: Category | str, dish_id: DishId) -> bool:
        return self.move(source, Category.ARCHIVES, dish_id)

    def move_up(self, category: Category | str, dish_id: DishId) -> bool:
        return self._swap_with_neighbour(category, dish_id, offset=-1)

    def move_down(self, category: Category | str, dish_id: DishId) -> bool:
        return self._swap_with_neighbour(category, dish_id, offset=1)

    def _swap_with_neighbour(self, category: Category | str, dish_id: DishId, offset: int) -> bool:
        menu = self._category(category)
        menu.sort()
        index = menu.index_of(dish_id)
        if index is None:
            raise DishNotFoundError(dish_id, Category.parse(category))

        neighbour_index = index + offset
        if neighbour_index < 0 or neighbour_index >= len(menu.plats):
            return False

        dish = menu.plats[index]
        neighbour = menu.plats[neighbour_index]
        menu.plats[index] = replace(dish, ordre=neighbour.ordre)
        menu.plats[neighbour_index] = replace(neighbour, ordre=dish.ordre)
        menu.sort()
        return True

    def clear(self, category: Category | str) -> int:
        menu = self._category(category)
        removed = len(menu.plats)
        menu.plats.clear()
        return removed

    def rotate(self) -> None:
        """Promote the upcoming menu to the current week and open an empty upcoming one.

        Dishes of the previous current menu are dropped, not archived.
        """
        upcoming = self._document.menus[Category.A_VENIR]
        self._document.menus[Category.ACTIF] = MenuCategory(
            titre=DEFAULT_TITLES[Category.ACTIF],
            periode=upcoming.periode,
            plats=list(upcoming.plats),
        )
        self._document.menus[Category.A_VENIR] = MenuCategory.empty(Category.A_VENIR)
