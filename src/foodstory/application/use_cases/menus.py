from __future__ import annotations

import logging
from collections import Counter

from foodstory.application.dto.requests import MenuDocumentRequest
from foodstory.application.dto.responses import ActionResponse, MenuDocumentResponse
from foodstory.application.mappers.menu_mapper import (
    document_from_request,
    to_menu_document_response,
)
from foodstory.application.metrics.menu_activity import record_menu_operation
from foodstory.application.ports.repositories import MenuStore
from foodstory.application.use_cases.persistence import persist
from foodstory.domain.menu.catalog import DishCatalog
from foodstory.domain.menu.entities import Category, MenuDocument, MenuValidationError

logger = logging.getLogger(__name__)


class GetMenus:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self) -> MenuDocumentResponse:
        document = self._store.load()
        # Persist the freshly stamped periods; a failed save still serves the menu.
        if not self._store.save(document):
            logger.warning("menu_periods_not_saved")
        periods = self._store.current_periods()
        return to_menu_document_response(document, is_last_day=periods.is_last_day)


def _ensure_unique_ids(document: MenuDocument) -> None:
    dish_ids = Counter(dish.dish_id for dish in document.all_dishes())
    duplicated_dishes = sorted(int(dish_id) for dish_id, count in dish_ids.items() if count > 1)
    side_ids = Counter(side.side_id for side in document.accompagnements)
    duplicated_sides = sorted(int(side_id) for side_id, count in side_ids.items() if count > 1)
    if duplicated_dishes or duplicated_sides:
        raise MenuValidationError(
            "Identifiants en double dans les menus",
            details={"plats": duplicated_dishes, "accompagnements": duplicated_sides},
        )


class ReplaceMenus:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, request_dto: MenuDocumentRequest) -> ActionResponse:
        document = document_from_request(request_dto)
        _ensure_unique_ids(document)
        persist(self._store, document, "Erreur lors de la sauvegarde")
        record_menu_operation("replace")
        return ActionResponse(success=True, message="Menus sauvegardés avec succès")


class RotateMenus:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self) -> ActionResponse:
        document = self._store.load()
        dropped = len(document.menus[Category.ACTIF].plats)
        DishCatalog(document).rotate()
        persist(self._store, document, "Erreur lors du basculement des menus")
        record_menu_operation("rotate")
        logger.info("menus_rotated", extra={"dropped_dishes": dropped})
        return ActionResponse(success=True, message="Menus basculés avec succès")


class ClearMenu:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, category: Category) -> ActionResponse:
        document = self._store.load()
        removed = DishCatalog(document).clear(category)
        persist(self._store, document, "Erreur lors du vidage du menu")
        record_menu_operation("clear")
        logger.info(
            "menu_cleared",
            extra={"category": category.value, "dropped_dishes": removed},
        )
        return ActionResponse(success=True, message=f"Menu {category.value} vidé avec succès")
