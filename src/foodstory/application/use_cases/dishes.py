from __future__ import annotations

from foodstory.application.dto.requests import DishFieldsRequest
from foodstory.application.dto.responses import ActionResponse, DishCreatedResponse
from foodstory.application.mappers.menu_mapper import to_dish_response
from foodstory.application.metrics.menu_activity import record_dish_operation
from foodstory.application.ports.repositories import MenuStore
from foodstory.application.use_cases.persistence import persist
from foodstory.domain.common.ids import DishId
from foodstory.domain.menu.catalog import DishCatalog
from foodstory.domain.menu.entities import Category, DishNotFoundError

_MENU_LABELS: dict[Category, str] = {
    Category.ACTIF: "actuel",
    Category.A_VENIR: "à venir",
    Category.ARCHIVES: "archives",
}


class AddDish:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, category: Category, fields: DishFieldsRequest) -> DishCreatedResponse:
        document = self._store.load()
        dish = DishCatalog(document).add(category, fields.model_dump())
        persist(self._store, document, "Erreur lors de l'ajout du plat")
        record_dish_operation("add", category.value)
        return DishCreatedResponse(
            success=True,
            plat=to_dish_response(dish),
            message="Plat ajouté avec succès",
        )


class EditDish:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(
        self,
        category: Category,
        dish_id: DishId,
        fields: DishFieldsRequest,
    ) -> ActionResponse:
        document = self._store.load()
        DishCatalog(document).edit(category, dish_id, fields.model_dump())
        persist(self._store, document, "Erreur lors de la modification du plat")
        record_dish_operation("edit", category.value)
        return ActionResponse(success=True, message="Plat modifié avec succès")


class DeleteDish:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, category: Category, dish_id: DishId) -> ActionResponse:
        document = self._store.load()
        if not DishCatalog(document).delete(category, dish_id):
            raise DishNotFoundError(dish_id, category)
        persist(self._store, document, "Erreur lors de la suppression du plat")
        record_dish_operation("delete", category.value)
        return ActionResponse(success=True, message="Plat supprimé définitivement")


class MoveDish:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, source: Category, destination: Category, dish_id: DishId) -> ActionResponse:
        document = self._store.load()
        if not DishCatalog(document).move(source, destination, dish_id):
            raise DishNotFoundError(dish_id, source)
        persist(self._store, document, "Erreur lors du basculement du plat")
        record_dish_operation("move", destination.value)
        return ActionResponse(
            success=True,
            message=(
                f"Plat basculé du menu {_MENU_LABELS[source]} "
                f"vers le menu {_MENU_LABELS[destination]}"
            ),
        )


class ArchiveDish:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, source: Category, dish_id: DishId) -> ActionResponse:
        document = self._store.load()
        if not DishCatalog(document).archive(source, dish_id):
            raise DishNotFoundError(dish_id, source)
        persist(self._store, document, "Erreur lors de l'archivage du plat")
        record_dish_operation("archive", source.value)
        return ActionResponse(success=True, message="Plat archivé avec succès")


class ReorderDish:
    """Swap a dish with its neighbour; hitting either end is a no-op, not an error."""

    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, category: Category, dish_id: DishId, *, upward: bool) -> ActionResponse:
        document = self._store.load()
        catalog = DishCatalog(document)
        moved = catalog.move_up(category, dish_id) if upward else catalog.move_down(category, dish_id)
        if not moved:
            position = "première" if upward else "dernière"
            return ActionResponse(
                success=False,
                message=f"Le plat est déjà en {position} position",
            )

        persist(self._store, document, "Erreur lors du déplacement du plat")
        record_dish_operation("move_up" if upward else "move_down", category.value)
        direction = "haut" if upward else "bas"
        return ActionResponse(success=True, message=f"Plat déplacé vers le {direction} avec succès")
