from __future__ import annotations

from foodstory.application.dto.requests import SideRequest
from foodstory.application.dto.responses import SideActionResponse, SideResponse
from foodstory.application.mappers.menu_mapper import to_side_response
from foodstory.application.metrics.menu_activity import record_side_operation
from foodstory.application.ports.repositories import MenuStore
from foodstory.application.use_cases.persistence import persist
from foodstory.domain.common.ids import SideId
from foodstory.domain.side.catalog import SideCatalog
from foodstory.domain.side.entities import SideNotFoundError


class ListSides:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self) -> list[SideResponse]:
        document = self._store.load()
        return [to_side_response(side) for side in SideCatalog(document.accompagnements).sides()]


class AddSide:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, request_dto: SideRequest) -> SideActionResponse:
        document = self._store.load()
        side = SideCatalog(document.accompagnements).add(request_dto.model_dump())
        persist(self._store, document, "Erreur lors de l'ajout de l'accompagnement")
        record_side_operation("add")
        return SideActionResponse(
            success=True,
            message="Accompagnement ajouté avec succès",
            accompagnement=to_side_response(side),
        )


class EditSide:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, side_id: SideId, request_dto: SideRequest) -> SideActionResponse:
        document = self._store.load()
        side = SideCatalog(document.accompagnements).edit(side_id, request_dto.model_dump())
        persist(self._store, document, "Erreur lors de la modification de l'accompagnement")
        record_side_operation("edit")
        return SideActionResponse(
            success=True,
            message="Accompagnement modifié avec succès",
            accompagnement=to_side_response(side),
        )


class ToggleSide:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, side_id: SideId) -> SideActionResponse:
        document = self._store.load()
        side = SideCatalog(document.accompagnements).toggle(side_id)
        persist(
            self._store,
            document,
            "Erreur lors du changement d'état de l'accompagnement",
        )
        record_side_operation("toggle")
        state = "activé" if side.actif else "désactivé"
        return SideActionResponse(
            success=True,
            message=f"Accompagnement {state} avec succès",
            accompagnement=to_side_response(side),
        )


class DeleteSide:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self, side_id: SideId) -> SideActionResponse:
        document = self._store.load()
        catalog = SideCatalog(document.accompagnements)
        side = catalog.find_by_id(side_id)
        if side is None or not catalog.delete(side_id):
            raise SideNotFoundError(side_id)
        persist(self._store, document, "Erreur lors de la suppression de l'accompagnement")
        record_side_operation("delete")
        return SideActionResponse(
            success=True,
            message="Accompagnement supprimé avec succès",
            accompagnement=to_side_response(side),
        )
