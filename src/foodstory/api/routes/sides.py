from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from foodstory.api.dependencies import get_menu_store
from foodstory.application.dto.requests import SideRequest
from foodstory.application.dto.responses import SideActionResponse, SideResponse
from foodstory.application.ports.repositories import MenuStore
from foodstory.application.use_cases.sides import (
    AddSide,
    DeleteSide,
    EditSide,
    ListSides,
    ToggleSide,
)
from foodstory.domain.common.ids import SideId

router = APIRouter()

SideIdPath = Annotated[int, Path(gt=0, description="Positive integer side id")]


@router.get("/api/accompagnements", response_model=list[SideResponse])
def list_sides(store: MenuStore = Depends(get_menu_store)) -> list[SideResponse]:
    return ListSides(store).execute()


@router.post("/api/accompagnements", response_model=SideActionResponse)
def add_side(
    request_dto: SideRequest,
    store: MenuStore = Depends(get_menu_store),
) -> SideActionResponse:
    return AddSide(store).execute(request_dto)


@router.put("/api/accompagnements/{side_id}", response_model=SideActionResponse)
def edit_side(
    side_id: SideIdPath,
    request_dto: SideRequest,
    store: MenuStore = Depends(get_menu_store),
) -> SideActionResponse:
    return EditSide(store).execute(SideId(side_id), request_dto)


@router.put("/api/accompagnements/{side_id}/toggle", response_model=SideActionResponse)
def toggle_side(
    side_id: SideIdPath,
    store: MenuStore = Depends(get_menu_store),
) -> SideActionResponse:
    return ToggleSide(store).execute(SideId(side_id))


@router.delete("/api/accompagnements/{side_id}", response_model=SideActionResponse)
def delete_side(
    side_id: SideIdPath,
    store: MenuStore = Depends(get_menu_store),
) -> SideActionResponse:
    return DeleteSide(store).execute(SideId(side_id))
