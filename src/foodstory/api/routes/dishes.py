from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path

from foodstory.api.dependencies import get_menu_store
from foodstory.application.dto.requests import (
    ArchiveDishRequest,
    CategoryRequest,
    DishRequest,
    MoveDishRequest,
)
from foodstory.application.dto.responses import ActionResponse, DishCreatedResponse
from foodstory.application.ports.repositories import MenuStore
from foodstory.application.use_cases.dishes import (
    AddDish,
    ArchiveDish,
    DeleteDish,
    EditDish,
    MoveDish,
    ReorderDish,
)
from foodstory.domain.common.ids import DishId

router = APIRouter()

DishIdPath = Annotated[int, Path(gt=0, description="Positive integer dish id")]


@router.post("/api/plats", response_model=DishCreatedResponse)
def add_dish(
    request_dto: DishRequest,
    store: MenuStore = Depends(get_menu_store),
) -> DishCreatedResponse:
    return AddDish(store).execute(request_dto.categorie, request_dto.plat)


@router.put("/api/plats/{dish_id}", response_model=ActionResponse)
def edit_dish(
    dish_id: DishIdPath,
    request_dto: DishRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return EditDish(store).execute(request_dto.categorie, DishId(dish_id), request_dto.plat)


@router.delete("/api/plats/{dish_id}", response_model=ActionResponse)
def delete_dish(
    dish_id: DishIdPath,
    request_dto: CategoryRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return DeleteDish(store).execute(request_dto.categorie, DishId(dish_id))


@router.post("/api/plats/{dish_id}/archiver", response_model=ActionResponse)
def archive_dish(
    dish_id: DishIdPath,
    request_dto: ArchiveDishRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return ArchiveDish(store).execute(request_dto.categorie_source, DishId(dish_id))


@router.post("/api/plats/{dish_id}/basculer", response_model=ActionResponse)
def move_dish(
    dish_id: DishIdPath,
    request_dto: MoveDishRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return MoveDish(store).execute(
        request_dto.categorie_source,
        request_dto.categorie_destination,
        DishId(dish_id),
    )


@router.post("/api/plats/{dish_id}/monter", response_model=ActionResponse)
def move_dish_up(
    dish_id: DishIdPath,
    request_dto: CategoryRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return ReorderDish(store).execute(request_dto.categorie, DishId(dish_id), upward=True)


@router.post("/api/plats/{dish_id}/descendre", response_model=ActionResponse)
def move_dish_down(
    dish_id: DishIdPath,
    request_dto: CategoryRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return ReorderDish(store).execute(request_dto.categorie, DishId(dish_id), upward=False)
