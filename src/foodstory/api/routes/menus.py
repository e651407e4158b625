from __future__ import annotations

from fastapi import APIRouter, Depends

from foodstory.api.dependencies import get_menu_store
from foodstory.application.dto.requests import CategoryRequest, MenuDocumentRequest
from foodstory.application.dto.responses import ActionResponse, MenuDocumentResponse
from foodstory.application.ports.repositories import MenuStore
from foodstory.application.use_cases.menus import ClearMenu, GetMenus, ReplaceMenus, RotateMenus

router = APIRouter()


@router.get("/api/menus", response_model=MenuDocumentResponse)
def get_menus(store: MenuStore = Depends(get_menu_store)) -> MenuDocumentResponse:
    return GetMenus(store).execute()


@router.post("/api/menus", response_model=ActionResponse)
def replace_menus(
    request_dto: MenuDocumentRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return ReplaceMenus(store).execute(request_dto)


@router.post("/api/menus/basculer", response_model=ActionResponse)
def rotate_menus(store: MenuStore = Depends(get_menu_store)) -> ActionResponse:
    return RotateMenus(store).execute()


@router.post("/api/menus/vider", response_model=ActionResponse)
def clear_menu(
    request_dto: CategoryRequest,
    store: MenuStore = Depends(get_menu_store),
) -> ActionResponse:
    return ClearMenu(store).execute(request_dto.categorie)
