from __future__ import annotations

from foodstory.application.dto.requests import MenuCategoryRequest, MenuDocumentRequest
from foodstory.application.dto.responses import (
    DishResponse,
    MenuCategoryResponse,
    MenuDocumentResponse,
    MenusResponse,
    SideResponse,
)
from foodstory.domain.common.ids import DishId, SideId
from foodstory.domain.menu.entities import (
    DEFAULT_TITLES,
    Category,
    Dish,
    MenuCategory,
    MenuDocument,
)
from foodstory.domain.side.entities import Side


def to_dish_response(dish: Dish) -> DishResponse:
    return DishResponse(
        id=int(dish.dish_id),
        nom=dish.nom,
        emoji=dish.emoji,
        description=dish.description,
        prix=dish.prix,
        ordre=dish.ordre,
    )


def to_side_response(side: Side) -> SideResponse:
    return SideResponse(
        id=int(side.side_id),
        nom=side.nom,
        emoji=side.emoji,
        actif=side.actif,
    )


def _to_category_response(menu: MenuCategory) -> MenuCategoryResponse:
    return MenuCategoryResponse(
        titre=menu.titre,
        periode=menu.periode,
        plats=[to_dish_response(dish) for dish in menu.plats],
    )


def to_menu_document_response(
    document: MenuDocument,
    is_last_day: bool = False,
) -> MenuDocumentResponse:
    return MenuDocumentResponse(
        menus=MenusResponse(
            actif=_to_category_response(document.menus[Category.ACTIF]),
            a_venir=_to_category_response(document.menus[Category.A_VENIR]),
            archives=_to_category_response(document.menus[Category.ARCHIVES]),
        ),
        accompagnements=[to_side_response(side) for side in document.accompagnements],
        dernierJour=is_last_day,
    )


def _category_from_request(category: Category, payload: MenuCategoryRequest) -> MenuCategory:
    return MenuCategory(
        titre=payload.titre or DEFAULT_TITLES[category],
        periode=payload.periode,
        plats=[
            Dish(
                dish_id=DishId(plat.id),
                nom=plat.nom,
                emoji=plat.emoji,
                description=plat.description,
                prix=plat.prix,
                ordre=plat.ordre,
            )
            for plat in payload.plats
        ],
    )


def document_from_request(request_dto: MenuDocumentRequest) -> MenuDocument:
    menus: dict[Category, MenuCategory] = {}
    for category in Category:
        payload = getattr(request_dto.menus, category.value)
        if payload is not None:
            menus[category] = _category_from_request(category, payload)

    return MenuDocument(
        menus=menus,
        accompagnements=[
            Side(side_id=SideId(side.id), nom=side.nom, emoji=side.emoji, actif=side.actif)
            for side in request_dto.accompagnements
        ],
    )
