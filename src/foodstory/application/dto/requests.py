from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from foodstory.domain.menu.entities import Category


def _to_camel(value: str) -> str:
    parts = value.split("_")
    return parts[0] + "".join(part.capitalize() for part in parts[1:])


class CamelBaseModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=_to_camel,
        populate_by_name=True,
    )


class DishFieldsRequest(CamelBaseModel):
    nom: str = ""
    emoji: str = ""
    description: str = ""
    prix: str = ""


class DishRequest(CamelBaseModel):
    categorie: Category
    plat: DishFieldsRequest


class CategoryRequest(CamelBaseModel):
    categorie: Category


class ArchiveDishRequest(CamelBaseModel):
    categorie_source: Category


class MoveDishRequest(CamelBaseModel):
    categorie_source: Category
    categorie_destination: Category


class SideRequest(CamelBaseModel):
    nom: str = ""
    emoji: str = ""
    actif: bool | None = None


class DishRecordRequest(DishFieldsRequest):
    id: int = Field(ge=1)
    ordre: int | None = None


class MenuCategoryRequest(CamelBaseModel):
    titre: str = ""
    periode: str = ""
    plats: list[DishRecordRequest] = Field(default_factory=list)


class MenusRequest(BaseModel):
    actif: MenuCategoryRequest | None = None
    a_venir: MenuCategoryRequest | None = None
    archives: MenuCategoryRequest | None = None


class SideRecordRequest(CamelBaseModel):
    id: int = Field(ge=1)
    nom: str = ""
    emoji: str = ""
    actif: bool = True


class MenuDocumentRequest(CamelBaseModel):
    menus: MenusRequest
    accompagnements: list[SideRecordRequest] = Field(default_factory=list)
