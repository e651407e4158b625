from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class DishResponse(BaseModel):
    id: int
    nom: str
    emoji: str
    description: str
    prix: str
    ordre: int | None = None


class MenuCategoryResponse(BaseModel):
    titre: str
    periode: str = ""
    plats: list[DishResponse] = Field(default_factory=list)


class MenusResponse(BaseModel):
    actif: MenuCategoryResponse
    a_venir: MenuCategoryResponse
    archives: MenuCategoryResponse


class SideResponse(BaseModel):
    id: int
    nom: str
    emoji: str
    actif: bool


class MenuDocumentResponse(BaseModel):
    menus: MenusResponse
    accompagnements: list[SideResponse] = Field(default_factory=list)
    dernierJour: bool = False


class ActionResponse(BaseModel):
    success: bool
    message: str


class DishCreatedResponse(ActionResponse):
    plat: DishResponse


class SideActionResponse(ActionResponse):
    accompagnement: SideResponse


class StatusResponse(BaseModel):
    status: str
    environment: str
    timestamp: datetime
    memoryDataExists: bool
    fileExists: bool
    platform: str
    pythonVersion: str
