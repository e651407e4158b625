from __future__ import annotations

from fastapi import APIRouter, Depends

from foodstory.api.dependencies import get_menu_store
from foodstory.application.dto.responses import StatusResponse
from foodstory.application.ports.repositories import MenuStore
from foodstory.application.use_cases.status import GetStatus

router = APIRouter()


@router.get("/health/live")
def live() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/status", response_model=StatusResponse)
def status(store: MenuStore = Depends(get_menu_store)) -> StatusResponse:
    return GetStatus(store).execute()
