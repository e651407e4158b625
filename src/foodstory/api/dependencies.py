from __future__ import annotations

from starlette.requests import Request

from foodstory.application.ports.repositories import MenuStore


def get_menu_store(request: Request) -> MenuStore:
    return request.app.state.menu_store
