from __future__ import annotations

from foodstory.application.ports.repositories import MenuStore
from foodstory.domain.menu.entities import MenuDocument


class MenuPersistenceError(Exception):
    pass


def persist(store: MenuStore, document: MenuDocument, failure_message: str) -> None:
    document.apply_periods(store.current_periods())
    if not store.save(document):
        raise MenuPersistenceError(failure_message)
