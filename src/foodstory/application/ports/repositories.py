from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from foodstory.domain.menu.entities import MenuDocument
from foodstory.domain.menu.periods import MenuPeriods


class DocumentStorage(Protocol):
    def read(self) -> dict[str, Any]: ...

    def write(self, payload: dict[str, Any]) -> None: ...

    def exists(self) -> bool: ...


class MenuStore(Protocol):
    def load(self) -> MenuDocument: ...

    def save(self, document: MenuDocument) -> bool: ...

    def current_periods(self) -> MenuPeriods: ...

    def status(self) -> StoreStatus: ...


class StorageUnavailableError(Exception):
    pass


@dataclass(frozen=True)
class StoreStatus:
    memory_data_exists: bool
    file_exists: bool
