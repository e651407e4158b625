from __future__ import annotations

import json
import logging
import os
from datetime import date
from pathlib import Path
from typing import Any, Callable

from opentelemetry import trace

from foodstory.application.metrics.menu_activity import record_menu_size, record_store_degraded
from foodstory.application.ports.repositories import (
    DocumentStorage,
    MenuStore,
    StorageUnavailableError,
    StoreStatus,
)
from foodstory.domain.menu.entities import Category, MenuDocument, MenuValidationError
from foodstory.domain.menu.periods import MenuPeriods, compute_periods
from foodstory.infrastructure.clock import restaurant_today
from foodstory.infrastructure.storage.serialization import document_from_dict, document_to_dict

logger = logging.getLogger(__name__)
tracer = trace.get_tracer(__name__)

DEFAULT_MENUS_FILE = "menus.json"


def _menus_file_path() -> Path:
    return Path(os.getenv("MENUS_FILE", DEFAULT_MENUS_FILE))


class JsonFileStorage(DocumentStorage):
    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> dict[str, Any]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError as exc:
            raise StorageUnavailableError(f"menus file not found: {self._path}") from exc
        except (OSError, ValueError) as exc:
            raise StorageUnavailableError(f"menus file unreadable: {exc}") from exc

        if not isinstance(data, dict):
            raise StorageUnavailableError("menus file does not contain a JSON object")
        return data

    def write(self, payload: dict[str, Any]) -> None:
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        try:
            content = json.dumps(payload, indent=2, ensure_ascii=False)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(content, encoding="utf-8")
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            raise StorageUnavailableError(f"menus file not writable: {exc}") from exc

    def exists(self) -> bool:
        return self._path.exists()


class JsonMenuStore(MenuStore):
    """Menu document persisted as JSON, with an in-process copy as fallback.

    The in-memory copy is refreshed by every successful file read and by every
    save. Saves update it before touching the file, so a read-only deployment
    keeps working for the lifetime of the process. The copy is served when the
    file cannot be read, and also while the last write failed, since the file
    then holds an older document.
    """

    def __init__(
        self,
        storage: DocumentStorage,
        today: Callable[[], date] = restaurant_today,
    ) -> None:
        self._storage = storage
        self._today = today
        self._memory: dict[str, Any] | None = None
        self._write_degraded = False

    def current_periods(self) -> MenuPeriods:
        return compute_periods(self._today())

    def load(self) -> MenuDocument:
        with tracer.start_as_current_span("menu_store.load"):
            if self._write_degraded and self._memory is not None:
                document = self._from_memory()
            else:
                document = self._read_file()

            document.apply_periods(self.current_periods())
            document.sort_all()
            return document

    def _read_file(self) -> MenuDocument:
        try:
            document = document_from_dict(self._storage.read())
        except (StorageUnavailableError, MenuValidationError) as exc:
            logger.warning(
                "menu_store_degraded",
                extra={"operation": "read", "error": str(exc)},
            )
            record_store_degraded("read")
            return self._from_memory()
        self._memory = document_to_dict(document)
        return document

    def _from_memory(self) -> MenuDocument:
        if self._memory is None:
            self._memory = document_to_dict(MenuDocument.default())
        # Rebuilt from the serialized copy so callers never share it.
        return document_from_dict(self._memory)

    def save(self, document: MenuDocument) -> bool:
        if not isinstance(document, MenuDocument):
            logger.error(
                "menu_store_rejected_document",
                extra={"document_type": type(document).__name__},
            )
            return False

        with tracer.start_as_current_span("menu_store.save"):
            try:
                payload = document_to_dict(document)
            except Exception:
                logger.exception("menu_store_serialization_failed")
                return False

            self._memory = payload
            try:
                self._storage.write(payload)
            except StorageUnavailableError as exc:
                self._write_degraded = True
                logger.warning(
                    "menu_store_degraded",
                    extra={"operation": "write", "error": str(exc)},
                )
                record_store_degraded("write")
            else:
                self._write_degraded = False

            for category in Category:
                record_menu_size(category.value, len(document.menus[category].plats))
            return True

    def status(self) -> StoreStatus:
        return StoreStatus(
            memory_data_exists=self._memory is not None,
            file_exists=self._storage.exists(),
        )


def build_menu_store(path: Path | str | None = None) -> JsonMenuStore:
    menus_file = Path(path) if path is not None else _menus_file_path()
    logger.info("menu_store_configured", extra={"menus_file": str(menus_file)})
    return JsonMenuStore(storage=JsonFileStorage(menus_file))
