from __future__ import annotations

import os
import platform
import sys
from datetime import datetime, timezone

from foodstory.application.dto.responses import StatusResponse
from foodstory.application.ports.repositories import MenuStore


class GetStatus:
    def __init__(self, store: MenuStore) -> None:
        self._store = store

    def execute(self) -> StatusResponse:
        store_status = self._store.status()
        return StatusResponse(
            status="OK",
            environment=os.getenv("APP_ENV", "dev"),
            timestamp=datetime.now(timezone.utc),
            memoryDataExists=store_status.memory_data_exists,
            fileExists=store_status.file_exists,
            platform=sys.platform,
            pythonVersion=platform.python_version(),
        )
