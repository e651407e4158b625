from __future__ import annotations

import logging
import os
from datetime import date, datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_MENU_TIMEZONE = "America/Guadeloupe"


@lru_cache(maxsize=8)
def _restaurant_zone(name: str) -> ZoneInfo | timezone:
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("menu_timezone_unknown", extra={"timezone": name})
        return timezone.utc


def restaurant_today() -> date:
    zone_name = os.getenv("MENU_TIMEZONE", DEFAULT_MENU_TIMEZONE)
    return datetime.now(_restaurant_zone(zone_name)).date()
