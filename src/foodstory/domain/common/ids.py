from __future__ import annotations

from typing import NewType

DishId = NewType("DishId", int)
SideId = NewType("SideId", int)
