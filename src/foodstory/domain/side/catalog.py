from __future__ import annotations

from typing import Any

from foodstory.domain.common.ids import SideId
from foodstory.domain.menu.entities import MenuValidationError
from foodstory.domain.side.entities import Side, SideNotFoundError

INVALID_SIDE_ID = "ID d'accompagnement invalide"


def normalize_side_id(value: int | str) -> SideId:
    if isinstance(value, bool):
        raise MenuValidationError(INVALID_SIDE_ID, details={"id": repr(value)})
    try:
        return SideId(int(value))
    except (TypeError, ValueError) as exc:
        raise MenuValidationError(INVALID_SIDE_ID, details={"id": repr(value)}) from exc


def _validate_side_fields(fields: dict[str, Any]) -> dict[str, str]:
    missing: list[str] = []
    cleaned: dict[str, str] = {}
    for name in ("nom", "emoji"):
        value = fields.get(name)
        text = value.strip() if isinstance(value, str) else ""
        if not text:
            missing.append(name)
        cleaned[name] = text
    if missing:
        raise MenuValidationError("Nom et emoji requis", details={"missing": missing})
    return cleaned


class SideCatalog:
    """Operations over the flat sides list of a menu document."""

    def __init__(self, sides: list[Side]) -> None:
        self._sides = sides

    def sides(self) -> list[Side]:
        return list(self._sides)

    def next_id(self) -> SideId:
        return SideId(max((side.side_id for side in self._sides), default=0) + 1)

    def _index_of(self, side_id: int | str) -> int:
        normalized = normalize_side_id(side_id)
        for index, side in enumerate(self._sides):
            if side.side_id == normalized:
                return index
        raise SideNotFoundError(normalized)

    def find_by_id(self, side_id: int | str) -> Side | None:
        try:
            return self._sides[self._index_of(side_id)]
        except SideNotFoundError:
            return None

    def add(self, fields: dict[str, Any]) -> Side:
        cleaned = _validate_side_fields(fields)
        side = Side(side_id=self.next_id(), nom=cleaned["nom"], emoji=cleaned["emoji"], actif=True)
        self._sides.append(side)
        return side

    def edit(self, side_id: int | str, fields: dict[str, Any]) -> Side:
        cleaned = _validate_side_fields(fields)
        index = self._index_of(side_id)
        current = self._sides[index]
        actif = fields.get("actif")
        updated = Side(
            side_id=current.side_id,
            nom=cleaned["nom"],
            emoji=cleaned["emoji"],
            actif=current.actif if actif is None else bool(actif),
        )
        self._sides[index] = updated
        return updated

    def toggle(self, side_id: int | str) -> Side:
        index = self._index_of(side_id)
        toggled = self._sides[index].toggled()
        self._sides[index] = toggled
        return toggled

    def delete(self, side_id: int | str) -> bool:
        try:
            index = self._index_of(side_id)
        except SideNotFoundError:
            return False
        del self._sides[index]
        return True
