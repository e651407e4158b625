from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from foodstory.domain.common.ids import SideId
from foodstory.domain.menu.entities import MenuValidationError
from foodstory.domain.side.catalog import SideCatalog, normalize_side_id
from foodstory.domain.side.entities import Side, SideNotFoundError


def _catalog() -> SideCatalog:
    return SideCatalog(
        [
            Side(side_id=SideId(1), nom="Riz blanc", emoji="🍚"),
            Side(side_id=SideId(4), nom="Lentilles", emoji="🫘", actif=False),
        ]
    )


def test_add_uses_max_id_plus_one_and_starts_active() -> None:
    catalog = _catalog()

    side = catalog.add({"nom": " Banane plantain ", "emoji": "🍌"})

    assert side.side_id == 5
    assert side.nom == "Banane plantain"
    assert side.actif is True
    assert len(catalog.sides()) == 3


def test_add_rejects_blank_name() -> None:
    catalog = _catalog()

    with pytest.raises(MenuValidationError) as exc_info:
        catalog.add({"nom": "", "emoji": "🍌"})

    assert str(exc_info.value) == "Nom et emoji requis"
    assert exc_info.value.details["missing"] == ["nom"]
    assert len(catalog.sides()) == 2


def test_edit_keeps_actif_unless_supplied() -> None:
    catalog = _catalog()

    kept = catalog.edit(4, {"nom": "Lentilles créoles", "emoji": "🫘"})
    assert kept.actif is False

    switched = catalog.edit("4", {"nom": "Lentilles créoles", "emoji": "🫘", "actif": True})
    assert switched.actif is True
    assert catalog.find_by_id(4) == switched


def test_edit_unknown_side_raises() -> None:
    with pytest.raises(SideNotFoundError):
        _catalog().edit(99, {"nom": "Gratin", "emoji": "🧀"})


def test_toggle_twice_restores_state() -> None:
    catalog = _catalog()

    assert catalog.toggle(1).actif is False
    assert catalog.toggle(1).actif is True


def test_find_by_id_accepts_numeric_strings() -> None:
    catalog = _catalog()

    found = catalog.find_by_id("1")
    assert found is not None
    assert found.nom == "Riz blanc"
    assert catalog.find_by_id(2) is None


def test_delete_reports_whether_side_existed() -> None:
    catalog = _catalog()

    assert catalog.delete(1) is True
    assert catalog.delete(1) is False
    assert [side.side_id for side in catalog.sides()] == [4]


def test_sides_returns_a_copy() -> None:
    catalog = _catalog()

    catalog.sides().clear()

    assert len(catalog.sides()) == 2


@pytest.mark.parametrize("raw", ["abc", "", None, True, 1.5j])
def test_normalize_side_id_rejects_non_numeric(raw: object) -> None:
    with pytest.raises(MenuValidationError):
        normalize_side_id(raw)  # type: ignore[arg-type]


def test_normalize_side_id_parses_strings() -> None:
    assert normalize_side_id("12") == 12
