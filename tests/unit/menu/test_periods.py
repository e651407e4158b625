from __future__ import annotations

import sys
from datetime import date
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[3] / "src"))

from foodstory.domain.menu.periods import compute_periods, week_start


@pytest.mark.parametrize(
    ("today", "expected_sunday"),
    [
        (date(2026, 10, 18), date(2026, 10, 18)),
        (date(2026, 10, 19), date(2026, 10, 18)),
        (date(2026, 10, 22), date(2026, 10, 18)),
        (date(2026, 10, 24), date(2026, 10, 18)),
    ],
)
def test_week_starts_on_sunday(today: date, expected_sunday: date) -> None:
    assert week_start(today) == expected_sunday


def test_periods_cover_sunday_to_thursday() -> None:
    periods = compute_periods(date(2026, 10, 19))

    assert periods.current == "Du dimanche 18 au jeudi 22 octobre"
    assert periods.upcoming == "Du dimanche 25 au jeudi 29 octobre"
    assert periods.is_last_day is False


def test_upcoming_period_uses_month_of_its_thursday() -> None:
    periods = compute_periods(date(2026, 10, 29))

    assert periods.current == "Du dimanche 25 au jeudi 29 octobre"
    assert periods.upcoming == "Du dimanche 1 au jeudi 5 novembre"
    assert periods.is_last_day is True


def test_period_spanning_new_year() -> None:
    periods = compute_periods(date(2026, 12, 29))

    assert periods.current == "Du dimanche 27 au jeudi 31 décembre"
    assert periods.upcoming == "Du dimanche 3 au jeudi 7 janvier"
