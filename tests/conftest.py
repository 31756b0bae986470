# tests/conftest.py

import datetime as dt

import pytest

from core.models import Activity, Category, Trip
from services import itinerary as isvc


def make_activity(
    name: str,
    cost: float,
    category: Category = Category.SIGHTSEEING,
    start: str = "2024-01-01 10:00",
    activity_id: str | None = None,
) -> Activity:
    return Activity(
        id=activity_id or name,
        name=name,
        cost=cost,
        category=category,
        start_time=dt.datetime.strptime(start, "%Y-%m-%d %H:%M"),
    )


@pytest.fixture
def trip() -> Trip:
    return isvc.create_trip("trip-1", "Japan", dt.date(2024, 1, 1))


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Settings come from defaults unless a test sets them."""
    for name in ("RESTCOUNTRIES_BASE_URL", "HTTP_TIMEOUT", "HIGH_COST_THRESHOLD", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
