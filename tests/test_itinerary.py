# tests/test_itinerary.py

import datetime as dt

from conftest import make_activity
from core.models import Category
from services import itinerary as isvc


def test_create_trip_starts_empty_without_budget():
    trip = isvc.create_trip("t-42", "Portugal", dt.date(2025, 6, 2))
    assert trip.id == "t-42"
    assert trip.destination == "Portugal"
    assert trip.start_date == dt.date(2025, 6, 2)
    assert trip.activities == []
    assert trip.budget is None


def test_add_activity_appends_and_returns_collection(trip):
    first = make_activity("Sushi", 30, Category.FOOD)
    second = make_activity("Sushi", 30, Category.FOOD)

    assert isvc.add_activity(trip, first) == [first]
    result = isvc.add_activity(trip, second)

    # no dedup, same list object as the trip's
    assert result is trip.activities
    assert len(result) == 2


def test_total_cost_is_zero_for_empty_trip(trip):
    assert isvc.calculate_total_cost(trip) == 0


def test_total_cost_sums_every_activity(trip):
    for name, cost in [("Train", 12.5), ("Temple", 7.25), ("Ramen", 15)]:
        isvc.add_activity(trip, make_activity(name, cost))
    assert isvc.calculate_total_cost(trip) == 34.75


def test_high_cost_threshold_is_inclusive(trip):
    exact = make_activity("Tower", 50)
    below = make_activity("Museum", 49.99)
    above = make_activity("Show", 120)
    for a in (above, below, exact):
        isvc.add_activity(trip, a)

    assert isvc.get_high_cost_activities(trip, 50) == [above, exact]


def test_activities_by_date_ignores_time_of_day(trip):
    day_one = make_activity("Breakfast", 10, Category.FOOD, "2024-01-01 10:00")
    day_two = make_activity("Bus", 5, Category.TRANSPORT, "2024-01-02 09:00")
    late = make_activity("Dinner", 40, Category.FOOD, "2024-01-01 23:59")
    for a in (day_one, day_two, late):
        isvc.add_activity(trip, a)

    assert isvc.get_activities_by_date(trip, dt.date(2024, 1, 1)) == [day_one, late]
    assert isvc.get_activities_by_date(trip, dt.datetime(2024, 1, 2, 18, 30)) == [day_two]
    assert isvc.get_activities_by_date(trip, dt.date(2024, 1, 3)) == []


def test_activities_by_date_keeps_insertion_order(trip):
    evening = make_activity("Karaoke", 20, start="2024-01-01 21:00")
    morning = make_activity("Market", 0, start="2024-01-01 08:00")
    isvc.add_activity(trip, evening)
    isvc.add_activity(trip, morning)

    assert isvc.get_activities_by_date(trip, dt.date(2024, 1, 1)) == [evening, morning]


def test_filter_by_category(trip):
    food = make_activity("Ramen", 15, Category.FOOD)
    bus = make_activity("Bus", 3, Category.TRANSPORT)
    more_food = make_activity("Tea", 8, Category.FOOD)
    for a in (food, bus, more_food):
        isvc.add_activity(trip, a)

    assert isvc.filter_activities_by_category(trip, Category.FOOD) == [food, more_food]
    assert isvc.filter_activities_by_category(trip, Category.SIGHTSEEING) == []


def test_sort_is_chronological_and_stable(trip):
    late = make_activity("Late", 1, start="2024-01-03 12:00")
    tie_a = make_activity("Tie A", 1, start="2024-01-02 09:00")
    early = make_activity("Early", 1, start="2024-01-01 07:00")
    tie_b = make_activity("Tie B", 1, start="2024-01-02 09:00")
    for a in (late, tie_a, early, tie_b):
        isvc.add_activity(trip, a)

    ordered = isvc.sort_activities_chronologically(trip)

    assert ordered == [early, tie_a, tie_b, late]
    assert trip.activities == [late, tie_a, early, tie_b]


def test_queries_return_new_lists(trip):
    isvc.add_activity(trip, make_activity("Temple", 60))
    for result in (
        isvc.sort_activities_chronologically(trip),
        isvc.get_high_cost_activities(trip, 0),
        isvc.filter_activities_by_category(trip, Category.SIGHTSEEING),
        isvc.get_activities_by_date(trip, dt.date(2024, 1, 1)),
    ):
        assert result is not trip.activities
        result.clear()
    assert len(trip.activities) == 1


def test_group_by_date_is_chronological(trip):
    d2 = make_activity("Hike", 0, start="2024-01-02 08:00")
    d1_late = make_activity("Bar", 25, Category.FOOD, "2024-01-01 22:00")
    d1_early = make_activity("Train", 14, Category.TRANSPORT, "2024-01-01 06:30")
    for a in (d2, d1_late, d1_early):
        isvc.add_activity(trip, a)

    grouped = isvc.group_activities_by_date(trip)

    assert list(grouped) == [dt.date(2024, 1, 1), dt.date(2024, 1, 2)]
    assert grouped[dt.date(2024, 1, 1)] == [d1_early, d1_late]
    assert grouped[dt.date(2024, 1, 2)] == [d2]
