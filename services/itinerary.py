# services/itinerary.py

"""
Trip construction and read-only queries over a trip's activities.
Every query returns a fresh list; trip.activities keeps insertion order.
"""

from __future__ import annotations
import datetime as dt
from typing import Dict, List

from core.log import get_logger
from core.models import Activity, Category, Trip

logger = get_logger(__name__)


def create_trip(trip_id: str, destination: str, start_date: dt.date) -> Trip:
    return Trip(id=trip_id, destination=destination, start_date=start_date)


def add_activity(trip: Trip, activity: Activity) -> List[Activity]:
    """
    Append the activity and return the trip's collection.
    Budget confirmation is the caller's job (see budget.would_exceed_budget).
    """
    trip.activities.append(activity)
    logger.debug(
        "activity added",
        trip_id=trip.id,
        activity_id=activity.id,
        count=len(trip.activities),
    )
    return trip.activities


def calculate_total_cost(trip: Trip) -> float:
    return sum(a.cost for a in trip.activities)


def get_high_cost_activities(trip: Trip, minimum_cost: float) -> List[Activity]:
    return [a for a in trip.activities if a.cost >= minimum_cost]


def _same_day(moment: dt.datetime, day: dt.date) -> bool:
    # calendar fields as given, no tz conversion
    return (moment.year, moment.month, moment.day) == (day.year, day.month, day.day)


def get_activities_by_date(trip: Trip, day: dt.date) -> List[Activity]:
    """`day` may be a date or a datetime; only its calendar day is used."""
    return [a for a in trip.activities if _same_day(a.start_time, day)]


def filter_activities_by_category(trip: Trip, category: Category) -> List[Activity]:
    return [a for a in trip.activities if a.category == category]


def sort_activities_chronologically(trip: Trip) -> List[Activity]:
    # sorted() is stable, ties keep insertion order
    return sorted(trip.activities, key=lambda a: a.start_time)


def group_activities_by_date(trip: Trip) -> Dict[dt.date, List[Activity]]:
    days: Dict[dt.date, List[Activity]] = {}
    for a in sort_activities_chronologically(trip):
        days.setdefault(a.start_time.date(), []).append(a)
    return days
