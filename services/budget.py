# services/budget.py

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Optional

from core.exceptions import NoBudgetSet
from core.log import get_logger
from core.models import Activity, Category, Trip
from services.itinerary import calculate_total_cost

logger = get_logger(__name__)


@dataclass
class BudgetSummary:
    budget: Optional[float]
    total: float
    remaining: Optional[float]
    by_category: Dict[Category, float]


def set_budget(trip: Trip, amount: float) -> float:
    """Overwrite the trip budget. The amount is not validated here."""
    trip.budget = amount
    logger.debug("budget set", trip_id=trip.id, budget=amount)
    return trip.budget


def get_remaining_budget(trip: Trip) -> float:
    """
    Budget minus total activity cost. Negative when over budget.
    Raises NoBudgetSet when the trip has no budget.
    """
    if trip.budget is None:
        raise NoBudgetSet(trip.id)
    return trip.budget - calculate_total_cost(trip)


def would_exceed_budget(trip: Trip, activity: Activity) -> bool:
    """
    True if adding `activity` would push the total strictly above the budget.
    Advisory only: nothing is inserted or blocked here. A trip without a
    budget never exceeds.
    """
    if trip.budget is None:
        return False
    return calculate_total_cost(trip) + activity.cost > trip.budget


def get_spending_by_category(trip: Trip) -> Dict[Category, float]:
    breakdown: Dict[Category, float] = {c: 0 for c in Category}
    for a in trip.activities:
        breakdown[a.category] += a.cost
    return breakdown


def summarize_budget(trip: Trip) -> BudgetSummary:
    total = calculate_total_cost(trip)
    remaining = None if trip.budget is None else trip.budget - total
    return BudgetSummary(
        budget=trip.budget,
        total=total,
        remaining=remaining,
        by_category=get_spending_by_category(trip),
    )
