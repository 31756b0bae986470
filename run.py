# run.py

import argparse
import datetime
import uuid
from typing import Callable, Iterable

from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Confirm, Prompt
from rich.table import Table

from core.config import Settings, load_settings
from core.exceptions import TripPlannerError
from core.log import configure_logging, get_logger
from core.models import Activity, Category, Trip
from core.store import TripStore
from services import budget as bsvc, destination as dsvc, itinerary as isvc

logger = get_logger(__name__)
console = Console()

_DATE_FMT = "%Y-%m-%d"
_DATETIME_FMT = "%Y-%m-%d %H:%M"


# ──────────────────────────────────────────────────────────────────────────────
# Input parsing (all validation of user-supplied values happens here)
# ──────────────────────────────────────────────────────────────────────────────
def parse_amount(raw: str) -> float:
    """Non-negative finite number, e.g. a cost or a budget."""
    try:
        value = float(raw.strip())
    except ValueError:
        raise ValueError(f"'{raw}' is not a number.") from None
    if value != value or value in (float("inf"), float("-inf")):
        raise ValueError("Amount must be a finite number.")
    if value < 0:
        raise ValueError("Amount cannot be negative.")
    return value


def parse_date(raw: str) -> datetime.date:
    try:
        return datetime.datetime.strptime(raw.strip(), _DATE_FMT).date()
    except ValueError:
        raise ValueError(f"'{raw}' is not a date (YYYY-MM-DD).") from None


def parse_datetime(raw: str) -> datetime.datetime:
    try:
        return datetime.datetime.strptime(raw.strip(), _DATETIME_FMT)
    except ValueError:
        raise ValueError(f"'{raw}' is not a date and time (YYYY-MM-DD HH:MM).") from None


def _ask(label: str, parse: Callable, default: str | None = None):
    while True:
        raw = Prompt.ask(label, default=default, console=console)
        try:
            return parse(raw or "")
        except ValueError as e:
            console.print(f"[red]{e}[/]")


def _ask_text(label: str) -> str:
    while True:
        value = Prompt.ask(label, console=console).strip()
        if value:
            return value
        console.print("[red]This field cannot be empty.[/]")


def _ask_category() -> Category:
    value = Prompt.ask(
        "Category",
        choices=[c.value for c in Category],
        console=console,
    )
    return Category(value)


# ──────────────────────────────────────────────────────────────────────────────
# Rendering
# ──────────────────────────────────────────────────────────────────────────────
def _activities_table(title: str, activities: Iterable[Activity]) -> Table:
    table = Table(title=title)
    table.add_column("When")
    table.add_column("Activity")
    table.add_column("Category")
    table.add_column("Cost", justify="right")
    for a in activities:
        table.add_row(
            a.start_time.strftime(_DATETIME_FMT),
            a.name,
            a.category.value,
            f"{a.cost:.2f}",
        )
    return table


def _print_activities(title: str, activities: list[Activity]) -> None:
    if not activities:
        console.print(f"[dim]{title}: nothing to show.[/]")
        return
    console.print(_activities_table(title, activities))


# ──────────────────────────────────────────────────────────────────────────────
# Actions
# ──────────────────────────────────────────────────────────────────────────────
def confirm_and_add(trip: Trip, activity: Activity, confirm: Callable[[str], bool]) -> bool:
    """
    Add `activity` to `trip`, asking `confirm` first when it would push the
    total over budget. Returns whether the activity was added.
    """
    if bsvc.would_exceed_budget(trip, activity):
        total = isvc.calculate_total_cost(trip) + activity.cost
        question = f"This activity brings the total to {total:.2f}, over the budget of {trip.budget:.2f}. Add it anyway?"
        if not confirm(question):
            return False
    isvc.add_activity(trip, activity)
    return True


def create_trip(store: TripStore, settings: Settings, lookup: bool) -> None:
    destination = _ask_text("Destination (country)")
    start = _ask("Start date (YYYY-MM-DD)", parse_date)
    trip = store.add(isvc.create_trip(str(uuid.uuid4()), destination, start))
    store.select(trip.id)
    console.print(f"[green]Trip to {trip.destination} created.[/]")

    if not lookup:
        return
    try:
        info = dsvc.fetch_destination_info(destination, settings=settings)
    except TripPlannerError as e:
        console.print(f"[yellow]{e}[/]")
        return
    console.print(f"{info.flag}  Local currency: [bold]{info.currency}[/]")


def switch_trip(store: TripStore) -> None:
    trips = store.trips
    if not trips:
        console.print("[dim]No trips yet.[/]")
        return
    for i, t in enumerate(trips, start=1):
        console.print(f"{i}. {t.destination} ({t.start_date.isoformat()})")
    choice = Prompt.ask("Trip", choices=[str(i) for i in range(1, len(trips) + 1)], console=console)
    trip = store.select(trips[int(choice) - 1].id)
    console.print(f"Active trip: [bold]{trip.destination}[/]")


def add_activity(store: TripStore) -> None:
    trip = store.require_active()
    activity = Activity(
        id=str(uuid.uuid4()),
        name=_ask_text("Activity name"),
        cost=_ask("Cost", parse_amount),
        category=_ask_category(),
        start_time=_ask("Date and time (YYYY-MM-DD HH:MM)", parse_datetime),
    )
    added = confirm_and_add(
        trip,
        activity,
        lambda q: Confirm.ask(f"[yellow]{q}[/]", default=False, console=console),
    )
    if added:
        console.print(f"[green]Activity added. {len(trip.activities)} activities planned.[/]")
    else:
        console.print("Activity not added.")


def view_itinerary(store: TripStore) -> None:
    trip = store.require_active()
    days = isvc.group_activities_by_date(trip)
    console.print(f"[bold cyan]{trip.destination}[/] from {trip.start_date.isoformat()}")
    if not days:
        console.print("[dim]No activities planned yet.[/]")
        return
    for day, activities in days.items():
        console.print(_activities_table(day.isoformat(), activities))
    console.print(f"Total cost: [bold]{isvc.calculate_total_cost(trip):.2f}[/]")


def filter_by_category(store: TripStore) -> None:
    trip = store.require_active()
    category = _ask_category()
    _print_activities(category.value.capitalize(), isvc.filter_activities_by_category(trip, category))


def activities_on_date(store: TripStore) -> None:
    trip = store.require_active()
    day = _ask("Date (YYYY-MM-DD)", parse_date)
    _print_activities(day.isoformat(), isvc.get_activities_by_date(trip, day))


def high_cost_activities(store: TripStore, settings: Settings) -> None:
    trip = store.require_active()
    minimum = _ask("Minimum cost", parse_amount, default=f"{settings.high_cost_threshold:g}")
    _print_activities(f"Activities costing {minimum:g} or more", isvc.get_high_cost_activities(trip, minimum))


def set_budget(store: TripStore) -> None:
    trip = store.require_active()
    amount = bsvc.set_budget(trip, _ask("Budget", parse_amount))
    console.print(f"[green]Budget set to {amount:.2f}.[/]")


def view_budget(store: TripStore) -> None:
    trip = store.require_active()
    summary = bsvc.summarize_budget(trip)

    table = Table(title=f"Spending for {trip.destination}")
    table.add_column("Category")
    table.add_column("Spent", justify="right")
    for category, spent in summary.by_category.items():
        table.add_row(category.value, f"{spent:.2f}")
    console.print(table)

    console.print(f"Total: [bold]{summary.total:.2f}[/]")
    if summary.remaining is None:
        console.print("[dim]No budget set for this trip.[/]")
        return
    colour = "green" if summary.remaining >= 0 else "red"
    console.print(f"Budget: {summary.budget:.2f} | Remaining: [{colour}]{summary.remaining:.2f}[/]")


# ──────────────────────────────────────────────────────────────────────────────
# Menu loop
# ──────────────────────────────────────────────────────────────────────────────
_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

_MENU = [
    "Create a trip",
    "Switch active trip",
    "Add an activity",
    "View itinerary",
    "Filter activities by category",
    "Activities on a date",
    "High-cost activities",
    "Set budget",
    "View budget",
    "Exit",
]


def main(argv=None):
    p = argparse.ArgumentParser(description="Plan trips, activities and budgets.")
    p.add_argument("--log-level", type=str.upper, choices=_LOG_LEVELS, default=None)
    p.add_argument("--no-lookup", action="store_true", help="skip the country data lookup")
    args = p.parse_args(argv)

    load_dotenv()
    settings = load_settings()
    configure_logging(args.log_level or settings.log_level)

    store = TripStore()
    actions = {
        "1": lambda: create_trip(store, settings, lookup=not args.no_lookup),
        "2": lambda: switch_trip(store),
        "3": lambda: add_activity(store),
        "4": lambda: view_itinerary(store),
        "5": lambda: filter_by_category(store),
        "6": lambda: activities_on_date(store),
        "7": lambda: high_cost_activities(store, settings),
        "8": lambda: set_budget(store),
        "9": lambda: view_budget(store),
    }

    while True:
        active = store.active
        header = f"Active trip: {active.destination}" if active else "No active trip"
        console.print(f"\n[bold]{header}[/]")
        for i, label in enumerate(_MENU, start=1):
            console.print(f"  {i}. {label}")
        choice = Prompt.ask("Choose", choices=[str(i) for i in range(1, len(_MENU) + 1)], console=console)
        if choice == str(len(_MENU)):
            console.print("Bon voyage!")
            return
        try:
            actions[choice]()
        except TripPlannerError as e:
            logger.info("action failed", choice=choice, error=str(e))
            console.print(f"[red]{e}[/]")


if __name__ == "__main__":
    main()
