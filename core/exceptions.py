# core/exceptions.py

"""Errors raised by the trip planner."""


class TripPlannerError(Exception):
    """Base error, caught and displayed by the shell."""


class NoBudgetSet(TripPlannerError):
    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        super().__init__("No budget set for this trip")


class TripNotFound(TripPlannerError):
    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        super().__init__(f"No trip with id {trip_id}")


class DuplicateTrip(TripPlannerError):
    def __init__(self, trip_id: str):
        self.trip_id = trip_id
        super().__init__(f"A trip with id {trip_id} already exists")


class NoActiveTrip(TripPlannerError):
    def __init__(self):
        super().__init__("No trip selected. Create one first.")


class DestinationLookupError(TripPlannerError):
    def __init__(self, country: str):
        self.country = country
        super().__init__("Could not fetch country data")
