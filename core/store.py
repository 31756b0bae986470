# core/store.py

from typing import Dict, List, Optional

from core.exceptions import DuplicateTrip, NoActiveTrip, TripNotFound
from core.models import Trip


class TripStore:
    """
    In-memory trips of the current session plus the active trip.
    Lives as long as the process; nothing is written to disk.
    """

    def __init__(self):
        self._trips: Dict[str, Trip] = {}
        self._active_id: Optional[str] = None

    def __len__(self) -> int:
        return len(self._trips)

    @property
    def trips(self) -> List[Trip]:
        return list(self._trips.values())

    @property
    def active(self) -> Optional[Trip]:
        if self._active_id is None:
            return None
        return self._trips[self._active_id]

    def add(self, trip: Trip) -> Trip:
        if trip.id in self._trips:
            raise DuplicateTrip(trip.id)
        self._trips[trip.id] = trip
        if self._active_id is None:
            self._active_id = trip.id
        return trip

    def get(self, trip_id: str) -> Trip:
        try:
            return self._trips[trip_id]
        except KeyError:
            raise TripNotFound(trip_id) from None

    def select(self, trip_id: str) -> Trip:
        trip = self.get(trip_id)
        self._active_id = trip.id
        return trip

    def require_active(self) -> Trip:
        trip = self.active
        if trip is None:
            raise NoActiveTrip()
        return trip
