"""
Application services for finding bookable photographer slots.

The service coordinates loading a roster snapshot via a roster source adapter
and delegates the actual availability calculation to the domain-level
``AvailabilityResolver``. This keeps the CLI thin and lets tests swap in a
stub roster source through a simple protocol.
"""

from __future__ import annotations

from typing import List, Protocol

from ..domain.availability_resolver import AvailabilityResolver
from ..domain.models import AvailableSlot, PhotographerFreeIntervals, Roster
from ..domain.slot_matcher import validate_duration


class RosterSourceProtocol(Protocol):
    """Protocol describing the roster source behaviour needed by the service."""

    def load_roster(self) -> Roster:
        """Return an immutable roster snapshot."""


class PhotoslotFinderService:
    """
    Orchestrates roster retrieval and slot resolution.

    Each call loads its own roster snapshot; no state is kept between calls.
    """

    def __init__(
        self,
        roster_source: RosterSourceProtocol,
        resolver: AvailabilityResolver | None = None,
    ) -> None:
        self._roster_source = roster_source
        self._resolver = resolver or AvailabilityResolver()

    def find_slots(self, *, duration_in_minutes: int) -> List[AvailableSlot]:
        """
        Load the roster and resolve available slots for the requested duration.

        The duration is validated before the roster is touched.
        """
        validate_duration(duration_in_minutes)
        roster = self._roster_source.load_roster()
        return self._resolver.find_available_slots(roster, duration_in_minutes)

    def free_intervals(self) -> List[PhotographerFreeIntervals]:
        """Derive the free intervals of every photographer in the roster."""
        roster = self._roster_source.load_roster()
        return self._resolver.derive_free_intervals(roster)

    def roster(self) -> Roster:
        return self._roster_source.load_roster()
