"""
Core business logic for resolving which photographers can take a booking.

This is the heart of the application - pure domain logic without any
external dependencies (no API calls, no database, no I/O).
"""

import logging
from typing import List

from .free_interval_deriver import FreeIntervalDeriver
from .models import AvailableSlot, CandidateSlot, PhotographerFreeIntervals, Roster
from .slot_matcher import SlotMatcher, validate_duration

logger = logging.getLogger(__name__)


class AvailabilityResolver:
    """
    Finds the first bookable slot for every photographer in a roster.

    Algorithm:
    1. For each photographer, derive free intervals from their schedule
    2. For each photographer, match the requested duration
    3. Drop photographers without a match
    4. Resolve the public identity of each match from the roster
    5. Return results in roster order
    """

    def __init__(
        self,
        deriver: FreeIntervalDeriver | None = None,
        matcher: SlotMatcher | None = None
    ):
        self.deriver = deriver or FreeIntervalDeriver()
        self.matcher = matcher or SlotMatcher()

    def find_available_slots(
        self,
        roster: Roster,
        duration_in_minutes: int
    ) -> List[AvailableSlot]:
        """
        Find available slots for a new booking across the roster.

        Args:
            roster: Snapshot of photographers with availabilities and bookings
            duration_in_minutes: Requested booking length

        Returns:
            List of AvailableSlot objects, one per photographer with capacity

        Raises:
            InvalidDurationError: If the duration is not a valid number of minutes
        """
        validate_duration(duration_in_minutes)

        # Step 1: Derive free intervals for every photographer
        free_by_photographer = self.derive_free_intervals(roster)

        # Step 2 + 3: Match the duration, dropping photographers without capacity
        candidates: List[CandidateSlot] = []
        for free_intervals in free_by_photographer:
            candidate = self.matcher.match(duration_in_minutes, free_intervals)
            if candidate is not None:
                candidates.append(candidate)

        # Step 4: Attach public identities
        available: List[AvailableSlot] = []
        for candidate in candidates:
            photographer = roster.find_photographer(candidate.photographer_id)
            if photographer is None:
                logger.warning(
                    "Dropping slot for unknown photographer id %s",
                    candidate.photographer_id,
                )
                continue
            available.append(AvailableSlot(photographer=photographer, slot=candidate.interval))

        logger.debug(
            "%d of %d photographer(s) available for %d minutes",
            len(available),
            len(roster),
            duration_in_minutes,
        )

        return available

    def derive_free_intervals(self, roster: Roster) -> List[PhotographerFreeIntervals]:
        """Derive free intervals for every photographer, in roster order."""
        return [self.deriver.derive(schedule) for schedule in roster]
