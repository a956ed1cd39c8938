"""
Matching a requested duration against derived free intervals.
"""

import logging
from typing import Iterable

from .exceptions import InvalidDurationError
from .models import CandidateSlot, FreeInterval, PhotographerFreeIntervals, TimeInterval

logger = logging.getLogger(__name__)


def validate_duration(duration_in_minutes: int) -> int:
    """
    Ensure a requested duration is a non-negative whole number of minutes.

    Raises:
        InvalidDurationError: If the value is not an int (bools included) or is negative
    """
    if isinstance(duration_in_minutes, bool) or not isinstance(duration_in_minutes, int):
        raise InvalidDurationError(
            f"Duration is expected to be a number of minutes, got {duration_in_minutes!r}"
        )
    if duration_in_minutes < 0:
        raise InvalidDurationError(
            f"Duration must not be negative, got {duration_in_minutes}"
        )
    return duration_in_minutes


class SlotMatcher:
    """
    Picks the first free interval large enough for a new booking.

    "First" is iteration order as produced by the deriver, not the
    earliest start. The candidate is anchored at the interval's start and
    runs for exactly the requested duration.
    """

    def match(
        self,
        duration_in_minutes: int,
        free_intervals: PhotographerFreeIntervals
    ) -> CandidateSlot | None:
        """
        Find a candidate slot for one photographer.

        Args:
            duration_in_minutes: Requested booking length
            free_intervals: The photographer's derived free intervals

        Returns:
            CandidateSlot, or None if no free interval is long enough
        """
        validate_duration(duration_in_minutes)

        free = self._first_sufficient(duration_in_minutes, free_intervals.free_intervals)
        if free is None:
            logger.debug(
                "No free interval of %d minutes for photographer %s",
                duration_in_minutes,
                free_intervals.photographer_id,
            )
            return None

        # End is derived from the duration alone; sufficiency was checked above
        interval = TimeInterval(
            start=free.start,
            end=free.start.add(minutes=duration_in_minutes),
        )

        return CandidateSlot(
            photographer_id=free_intervals.photographer_id,
            interval=interval,
        )

    @staticmethod
    def _first_sufficient(
        duration_in_minutes: int,
        free_intervals: Iterable[FreeInterval]
    ) -> FreeInterval | None:
        for free in free_intervals:
            if free.duration_minutes >= duration_in_minutes:
                return free
        return None
