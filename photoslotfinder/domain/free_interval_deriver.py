"""
Derivation of free intervals from availability windows and bookings.

Pure domain logic without any external dependencies (no I/O, no state).
"""

import logging
from typing import List

from .models import (
    Booking,
    FreeInterval,
    PhotographerFreeIntervals,
    PhotographerSchedule,
    TimeInterval,
    contains,
    duration_minutes,
)

logger = logging.getLogger(__name__)


class FreeIntervalDeriver:
    """
    Removes bookings from availability windows to find free capacity.

    Algorithm (pairwise, per availability window):
    1. For every booking, test whether its start or end lies in the window
    2. If neither does, the whole window is free
    3. Otherwise the part before the booking is free (even if empty), and
       the part after the booking is free if it spans at least a minute

    Known limitation: each booking is subtracted from the *original* window,
    not from what earlier bookings left over. With several bookings inside
    one window the result is each booking's individual complement, so the
    free intervals can overlap and double-count free time. Callers relying
    on a true multi-way set difference must not use this deriver.

    Bookings that straddle a window edge are clipped on purpose so that
    every emitted interval keeps start <= end: one that starts before the
    window leaves a zero-length interval at the window start, and one that
    ends after the window leaves no interval after it. Taking the raw
    booking endpoints instead would give inverted intervals, which could
    anchor a slot inside the booking or past the window end.
    """

    def derive(self, schedule: PhotographerSchedule) -> PhotographerFreeIntervals:
        """
        Derive the free intervals for one photographer.

        Args:
            schedule: The photographer's availabilities and bookings

        Returns:
            Free intervals in emission order, flattened across all windows
        """
        free_intervals: List[FreeInterval] = []

        for availability in schedule.availabilities:
            if not schedule.bookings:
                # Nothing booked: the window is free as a whole
                free_intervals.append(FreeInterval(interval=availability))
                continue

            for booking in schedule.bookings:
                free_intervals.extend(
                    self._subtract_booking_from_window(availability, booking)
                )

        logger.debug(
            "Derived %d free interval(s) for photographer %s",
            len(free_intervals),
            schedule.photographer.id,
        )

        return PhotographerFreeIntervals(
            photographer_id=schedule.photographer.id,
            free_intervals=tuple(free_intervals),
        )

    def _subtract_booking_from_window(
        self,
        availability: TimeInterval,
        booking: Booking
    ) -> List[FreeInterval]:
        """
        Subtract a single booking from a single availability window.

        Example:
        Window:  08:00 - 16:00
        Booking: 08:30 - 09:30
        Result:  [08:00-08:30, 09:30-16:00]
        """
        starts_within = contains(availability, booking.start)
        ends_within = contains(availability, booking.end)

        if not starts_within and not ends_within:
            return [FreeInterval(interval=availability)]

        # A booking that began before the window leaves no room in front of it
        before_end = max(booking.start, availability.start)
        free_ranges = [
            FreeInterval(interval=TimeInterval(start=availability.start, end=before_end))
        ]

        if booking.end < availability.end and duration_minutes(booking.end, availability.end):
            free_ranges.append(
                FreeInterval(interval=TimeInterval(start=booking.end, end=availability.end))
            )

        return free_ranges
