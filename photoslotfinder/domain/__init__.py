"""
Domain layer - Pure business logic without external dependencies.
"""

from .availability_resolver import AvailabilityResolver
from .exceptions import InvalidDurationError, PhotoslotError, RosterError
from .free_interval_deriver import FreeIntervalDeriver
from .models import (
    AvailableSlot,
    Booking,
    CandidateSlot,
    FreeInterval,
    Photographer,
    PhotographerFreeIntervals,
    PhotographerSchedule,
    Roster,
    TimeInterval,
)
from .slot_matcher import SlotMatcher

__all__ = [
    "AvailabilityResolver",
    "AvailableSlot",
    "Booking",
    "CandidateSlot",
    "FreeInterval",
    "FreeIntervalDeriver",
    "InvalidDurationError",
    "Photographer",
    "PhotographerFreeIntervals",
    "PhotographerSchedule",
    "PhotoslotError",
    "Roster",
    "RosterError",
    "SlotMatcher",
    "TimeInterval",
]
