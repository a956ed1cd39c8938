"""
Domain models for intervals, photographers and their schedules.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Tuple

from pendulum import DateTime


@dataclass(frozen=True)
class TimeInterval:
    """
    Represents an immutable time interval with start and end datetime.

    Invariant: start must not be after end. Zero-length intervals are allowed.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Start time {self.start} must not be after end time {self.end}")

    def duration_minutes(self) -> int:
        """Return the duration in whole minutes."""
        return duration_minutes(self.start, self.end)

    def contains(self, instant: DateTime) -> bool:
        """Check if an instant lies within this interval, both ends inclusive."""
        return contains(self, instant)

    def to_dict(self) -> Dict[str, str]:
        return {
            "starts": self.start.to_iso8601_string(),
            "ends": self.end.to_iso8601_string(),
        }


def contains(interval: TimeInterval, instant: DateTime) -> bool:
    """Return True if ``interval.start <= instant <= interval.end``."""
    return interval.start <= instant <= interval.end


def duration_minutes(a: DateTime, b: DateTime) -> int:
    """
    Absolute difference between two instants in whole minutes.

    Partial minutes are truncated, so 59 seconds count as zero minutes.
    The result does not depend on argument order.
    """
    return int(abs((b - a).total_seconds()) // 60)


@dataclass(frozen=True)
class Photographer:
    """Public identity of a bookable photographer."""
    id: str
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {"id": self.id, "name": self.name}


@dataclass(frozen=True)
class Booking:
    """An existing reservation in a photographer's calendar."""
    id: str
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(
                f"Booking {self.id}: start time {self.start} must not be after end time {self.end}"
            )


@dataclass(frozen=True)
class PhotographerSchedule:
    """
    A photographer together with their availability windows and bookings.

    Availabilities are independent windows (e.g. split shifts). They are not
    required to be sorted or disjoint.
    """
    photographer: Photographer
    availabilities: Tuple[TimeInterval, ...] = ()
    bookings: Tuple[Booking, ...] = ()

    def __post_init__(self):
        # Accept lists from callers but store tuples to keep the schedule immutable
        object.__setattr__(self, "availabilities", tuple(self.availabilities))
        object.__setattr__(self, "bookings", tuple(self.bookings))


@dataclass(frozen=True)
class Roster:
    """
    Ordered, immutable snapshot of photographer schedules.

    Order determines result order. Photographer ids must be unique.
    """
    schedules: Tuple[PhotographerSchedule, ...] = ()
    _by_id: Dict[str, Photographer] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, "schedules", tuple(self.schedules))

        by_id: Dict[str, Photographer] = {}
        for schedule in self.schedules:
            photographer = schedule.photographer
            if photographer.id in by_id:
                raise ValueError(f"Duplicate photographer id in roster: {photographer.id}")
            by_id[photographer.id] = photographer
        object.__setattr__(self, "_by_id", by_id)

    def __iter__(self) -> Iterator[PhotographerSchedule]:
        return iter(self.schedules)

    def __len__(self) -> int:
        return len(self.schedules)

    def find_photographer(self, photographer_id: str) -> Photographer | None:
        """Find a photographer by id."""
        return self._by_id.get(photographer_id)

    @property
    def photographers(self) -> List[Photographer]:
        return [schedule.photographer for schedule in self.schedules]


@dataclass(frozen=True)
class FreeInterval:
    """
    A free sub-interval of an availability window.

    Only produced by the free-interval deriver; never persisted.
    """
    interval: TimeInterval

    @property
    def start(self) -> DateTime:
        return self.interval.start

    @property
    def end(self) -> DateTime:
        return self.interval.end

    @property
    def duration_minutes(self) -> int:
        return self.interval.duration_minutes()


@dataclass(frozen=True)
class PhotographerFreeIntervals:
    """Free intervals derived for one photographer, in emission order."""
    photographer_id: str
    free_intervals: Tuple[FreeInterval, ...] = ()


@dataclass(frozen=True)
class CandidateSlot:
    """A concrete proposed booking of exactly the requested duration."""
    photographer_id: str
    interval: TimeInterval


@dataclass(frozen=True)
class AvailableSlot:
    """
    Represents a photographer who can take the new booking, and when.
    """
    photographer: Photographer
    slot: TimeInterval

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        return {
            "photographer": self.photographer.to_dict(),
            "slot": self.slot.to_dict(),
        }
