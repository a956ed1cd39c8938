"""
Configuration management using Pydantic models loaded from YAML.
"""

import os
from pathlib import Path
from typing import List, Mapping

import pendulum
import yaml
from pendulum import DateTime
from pydantic import BaseModel, Field, field_validator, model_validator

from .domain.exceptions import InvalidDurationError
from .domain.models import Booking, Photographer, PhotographerSchedule, Roster, TimeInterval

DEFAULT_DURATION_MINUTES = 90

# Checked in order; the legacy name is what `npm --durationInMinutes=N` exported
DURATION_ENV_VARS = ("PHOTOSLOT_DURATION_MINUTES", "npm_config_durationInMinutes")


def _parse_timestamp(value: str) -> DateTime:
    parsed = pendulum.parse(value)
    if not isinstance(parsed, DateTime):
        raise ValueError(f"Expected a date and time, got '{value}'")
    return parsed


class DefaultsConfig(BaseModel):
    """Default settings for search."""
    duration_minutes: int = DEFAULT_DURATION_MINUTES

    @field_validator("duration_minutes")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        """Ensure the default booking duration is not negative."""
        if value < 0:
            raise ValueError("duration_minutes must not be negative")
        return value


class IntervalConfig(BaseModel):
    """An availability window as written in the config file."""
    starts: str
    ends: str

    @field_validator("starts", "ends")
    @classmethod
    def validate_timestamp(cls, value: str) -> str:
        """Validate the timestamp can be parsed."""
        try:
            _parse_timestamp(value)
        except ValueError as exc:
            raise ValueError(f"Invalid timestamp '{value}': {exc}") from exc
        return value

    @model_validator(mode="after")
    def validate_order(self) -> "IntervalConfig":
        """Ensure the interval does not end before it starts."""
        if self.start_datetime() > self.end_datetime():
            raise ValueError(f"ends ({self.ends}) must not be before starts ({self.starts})")
        return self

    def start_datetime(self) -> DateTime:
        return _parse_timestamp(self.starts)

    def end_datetime(self) -> DateTime:
        return _parse_timestamp(self.ends)

    def to_interval(self) -> TimeInterval:
        return TimeInterval(start=self.start_datetime(), end=self.end_datetime())


class BookingConfig(IntervalConfig):
    """An existing booking as written in the config file."""
    id: str

    def to_booking(self) -> Booking:
        return Booking(id=self.id, start=self.start_datetime(), end=self.end_datetime())


class PhotographerConfig(BaseModel):
    """Photographer configuration with their calendar."""
    id: str
    name: str
    availabilities: List[IntervalConfig] = Field(default_factory=list)
    bookings: List[BookingConfig] = Field(default_factory=list)

    @field_validator("bookings")
    @classmethod
    def validate_booking_ids(cls, value: List[BookingConfig]) -> List[BookingConfig]:
        """Ensure booking ids are unique for this photographer."""
        seen: set[str] = set()
        for booking in value:
            if booking.id in seen:
                raise ValueError(f"Duplicate booking id detected: {booking.id}")
            seen.add(booking.id)
        return value

    def to_schedule(self) -> PhotographerSchedule:
        return PhotographerSchedule(
            photographer=Photographer(id=self.id, name=self.name),
            availabilities=tuple(a.to_interval() for a in self.availabilities),
            bookings=tuple(b.to_booking() for b in self.bookings),
        )


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: DefaultsConfig = Field(default_factory=DefaultsConfig)
    timezone: str = "UTC"
    photographers: List[PhotographerConfig] = Field(default_factory=list)

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, value: str) -> str:
        """Ensure the display timezone is a known IANA name."""
        try:
            pendulum.timezone(value)
        except Exception as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("photographers")
    @classmethod
    def validate_photographers(cls, value: List[PhotographerConfig]) -> List[PhotographerConfig]:
        """Ensure photographer ids are unique."""
        seen_ids: set[str] = set()
        for photographer in value:
            if photographer.id in seen_ids:
                raise ValueError(f"Duplicate photographer id detected: {photographer.id}")
            seen_ids.add(photographer.id)
        return value

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(
                f"Config file not found: {config_path}\n"
                f"Please create a config.yaml file. See config.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)

    def to_roster(self) -> Roster:
        """Build an immutable roster snapshot from the configured photographers."""
        return Roster(schedules=tuple(p.to_schedule() for p in self.photographers))


def parse_duration(raw: str | int) -> int:
    """
    Parse a requested duration coming from the command line or environment.

    Args:
        raw: Minutes as an int or a string of digits (surrounding whitespace allowed)

    Returns:
        Duration in minutes

    Raises:
        InvalidDurationError: If the value is not a non-negative whole number
    """
    if isinstance(raw, bool):
        raise InvalidDurationError(f"Duration is expected to be a number, got {raw!r}")

    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except ValueError as exc:
            raise InvalidDurationError(
                f"Duration is expected to be a number, got '{raw}'"
            ) from exc

    if value < 0:
        raise InvalidDurationError(f"Duration must not be negative, got {value}")

    return value


def duration_from_environment(environ: Mapping[str, str] | None = None) -> int | None:
    """
    Read the requested duration from the environment.

    Returns None when none of the supported variables is set.
    """
    environ = os.environ if environ is None else environ

    for name in DURATION_ENV_VARS:
        raw = environ.get(name)
        if raw is not None and raw != "":
            return parse_duration(raw)

    return None


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for config.yaml in current directory
    current_dir = Path.cwd()
    config_path = current_dir / "config.yaml"

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / "config.yaml"

    return config_path
