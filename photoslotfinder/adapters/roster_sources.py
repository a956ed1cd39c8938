"""
Roster sources: adapters that supply a roster snapshot to the service layer.
"""

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from ..config import AppConfig
from ..domain.exceptions import RosterError
from ..domain.models import Roster

logger = logging.getLogger(__name__)

SAMPLE_ROSTER_FILE = Path(__file__).parent / "sample_roster.json"


class SampleRosterSource:
    """
    Roster source backed by the bundled sample calendar.

    Loads two photographers with a handful of availabilities and bookings
    from sample_roster.json, so the tool can be tried without writing a
    config file first.
    """

    def __init__(self, data_file: Path = SAMPLE_ROSTER_FILE):
        """
        Initialize the sample source.

        Args:
            data_file: JSON file with a top-level "photographers" list
        """
        self.data_file = data_file

    def load_roster(self) -> Roster:
        """
        Load the roster from the JSON file.

        Raises:
            RosterError: If the file is missing, not JSON, or fails validation
        """
        if not self.data_file.exists():
            raise RosterError(f"Sample roster not found: {self.data_file}")

        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as exc:
            raise RosterError(f"Invalid JSON in {self.data_file}: {exc}") from exc

        if not isinstance(data, dict):
            raise RosterError("Sample roster must contain an object at the root level.")

        try:
            config = AppConfig(photographers=data.get("photographers", []))
        except ValidationError as exc:
            raise RosterError(f"Invalid sample roster in {self.data_file}: {exc}") from exc

        roster = config.to_roster()
        logger.debug("Loaded %d photographer(s) from %s", len(roster), self.data_file)
        return roster


class ConfigRosterSource:
    """Roster source backed by an already-loaded AppConfig."""

    def __init__(self, config: AppConfig):
        self.config = config

    def load_roster(self) -> Roster:
        return self.config.to_roster()
