"""
Tests for configuration loading and duration parsing.
"""

import pendulum
import pytest
from pydantic import ValidationError

from photoslotfinder.config import (
    AppConfig,
    DEFAULT_DURATION_MINUTES,
    duration_from_environment,
    parse_duration,
)
from photoslotfinder.domain.exceptions import InvalidDurationError

CONFIG_YAML = """
timezone: Europe/Berlin
defaults:
  duration_minutes: 60
photographers:
  - id: "1"
    name: Otto Crawford
    availabilities:
      - starts: "2020-11-25T08:00:00.000Z"
        ends: "2020-11-25T16:00:00.000Z"
    bookings:
      - id: "1"
        starts: "2020-11-25T08:30:00.000Z"
        ends: "2020-11-25T09:30:00.000Z"
  - id: "2"
    name: Jens Mills
"""


class TestAppConfig:
    """Tests for AppConfig."""

    def test_load_from_yaml(self, tmp_path):
        """Test loading a complete config file."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(CONFIG_YAML, encoding="utf-8")

        config = AppConfig.load_from_yaml(config_path)

        assert config.timezone == "Europe/Berlin"
        assert config.defaults.duration_minutes == 60
        assert [p.name for p in config.photographers] == ["Otto Crawford", "Jens Mills"]
        assert config.photographers[1].availabilities == []

    def test_to_roster(self, tmp_path):
        """Test conversion into the domain roster."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text(CONFIG_YAML, encoding="utf-8")

        roster = AppConfig.load_from_yaml(config_path).to_roster()

        assert len(roster) == 2
        otto = roster.schedules[0]
        assert otto.photographer.id == "1"
        assert otto.availabilities[0].start == pendulum.parse("2020-11-25T08:00:00Z")
        assert otto.bookings[0].id == "1"
        assert otto.bookings[0].end == pendulum.parse("2020-11-25T09:30:00Z")

    def test_defaults(self):
        config = AppConfig()

        assert config.timezone == "UTC"
        assert config.defaults.duration_minutes == DEFAULT_DURATION_MINUTES
        assert len(config.to_roster()) == 0

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml_raises(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("photographers: [unclosed", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid YAML"):
            AppConfig.load_from_yaml(config_path)

    def test_non_mapping_root_raises(self, tmp_path):
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- just\n- a list\n", encoding="utf-8")

        with pytest.raises(ValueError, match="mapping at the root level"):
            AppConfig.load_from_yaml(config_path)

    def test_duplicate_photographer_ids_rejected(self):
        with pytest.raises(ValidationError, match="Duplicate photographer id"):
            AppConfig(photographers=[
                {"id": "1", "name": "A"},
                {"id": "1", "name": "B"},
            ])

    def test_duplicate_booking_ids_rejected(self):
        booking = {"id": "1", "starts": "2020-11-25T08:00:00Z", "ends": "2020-11-25T09:00:00Z"}

        with pytest.raises(ValidationError, match="Duplicate booking id"):
            AppConfig(photographers=[{"id": "1", "name": "A", "bookings": [booking, booking]}])

    def test_inverted_interval_rejected(self):
        window = {"starts": "2020-11-25T16:00:00Z", "ends": "2020-11-25T08:00:00Z"}

        with pytest.raises(ValidationError, match="must not be before starts"):
            AppConfig(photographers=[{"id": "1", "name": "A", "availabilities": [window]}])

    def test_invalid_timestamp_rejected(self):
        window = {"starts": "tomorrow-ish", "ends": "2020-11-25T08:00:00Z"}

        with pytest.raises(ValidationError, match="Invalid timestamp"):
            AppConfig(photographers=[{"id": "1", "name": "A", "availabilities": [window]}])

    def test_negative_default_duration_rejected(self):
        with pytest.raises(ValidationError, match="must not be negative"):
            AppConfig(defaults={"duration_minutes": -5})

    def test_unknown_timezone_rejected(self):
        with pytest.raises(ValidationError, match="Unknown timezone"):
            AppConfig(timezone="Mars/Olympus_Mons")


class TestParseDuration:
    """Tests for boundary duration parsing."""

    def test_parses_digits(self):
        assert parse_duration("90") == 90
        assert parse_duration(" 45 ") == 45
        assert parse_duration(120) == 120

    @pytest.mark.parametrize("raw", ["abc", "", "1.5", "90min"])
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(InvalidDurationError, match="expected to be a number"):
            parse_duration(raw)

    def test_rejects_bool(self):
        with pytest.raises(InvalidDurationError):
            parse_duration(True)

    def test_rejects_negative(self):
        with pytest.raises(InvalidDurationError, match="must not be negative"):
            parse_duration("-5")


class TestDurationFromEnvironment:
    """Tests for reading the duration from environment variables."""

    def test_unset_returns_none(self):
        assert duration_from_environment({}) is None

    def test_primary_variable(self):
        assert duration_from_environment({"PHOTOSLOT_DURATION_MINUTES": "120"}) == 120

    def test_legacy_variable(self):
        assert duration_from_environment({"npm_config_durationInMinutes": "45"}) == 45

    def test_primary_variable_takes_precedence(self):
        environ = {
            "PHOTOSLOT_DURATION_MINUTES": "30",
            "npm_config_durationInMinutes": "45",
        }

        assert duration_from_environment(environ) == 30

    def test_empty_value_is_ignored(self):
        assert duration_from_environment({"PHOTOSLOT_DURATION_MINUTES": ""}) is None

    def test_invalid_value_raises(self):
        with pytest.raises(InvalidDurationError):
            duration_from_environment({"PHOTOSLOT_DURATION_MINUTES": "lots"})

    def test_legacy_variable_with_unit_suffix_raises(self):
        """Values such as "90min" are not truncated to their leading digits."""
        with pytest.raises(InvalidDurationError, match="expected to be a number"):
            duration_from_environment({"npm_config_durationInMinutes": "90min"})
