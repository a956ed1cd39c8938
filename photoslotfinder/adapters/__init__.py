"""
Adapters layer - Roster sources feeding the core.
"""

from .roster_sources import ConfigRosterSource, SampleRosterSource

__all__ = ["ConfigRosterSource", "SampleRosterSource"]
