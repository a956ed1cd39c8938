"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .photoslot_finder import PhotoslotFinderService, RosterSourceProtocol

__all__ = ["PhotoslotFinderService", "RosterSourceProtocol"]
