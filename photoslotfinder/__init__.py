"""
photoslotfinder - find the earliest bookable slot per photographer.
"""

__version__ = "0.1.0"
