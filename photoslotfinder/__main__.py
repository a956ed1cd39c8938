"""
Convenience entry point for running photoslotfinder directly.

Usage: python -m photoslotfinder [command] [options]
"""

from .cli.app import app

if __name__ == "__main__":
    app()
