"""Quick-entry parsing for tasks and events (German/English)."""

__version__ = "0.1.0"
