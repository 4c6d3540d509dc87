"""Terminal interface for choosing a city and viewing its current weather."""

__version__ = "0.1.0"
__all__ = ["constants", "fuzzy", "weather", "tui"]