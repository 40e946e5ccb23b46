"""travelctl: visited-countries tracker with memory and SQL backends."""

__version__ = "0.1.0"
