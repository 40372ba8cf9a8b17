"""Personal diary backend: accounts, session tokens and owned diary entries."""

__version__ = "0.1.0"
