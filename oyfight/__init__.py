"""Turn-based terminal fighting game with optional sprite attack animations."""

__version__ = "0.1.0"