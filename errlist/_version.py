"""Version information for errlist."""

__version__ = "0.3.0"
