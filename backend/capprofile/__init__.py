"""CAP Profile Checker — semantic validation of CAP alerts against publishing profiles."""

__version__ = "1.0.0"
