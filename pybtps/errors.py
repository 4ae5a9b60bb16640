"""
Exceptions raised by pyBTPS.

Both exceptions derive from :class:`ValueError`, so callers that already guard
numeric input with ``except ValueError`` keep working.
"""


class InvalidInput(ValueError):
    """Raised when a value is not a single finite real number."""


class InvalidMeasurement(ValueError):
    """Raised when a set of lung volumes violates VC ≥ IC ≥ TV or EC ≥ TV."""
