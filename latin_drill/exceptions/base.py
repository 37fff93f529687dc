"""Base exception classes for Latin Drill."""


class LatinDrillException(Exception):
    """Base exception for all Latin Drill errors.

    Every custom exception in the latin_drill package inherits from this
    class so callers can catch drill errors in one place.
    """

    pass
