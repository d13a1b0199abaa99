"""
ndsgrid Exceptions

Exception hierarchy for error handling.
"""


class NdsGridError(Exception):
    """Base exception for ndsgrid"""

    pass


class RangeError(NdsGridError, ValueError):
    """A value lies outside its admissible range"""

    pass
