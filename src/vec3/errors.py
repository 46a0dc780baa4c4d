# errors.py


class Vector3Error(Exception):
    """Base class for errors raised when building a Vector3 from external data."""


class ParseVector3Error(Vector3Error, ValueError):
    """Raised when text cannot be parsed as a Vector3."""


class InvalidSequenceError(Vector3Error, ValueError):
    """Raised when a sequence does not hold exactly three coordinates."""
