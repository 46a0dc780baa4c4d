from .consts import ONE, X_AXIS, Y_AXIS, Z_AXIS, ZERO
from .errors import InvalidSequenceError, ParseVector3Error, Vector3Error
from .Vector3 import Vector3

__all__ = [
    "Vector3",
    "X_AXIS",
    "Y_AXIS",
    "Z_AXIS",
    "ZERO",
    "ONE",
    "Vector3Error",
    "ParseVector3Error",
    "InvalidSequenceError",
]
